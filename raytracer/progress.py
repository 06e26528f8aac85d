"""A simple terminal progress bar."""

from __future__ import annotations

import math
import os
import sys
import threading
from typing import TextIO

_STATUS_WIDTH = 10
_DEFAULT_WIDTH = 80


def _terminal_width(stream: TextIO) -> int:
    try:
        return os.get_terminal_size(stream.fileno()).columns
    except (OSError, ValueError, AttributeError):
        return _DEFAULT_WIDTH


class ProgressBar:
    """Draws a bar that advances by one step on each call to :meth:`update`."""

    def __init__(
        self, max_idx: int, stream: TextIO | None = None, width: int | None = None
    ) -> None:
        if max_idx <= 0:
            raise ValueError("max_idx must be positive")
        self.max_idx = max_idx
        self.last_idx = 0
        self._stream = stream
        self._width = width
        self._lock = threading.Lock()

    def update(self) -> None:
        """Redraw the bar for the current step, then advance one step."""
        stream = self._stream if self._stream is not None else sys.stderr
        with self._lock:
            width = self._width if self._width is not None else _terminal_width(stream)
            max_bar_width = max(width - _STATUS_WIDTH, 0)
            ratio = self.last_idx / self.max_idx
            bar_width = int(math.floor(ratio * max_bar_width + 0.5))
            if bar_width > max_bar_width:
                raise ValueError("progress bar advanced past its end")
            self.last_idx += 1
            percent = int(math.floor(ratio * 100.0 + 0.5))
            stream.write(
                f"\r {'█' * bar_width}{' ' * (max_bar_width - bar_width)}▎{percent}%"
            )
            stream.flush()