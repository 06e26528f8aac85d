"""Three-component vectors used for points, directions and colours."""

from __future__ import annotations

import math
import random
from collections.abc import Iterator
from dataclasses import dataclass


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * math.pi / 180.0


def clamp(x: float, min_value: float, max_value: float) -> float:
    """Limit ``x`` to the closed range ``[min_value, max_value]``."""
    if x < min_value:
        return min_value
    if x > max_value:
        return max_value
    return x


def _divide(a: float, b: float) -> float:
    """Floating-point division following IEEE rules for a zero divisor."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _sqrt(x: float) -> float:
    return math.sqrt(x) if x >= 0 else math.nan


def _round_half_away(x: float) -> float:
    if not math.isfinite(x):
        return x
    return math.copysign(math.floor(abs(x) + 0.5), x)


def _saturating_byte(x: float) -> int:
    """Convert to an 8-bit value, saturating at the bounds; NaN becomes 0."""
    if math.isnan(x) or x <= 0:
        return 0
    if x >= 255:
        return 255
    return int(x)


def _uniform(low: float, high: float) -> float:
    """Sample uniformly from the half-open range ``[low, high)``."""
    if not low < high:
        raise ValueError(f"cannot sample empty range {low}..{high}")
    return low + (high - low) * random.random()


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return repr(value)


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector; also used for points and RGB colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def zero() -> Vec3:
        return Vec3(0.0, 0.0, 0.0)

    @staticmethod
    def random() -> Vec3:
        """A vector with each component drawn from ``[0, 1)``."""
        return Vec3(random.random(), random.random(), random.random())

    @staticmethod
    def random_range(min_value: float, max_value: float) -> Vec3:
        """A vector with each component drawn from ``[min_value, max_value)``."""
        return Vec3(
            _uniform(min_value, max_value),
            _uniform(min_value, max_value),
            _uniform(min_value, max_value),
        )

    @staticmethod
    def random_in_unit_sphere() -> Vec3:
        """A random point strictly inside the unit sphere."""
        while True:
            candidate = Vec3.random_range(-1.0, 1.0)
            if candidate.length() < 1.0:
                return candidate

    @staticmethod
    def random_unit_vector() -> Vec3:
        """A random direction on the unit sphere."""
        a = _uniform(0.0, 2.0 * math.pi)
        z = _uniform(-1.0, 1.0)
        r = math.sqrt(1.0 - z * z)
        return Vec3(r * math.cos(a), r * math.sin(a), z)

    @staticmethod
    def random_in_unit_disk() -> Vec3:
        """A random point strictly inside the unit disk in the z = 0 plane."""
        while True:
            x = _uniform(-1.0, 1.0)
            y = _uniform(-1.0, 1.0)
            if x * x + y * y < 1.0:
                return Vec3(x, y, 0.0)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return _sqrt(self.length_squared())

    def unit(self) -> Vec3:
        return self / self.length()

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def to_bytes(self) -> tuple[int, int, int]:
        """The colour as 8-bit channels, without gamma correction."""
        return (
            _saturating_byte(255.999 * self.x),
            _saturating_byte(255.999 * self.y),
            _saturating_byte(255.999 * self.z),
        )

    def get_color(self, samples_per_pixel: int) -> tuple[int, int, int]:
        """Average over the samples, gamma-correct (gamma 2) and quantise."""
        scale = _divide(1.0, samples_per_pixel)
        return tuple(
            _saturating_byte(
                _round_half_away(255.999 * clamp(_sqrt(channel * scale), 0.0, 0.999))
            )
            for channel in self
        )

    def write(self, samples_per_pixel: int) -> None:
        """Print the corrected colour as ``r g b`` on standard output."""
        print(" ".join(str(channel) for channel in self.get_color(samples_per_pixel)))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        if index == 2:
            return self.z
        raise IndexError("Vec3 index out of range")

    def __str__(self) -> str:
        return " ".join(_format_float(float(c)) for c in self)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, other: Vec3 | float) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vec3:
        if isinstance(other, (int, float)):
            return Vec3(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __truediv__(self, other: float) -> Vec3:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Vec3(_divide(self.x, other), _divide(self.y, other), _divide(self.z, other))


Point3 = Vec3
Color = Vec3