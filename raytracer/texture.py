"""Textures: solid colours, checkers, Perlin noise and images."""

from __future__ import annotations

import math
import os
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from itertools import product

from PIL import Image

from raytracer.vec3 import Color, Point3, Vec3, clamp


class Texture(ABC):
    """Something that maps surface coordinates and a point to a colour."""

    @abstractmethod
    def value(self, u: float, v: float, p: Point3) -> Color:
        """The colour at texture coordinates ``(u, v)`` and point ``p``."""


@dataclass(frozen=True)
class SolidColor(Texture):
    """A texture of a single colour."""

    color: Color

    def value(self, u: float, v: float, p: Point3) -> Color:
        return self.color


@dataclass(frozen=True)
class Checker(Texture):
    """A 3D checker pattern alternating between two textures."""

    odd: Texture
    even: Texture

    def value(self, u: float, v: float, p: Point3) -> Color:
        sines = math.sin(10.0 * p.x) * math.sin(10.0 * p.y) * math.sin(10.0 * p.z)
        if sines < 0.0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)


class Perlin:
    """Gradient noise over random unit vectors on a 256-cell lattice."""

    POINT_COUNT = 256

    def __init__(self, rng: random.Random | None = None) -> None:
        rng = rng if rng is not None else random.Random()
        self._ranvec = [self._random_unit(rng) for _ in range(self.POINT_COUNT)]
        self._perm_x = self._generate_perm(rng)
        self._perm_y = self._generate_perm(rng)
        self._perm_z = self._generate_perm(rng)

    @staticmethod
    def _random_unit(rng: random.Random) -> Vec3:
        return Vec3(*(-1.0 + 2.0 * rng.random() for _ in range(3))).unit()

    @classmethod
    def _generate_perm(cls, rng: random.Random) -> list[int]:
        perm = list(range(cls.POINT_COUNT))
        for i in range(cls.POINT_COUNT - 1, 0, -1):
            target = rng.randrange(256) % i
            perm[i], perm[target] = perm[target], perm[i]
        return perm

    def noise(self, p: Point3) -> float:
        """Smoothly interpolated noise value at ``p``."""
        i, j, k = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u, v, w = p.x - i, p.y - j, p.z - k
        u = u * u * (3.0 - 2.0 * u)
        v = v * v * (3.0 - 2.0 * v)
        w = w * w * (3.0 - 2.0 * w)
        acc = 0.0
        for di, dj, dk in product((0, 1), repeat=3):
            gradient = self._ranvec[
                self._perm_x[(i + di) & 255]
                ^ self._perm_y[(j + dj) & 255]
                ^ self._perm_z[(k + dk) & 255]
            ]
            weight = Vec3(u - di, v - dj, w - dk)
            acc += (
                (di * u + (1 - di) * (1.0 - u))
                * (dj * v + (1 - dj) * (1.0 - v))
                * (dk * w + (1 - dk) * (1.0 - w))
                * gradient.dot(weight)
            )
        return acc

    def turb(self, p: Point3, depth: int = 7) -> float:
        """Turbulence: absolute sum of ``depth`` octaves of noise."""
        acc = 0.0
        point = p
        weight = 1.0
        for _ in range(depth):
            acc += weight * self.noise(point)
            weight *= 0.5
            point = point * 2.0
        return abs(acc)


@dataclass(frozen=True)
class NoiseTexture(Texture):
    """A marble-like texture driven by Perlin turbulence."""

    scale: float
    noise: Perlin = field(default_factory=Perlin)

    def value(self, u: float, v: float, p: Point3) -> Color:
        return Vec3(1.0, 1.0, 1.0) * (1.0 + math.sin(self.scale * p.z + 10.0 * self.noise.turb(p, 7))) * 0.5


def _to_index(x: float) -> int:
    return 0 if math.isnan(x) else int(x)


class ImageTexture(Texture):
    """A texture sampled from an image file, addressed by ``(u, v)``."""

    BYTES_PER_PIXEL = 3

    def __init__(self, filename: str | os.PathLike[str]) -> None:
        with Image.open(filename) as image:
            rgb = image.convert("RGB")
            self.width, self.height = rgb.size
            self.data = rgb.tobytes()
        self.bytes_per_scanline = self.BYTES_PER_PIXEL * self.width

    def value(self, u: float, v: float, p: Point3) -> Color:
        u = clamp(u, 0.0, 1.0)
        v = 1.0 - clamp(v, 0.0, 1.0)
        i = min(_to_index(u * self.width), self.width - 1)
        j = min(_to_index(v * self.height), self.height - 1)
        scale = 1.0 / 255.0
        index = j * self.bytes_per_scanline + i * self.BYTES_PER_PIXEL
        r, g, b = self.data[index:index + self.BYTES_PER_PIXEL]
        return Vec3(scale * r, scale * g, scale * b)