"""Instances that move or rotate another hittable."""

from __future__ import annotations

import math
from abc import abstractmethod
from dataclasses import dataclass
from itertools import product

from raytracer.hittable import AABB, HitRecord, Hittable
from raytracer.ray import Ray
from raytracer.vec3 import Vec3, degrees_to_radians


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a > b else b


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a < b else b


@dataclass(frozen=True)
class Translation(Hittable):
    """Another hittable displaced by ``offset``."""

    ptr: Hittable
    offset: Vec3

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        moved = Ray(r.origin - self.offset, r.direction, r.time)
        record = self.ptr.hit(moved, t_min, t_max)
        if record is None:
            return None
        record.p = record.p + self.offset
        record.set_face_normal(moved, record.normal)
        return record

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        inner = self.ptr.bounding_box(time0, time1)
        if inner is None:
            return None
        return AABB(inner.minimum + self.offset, inner.maximum + self.offset)


class _Rotation(Hittable):
    """Another hittable rotated by ``angle`` degrees about a coordinate axis."""

    def __init__(self, ptr: Hittable, angle: float) -> None:
        radians = degrees_to_radians(angle)
        self.ptr = ptr
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)
        inner = ptr.bounding_box(0.0, 1.0)
        self.hasbox = inner is not None
        source = inner if inner is not None else AABB(Vec3.zero(), Vec3.zero())

        lows = [math.inf] * 3
        highs = [-math.inf] * 3
        for i, j, k in product((0, 1), repeat=3):
            corner = self._to_world(
                Vec3(
                    i * source.maximum.x + (1 - i) * source.minimum.x,
                    j * source.maximum.y + (1 - j) * source.minimum.y,
                    k * source.maximum.z + (1 - k) * source.minimum.z,
                )
            )
            lows = [_fmin(low, c) for low, c in zip(lows, corner)]
            highs = [_fmax(high, c) for high, c in zip(highs, corner)]
        self.bbox = AABB(Vec3(*lows), Vec3(*highs))

    @abstractmethod
    def _to_world(self, v: Vec3) -> Vec3:
        """Rotate from object space into world space."""

    @abstractmethod
    def _to_object(self, v: Vec3) -> Vec3:
        """Rotate from world space into object space."""

    def _rotated_hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        rotated = Ray(self._to_object(r.origin), self._to_object(r.direction), r.time)
        record = self.ptr.hit(rotated, t_min, t_max)
        if record is None:
            return None
        record.p = self._to_world(record.p)
        record.set_face_normal(rotated, self._to_world(record.normal))
        return record

    def _rotated_box(self) -> AABB | None:
        return self.bbox if self.hasbox else None


class RotateX(_Rotation):
    """Rotation about the x axis."""

    def _to_world(self, v: Vec3) -> Vec3:
        s, c = self.sin_theta, self.cos_theta
        return Vec3(v.x, c * v.y - s * v.z, s * v.y + c * v.z)

    def _to_object(self, v: Vec3) -> Vec3:
        s, c = self.sin_theta, self.cos_theta
        return Vec3(v.x, c * v.y + s * v.z, -s * v.y + c * v.z)

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        return self._rotated_hit(r, t_min, t_max)

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        return self._rotated_box()


class RotateY(_Rotation):
    """Rotation about the y axis."""

    def _to_world(self, v: Vec3) -> Vec3:
        s, c = self.sin_theta, self.cos_theta
        return Vec3(c * v.x + s * v.z, v.y, -s * v.x + c * v.z)

    def _to_object(self, v: Vec3) -> Vec3:
        s, c = self.sin_theta, self.cos_theta
        return Vec3(c * v.x - s * v.z, v.y, s * v.x + c * v.z)

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        return self._rotated_hit(r, t_min, t_max)

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        return self._rotated_box()


class RotateZ(_Rotation):
    """Rotation about the z axis."""

    def _to_world(self, v: Vec3) -> Vec3:
        s, c = self.sin_theta, self.cos_theta
        return Vec3(c * v.x - s * v.y, s * v.x + c * v.y, v.z)

    def _to_object(self, v: Vec3) -> Vec3:
        s, c = self.sin_theta, self.cos_theta
        return Vec3(c * v.x + s * v.y, -s * v.x + c * v.y, v.z)

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        return self._rotated_hit(r, t_min, t_max)

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        return self._rotated_box()