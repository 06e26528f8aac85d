"""Axis-aligned rectangles and boxes built from them."""

from __future__ import annotations

import math
from dataclasses import dataclass

from raytracer.hittable import AABB, HitRecord, Hittable, HittableList
from raytracer.material import Material
from raytracer.ray import Ray
from raytracer.vec3 import Point3, Vec3

_THICKNESS = 0.0001


def _divide(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _rect_hit(
    r: Ray,
    t_min: float,
    t_max: float,
    axes: tuple[int, int, int],
    bounds: tuple[float, float, float, float],
    k: float,
    outward_normal: Vec3,
    material: Material,
) -> HitRecord | None:
    """Intersect a ray with a rectangle lying in the plane ``axis == k``."""
    plane_axis, a_axis, b_axis = axes
    a0, a1, b0, b1 = bounds
    t = _divide(k - r.origin[plane_axis], r.direction[plane_axis])
    if t < t_min or t > t_max:
        return None
    a = r.origin[a_axis] + t * r.direction[a_axis]
    b = r.origin[b_axis] + t * r.direction[b_axis]
    if a < a0 or a > a1 or b < b0 or b > b1:
        return None
    record = HitRecord(
        t=t,
        u=_divide(a - a0, a1 - a0),
        v=_divide(b - b0, b1 - b0),
        material=material,
    )
    record.set_face_normal(r, outward_normal)
    record.p = r.at(t)
    return record


@dataclass(frozen=True)
class XYRect(Hittable):
    """A rectangle ``x0..x1`` by ``y0..y1`` in the plane ``z = k``."""

    x0: float
    x1: float
    y0: float
    y1: float
    k: float
    material: Material

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        return _rect_hit(
            r, t_min, t_max, (2, 0, 1),
            (self.x0, self.x1, self.y0, self.y1), self.k,
            Vec3(0.0, 0.0, 1.0), self.material,
        )

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        return AABB(
            Vec3(self.x0, self.y0, self.k - _THICKNESS),
            Vec3(self.x1, self.y1, self.k + _THICKNESS),
        )


@dataclass(frozen=True)
class XZRect(Hittable):
    """A rectangle ``x0..x1`` by ``z0..z1`` in the plane ``y = k``."""

    x0: float
    x1: float
    z0: float
    z1: float
    k: float
    material: Material

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        return _rect_hit(
            r, t_min, t_max, (1, 0, 2),
            (self.x0, self.x1, self.z0, self.z1), self.k,
            Vec3(0.0, 1.0, 0.0), self.material,
        )

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        return AABB(
            Vec3(self.x0, self.k - _THICKNESS, self.z0),
            Vec3(self.x1, self.k + _THICKNESS, self.z1),
        )


@dataclass(frozen=True)
class YZRect(Hittable):
    """A rectangle ``y0..y1`` by ``z0..z1`` in the plane ``x = k``."""

    y0: float
    y1: float
    z0: float
    z1: float
    k: float
    material: Material

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        return _rect_hit(
            r, t_min, t_max, (0, 1, 2),
            (self.y0, self.y1, self.z0, self.z1), self.k,
            Vec3(1.0, 0.0, 0.0), self.material,
        )

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        return AABB(
            Vec3(self.k - _THICKNESS, self.y0, self.z0),
            Vec3(self.k + _THICKNESS, self.y1, self.z1),
        )


class Cuboid(Hittable):
    """An axis-aligned box between corners ``p0`` and ``p1``, made of six rectangles."""

    def __init__(self, p0: Point3, p1: Point3, material: Material) -> None:
        self.box_min = p0
        self.box_max = p1
        self.material = material
        self.sides = HittableList(
            [
                XYRect(p0.x, p1.x, p0.y, p1.y, p1.z, material),
                XYRect(p0.x, p1.x, p0.y, p1.y, p0.z, material),
                XZRect(p0.x, p1.x, p0.z, p1.z, p1.y, material),
                XZRect(p0.x, p1.x, p0.z, p1.z, p0.y, material),
                YZRect(p0.y, p1.y, p0.z, p1.z, p1.x, material),
                YZRect(p0.y, p1.y, p0.z, p1.z, p0.x, material),
            ]
        )

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        return self.sides.hit(r, t_min, t_max)

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        return AABB(self.box_min, self.box_max)