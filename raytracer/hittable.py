"""Hittable geometry: hit records, bounding boxes, lists and spheres."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from raytracer.ray import Ray
from raytracer.vec3 import Point3, Vec3

if TYPE_CHECKING:
    from raytracer.material import Material


def _divide(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


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


def _asin(x: float) -> float:
    return math.asin(x) if -1.0 <= x <= 1.0 else math.nan


def get_sphere_uv(p: Point3) -> tuple[float, float]:
    """Texture coordinates of a point ``p`` on the unit sphere."""
    phi = math.atan2(p.z, p.x)
    theta = _asin(p.y)
    u = 1.0 - (phi + math.pi) / (2.0 * math.pi)
    v = (theta + math.pi / 2.0) / math.pi
    return u, v


@dataclass(frozen=True)
class AABB:
    """An axis-aligned bounding box."""

    minimum: Point3
    maximum: Point3

    def hit(self, r: Ray, t_min: float, t_max: float) -> bool:
        """Whether the ray passes through the box within ``(t_min, t_max)``."""
        for axis in range(3):
            inv_d = _divide(1.0, r.direction[axis])
            t0 = (self.minimum[axis] - r.origin[axis]) * inv_d
            t1 = (self.maximum[axis] - r.origin[axis]) * inv_d
            if t0 > t1:
                t0, t1 = t1, t0
            if _fmin(t1, t_max) <= _fmax(t0, t_min):
                return False
        return True


def surrounding_box(box0: AABB, box1: AABB) -> AABB:
    """The smallest box enclosing both boxes."""
    small = Vec3(
        _fmin(box0.minimum.x, box1.minimum.x),
        _fmin(box0.minimum.y, box1.minimum.y),
        _fmin(box0.minimum.z, box1.minimum.z),
    )
    big = Vec3(
        _fmax(box0.maximum.x, box1.maximum.x),
        _fmax(box0.maximum.y, box1.maximum.y),
        _fmax(box0.maximum.z, box1.maximum.z),
    )
    return AABB(small, big)


@dataclass
class HitRecord:
    """Where and how a ray met a surface."""

    p: Point3 = field(default_factory=Vec3.zero)
    normal: Vec3 = field(default_factory=Vec3.zero)
    material: Material | None = None
    t: float = 0.0
    u: float = 0.0
    v: float = 0.0
    front_face: bool = False

    def set_face_normal(self, r: Ray, outward_normal: Vec3) -> None:
        """Orient the normal against the ray and record which side was hit."""
        self.front_face = r.direction.dot(outward_normal) <= 0.0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Anything a ray can hit."""

    @abstractmethod
    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """The nearest hit with ``t_min < t < t_max``, or ``None``."""

    @abstractmethod
    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        """A box enclosing the object over the time interval, or ``None``."""


@dataclass
class HittableList(Hittable):
    """A collection of hittables treated as one."""

    objects: list[Hittable] = field(default_factory=list)

    def add(self, obj: Hittable) -> None:
        self.objects.append(obj)

    def clear(self) -> None:
        self.objects.clear()

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        closest: HitRecord | None = None
        closest_so_far = t_max
        for obj in self.objects:
            record = obj.hit(r, t_min, closest_so_far)
            if record is not None:
                closest = record
                closest_so_far = record.t
        return closest

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        result: AABB | None = None
        for obj in self.objects:
            box = obj.bounding_box(time0, time1)
            if box is None:
                return None
            result = box if result is None else surrounding_box(result, box)
        return result


def _sphere_hit(
    r: Ray, center: Point3, radius: float, t_min: float, t_max: float
) -> HitRecord | None:
    oc = r.origin - center
    a = r.direction.length_squared()
    half_b = oc.dot(r.direction)
    c = oc.length_squared() - radius * radius
    discriminant = half_b * half_b - a * c
    if discriminant <= 0.0:
        return None
    root = math.sqrt(discriminant)
    for t in ((-half_b - root) / a, (-half_b + root) / a):
        if t_min < t < t_max:
            record = HitRecord(t=t, p=r.at(t))
            record.set_face_normal(r, (record.p - center) / radius)
            return record
    return None


@dataclass(frozen=True)
class Sphere(Hittable):
    """A stationary sphere."""

    center: Point3
    radius: float
    material: Material

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        record = _sphere_hit(r, self.center, self.radius, t_min, t_max)
        if record is None:
            return None
        record.u, record.v = get_sphere_uv((record.p - self.center) / self.radius)
        record.material = self.material
        return record

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        extent = Vec3(self.radius, self.radius, self.radius)
        return AABB(self.center - extent, self.center + extent)


@dataclass(frozen=True)
class MovingSphere(Hittable):
    """A sphere moving linearly from ``center0`` at ``time0`` to ``center1`` at ``time1``."""

    center0: Point3
    center1: Point3
    radius: float
    material: Material
    time0: float
    time1: float

    def center(self, time: float) -> Point3:
        fraction = _divide(time - self.time0, self.time1 - self.time0)
        return self.center0 + fraction * (self.center1 - self.center0)

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        record = _sphere_hit(r, self.center(r.time), self.radius, t_min, t_max)
        if record is None:
            return None
        record.material = self.material
        return record

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        extent = Vec3(self.radius, self.radius, self.radius)
        start, end = self.center(time0), self.center(time1)
        return surrounding_box(
            AABB(start - extent, start + extent), AABB(end - extent, end + extent)
        )