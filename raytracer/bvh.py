"""Bounding volume hierarchies and participating media."""

from __future__ import annotations

import math
import random
import sys
from collections.abc import Sequence

from raytracer.hittable import AABB, HitRecord, Hittable, surrounding_box
from raytracer.material import Isotropic
from raytracer.ray import Ray
from raytracer.texture import Texture
from raytracer.vec3 import Vec3

_NO_BOX_WARNING = "No bounding box in bvh_node constructor."


def _zero_box() -> AABB:
    return AABB(Vec3.zero(), Vec3.zero())


def _box_min(obj: Hittable, axis: int) -> float:
    """The lower bound of ``obj``'s box along ``axis``, used to order objects."""
    box = obj.bounding_box(0.0, 0.0)
    if box is None:
        print(_NO_BOX_WARNING, file=sys.stderr)
        box = _zero_box()
    value = box.minimum[axis]
    if math.isnan(value):
        raise ValueError("cannot order objects whose bounding box is NaN")
    return value


class BvhNode(Hittable):
    """A binary tree of bounding boxes that speeds up ray intersection."""

    def __init__(self, objects: Sequence[Hittable], time0: float, time1: float) -> None:
        objects = list(objects)
        if not objects:
            raise ValueError("cannot build a bounding volume hierarchy of no objects")
        axis = random.randrange(3)

        if len(objects) == 1:
            self.left = self.right = objects[0]
        elif len(objects) == 2:
            first, second = objects
            if _box_min(first, axis) < _box_min(second, axis):
                self.left, self.right = first, second
            else:
                self.left, self.right = second, first
        else:
            ordered = sorted(objects, key=lambda obj: _box_min(obj, axis))
            mid = len(ordered) // 2
            self.left = BvhNode(ordered[:mid], time0, time1)
            self.right = BvhNode(ordered[mid:], time0, time1)

        box_left = self.left.bounding_box(time0, time1)
        box_right = self.right.bounding_box(time0, time1) if box_left is not None else None
        if box_left is None or box_right is None:
            print(_NO_BOX_WARNING, file=sys.stderr)
        self.bbox = surrounding_box(
            box_left if box_left is not None else _zero_box(),
            box_right if box_right is not None else _zero_box(),
        )

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        if not self.bbox.hit(r, t_min, t_max):
            return None
        left = self.left.hit(r, t_min, t_max)
        right = self.right.hit(r, t_min, left.t if left is not None else t_max)
        return right if right is not None else left

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        left = self.left.bounding_box(time0, time1)
        right = self.right.bounding_box(time0, time1) if left is not None else None
        if left is None or right is None:
            raise ValueError("No bounding box in bvh_node::bounding_box.")
        return surrounding_box(left, right)


def _ln(x: float) -> float:
    if x > 0:
        return math.log(x)
    return -math.inf if x == 0 else math.nan


class ConstantMedium(Hittable):
    """A volume of constant density, such as smoke or fog, inside a boundary."""

    def __init__(self, boundary: Hittable, density: float, texture: Texture) -> None:
        self.boundary = boundary
        self.phase_function = Isotropic(texture)
        if density == 0:
            self.neg_inv_density = -math.copysign(math.inf, density)
        else:
            self.neg_inv_density = -1.0 / density

    def hit(self, r: Ray, t_min: float, t_max: float) -> HitRecord | None:
        entry = self.boundary.hit(r, -math.inf, math.inf)
        if entry is None:
            return None
        exit_ = self.boundary.hit(r, entry.t + 0.0001, math.inf)
        if exit_ is None:
            return None

        t_enter = t_min if entry.t < t_min else entry.t
        t_exit = t_max if exit_.t > t_max else exit_.t
        if t_enter >= t_exit:
            return None
        if t_enter < 0.0:
            t_enter = 0.0

        ray_length = r.direction.length()
        distance_inside_boundary = (t_exit - t_enter) * ray_length
        hit_distance = self.neg_inv_density * _ln(random.random())
        if hit_distance > distance_inside_boundary:
            return None

        t = t_enter + hit_distance / ray_length
        return HitRecord(
            p=r.at(t),
            normal=Vec3(1.0, 0.0, 0.0),
            material=self.phase_function,
            t=t,
            front_face=True,
        )

    def bounding_box(self, time0: float, time1: float) -> AABB | None:
        return self.boundary.bounding_box(time0, time1)