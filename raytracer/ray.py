"""Rays and the recursive colour integrator."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from raytracer.vec3 import Color, Point3, Vec3


@dataclass(frozen=True, slots=True)
class Ray:
    """A ray ``origin + t * direction`` emitted at a given time."""

    origin: Point3
    direction: Vec3
    time: float = 0.0

    def at(self, t: float) -> Point3:
        return self.origin + self.direction * t

    def color(self, background: Color, world: Any, depth: int) -> Color:
        """Trace the ray through ``world`` for at most ``depth`` bounces.

        ``world.hit(ray, t_min, t_max)`` returns a hit record or ``None``.
        The record's material provides ``emitted(u, v, p)`` and
        ``scatter(ray, record)``, the latter returning ``None`` when the ray
        is absorbed, otherwise ``(attenuation, scattered_ray)``.
        """
        accumulated = Vec3.zero()
        throughput = Vec3(1.0, 1.0, 1.0)
        ray = self
        for _ in range(depth):
            record = world.hit(ray, 0.001, math.inf)
            if record is None:
                return accumulated + throughput * background
            material = record.material
            if material is None:
                raise ValueError("hit record has no material")
            emitted = material.emitted(record.u, record.v, record.p)
            accumulated = accumulated + throughput * emitted
            scattered = material.scatter(ray, record)
            if scattered is None:
                return accumulated
            attenuation, ray = scattered
            throughput = throughput * attenuation
        return accumulated