"""A thin-lens camera with a shutter interval."""

from __future__ import annotations

import math
import random

from raytracer.ray import Ray
from raytracer.vec3 import Point3, Vec3, degrees_to_radians


class Camera:
    """Generates primary rays for normalised screen coordinates."""

    def __init__(
        self,
        lookfrom: Point3,
        lookat: Point3,
        vup: Vec3,
        vfov: float,
        aspect_ratio: float,
        aperture: float,
        focus_dist: float,
        time0: float = 0.0,
        time1: float = 1.0,
    ) -> None:
        theta = degrees_to_radians(vfov)
        viewport_height = 2.0 * math.tan(theta / 2.0)
        viewport_width = aspect_ratio * viewport_height

        w = (lookfrom - lookat).unit()
        u = vup.cross(w).unit()
        v = w.cross(u)

        self.origin = lookfrom
        self.horizontal = focus_dist * viewport_width * u
        self.vertical = focus_dist * viewport_height * v
        self.lower_left_corner = (
            self.origin - self.horizontal / 2.0 - self.vertical / 2.0 - focus_dist * w
        )
        self.lens_radius = aperture / 2.0
        self.time0 = time0
        self.time1 = time1

    def get_ray(self, u: float, v: float) -> Ray:
        """A ray through screen point ``(u, v)`` at a random shutter time."""
        if not self.time0 < self.time1:
            raise ValueError(f"empty shutter interval {self.time0}..{self.time1}")
        rd = self.lens_radius * Vec3.random_in_unit_disk()
        offset = Vec3(u * rd.x, v * rd.y, 0.0)
        start = self.origin + offset
        direction = self.lower_left_corner + u * self.horizontal + v * self.vertical - start
        time = self.time0 + (self.time1 - self.time0) * random.random()
        return Ray(start, direction, time)