"""Surface materials: how rays scatter from, or are emitted by, a surface."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from raytracer.ray import Ray
from raytracer.texture import Texture
from raytracer.vec3 import Color, Point3, Vec3

if TYPE_CHECKING:
    from raytracer.hittable import HitRecord

Scatter = tuple[Color, Ray]


def _sqrt(x: float) -> float:
    return math.sqrt(x) if x >= 0 else math.nan


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """Mirror ``v`` about the surface normal ``n``."""
    return v - (2.0 * v.dot(n)) * n


def refract(uv: Vec3, n: Vec3, etai_over_etat: float) -> Vec3:
    """Bend the unit direction ``uv`` through a surface with normal ``n`` (Snell's law)."""
    cos_theta = min((-uv).dot(n), 1.0)
    r_out_perp = etai_over_etat * (uv + cos_theta * n)
    r_out_parallel = -_sqrt(1.0 - r_out_perp.length_squared()) * n
    return r_out_perp + r_out_parallel


def schlick(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation of the reflectance of a dielectric."""
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * (1.0 - cosine) ** 5


class Material(ABC):
    """Describes how light interacts with a surface."""

    @abstractmethod
    def scatter(self, r_in: Ray, rec: HitRecord) -> Scatter | None:
        """``(attenuation, scattered_ray)``, or ``None`` if the ray is absorbed."""

    def emitted(self, u: float, v: float, p: Point3) -> Color:
        """Light emitted at the hit point; black unless the material glows."""
        return Vec3.zero()


@dataclass(frozen=True)
class Lambertian(Material):
    """An ideal diffuse surface."""

    albedo: Texture

    def scatter(self, r_in: Ray, rec: HitRecord) -> Scatter | None:
        direction = rec.normal + Vec3.random_unit_vector()
        scattered = Ray(rec.p, direction, r_in.time)
        return self.albedo.value(rec.u, rec.v, rec.p), scattered


@dataclass(frozen=True)
class Metal(Material):
    """A reflective surface whose reflections are blurred by ``fuzz``."""

    albedo: Color
    fuzz: float

    def scatter(self, r_in: Ray, rec: HitRecord) -> Scatter | None:
        reflected = reflect(r_in.direction.unit(), rec.normal)
        scattered = Ray(
            rec.p, reflected + self.fuzz * Vec3.random_in_unit_sphere(), r_in.time
        )
        if scattered.direction.dot(rec.normal) > 0.0:
            return self.albedo, scattered
        return None


@dataclass(frozen=True)
class Dielectric(Material):
    """A clear material such as glass, refracting or reflecting each ray."""

    ref_idx: float

    def scatter(self, r_in: Ray, rec: HitRecord) -> Scatter | None:
        attenuation = Vec3(1.0, 1.0, 1.0)
        etai_over_etat = 1.0 / self.ref_idx if rec.front_face else self.ref_idx
        unit_direction = r_in.direction.unit()
        cos_theta = (-unit_direction).dot(rec.normal)
        if cos_theta < 0.0:
            raise ValueError("cos_theta must be positive")
        sin_theta = _sqrt(1.0 - cos_theta * cos_theta)
        if (
            etai_over_etat * sin_theta > 1.0
            or random.random() < schlick(cos_theta, etai_over_etat)
        ):
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, etai_over_etat)
        return attenuation, Ray(rec.p, direction, r_in.time)


@dataclass(frozen=True)
class DiffuseLight(Material):
    """A light source: emits its texture's colour and scatters nothing."""

    emit: Texture

    def scatter(self, r_in: Ray, rec: HitRecord) -> Scatter | None:
        return None

    def emitted(self, u: float, v: float, p: Point3) -> Color:
        return self.emit.value(u, v, p)


@dataclass(frozen=True)
class Isotropic(Material):
    """Scatters uniformly in all directions; used inside participating media."""

    albedo: Texture

    def scatter(self, r_in: Ray, rec: HitRecord) -> Scatter | None:
        scattered = Ray(rec.p, Vec3.random_in_unit_sphere(), r_in.time)
        return self.albedo.value(rec.u, rec.v, rec.p), scattered