"""Small demonstration scenes: Cornell boxes, lights and textured spheres."""

from __future__ import annotations

import os

from raytracer.bvh import BvhNode, ConstantMedium
from raytracer.hittable import Hittable, HittableList, Sphere
from raytracer.material import DiffuseLight, Lambertian, Material
from raytracer.shapes import Cuboid, XYRect, XZRect, YZRect
from raytracer.texture import Checker, ImageTexture, NoiseTexture, SolidColor
from raytracer.transform import RotateY, Translation
from raytracer.vec3 import Color, Point3, Vec3


def _wrap(objects: list[Hittable]) -> HittableList:
    return HittableList([BvhNode(objects, 0.0, 0.0)])


def _lambertian(r: float, g: float, b: float) -> Material:
    return Lambertian(SolidColor(Color(r, g, b)))


def _cornell_room(
    light_bounds: tuple[float, float, float, float],
) -> tuple[list[Hittable], Hittable, Hittable]:
    """The walls, light and the two boxes (tall, short) of a Cornell box."""
    red = _lambertian(0.65, 0.05, 0.05)
    white = _lambertian(0.73, 0.73, 0.73)
    green = _lambertian(0.12, 0.45, 0.15)
    light = DiffuseLight(SolidColor(Color(15.0, 15.0, 15.0)))

    x0, x1, z0, z1 = light_bounds
    walls: list[Hittable] = [
        YZRect(0.0, 555.0, 0.0, 555.0, 555.0, green),
        YZRect(0.0, 555.0, 0.0, 555.0, 0.0, red),
        XZRect(x0, x1, z0, z1, 554.0, light),
        XZRect(0.0, 555.0, 0.0, 555.0, 0.0, white),
        XZRect(0.0, 555.0, 0.0, 555.0, 555.0, white),
        XYRect(0.0, 555.0, 0.0, 555.0, 555.0, white),
    ]
    tall = Translation(
        RotateY(Cuboid(Point3(0.0, 0.0, 0.0), Point3(165.0, 330.0, 165.0), white), 15.0),
        Vec3(265.0, 0.0, 295.0),
    )
    short = Translation(
        RotateY(Cuboid(Point3(0.0, 0.0, 0.0), Point3(165.0, 165.0, 165.0), white), -18.0),
        Vec3(130.0, 0.0, 65.0),
    )
    return walls, tall, short


def cornell_box() -> HittableList:
    """The classic Cornell box with two rotated white boxes."""
    walls, tall, short = _cornell_room((213.0, 343.0, 227.0, 332.0))
    return _wrap([*walls, tall, short])


def cornell_smoke() -> HittableList:
    """The Cornell box with its two boxes replaced by dark and light smoke."""
    walls, tall, short = _cornell_room((113.0, 443.0, 127.0, 432.0))
    return _wrap(
        [
            *walls,
            ConstantMedium(tall, 0.01, SolidColor(Color(0.0, 0.0, 0.0))),
            ConstantMedium(short, 0.01, SolidColor(Color(1.0, 1.0, 1.0))),
        ]
    )


def earthball(image_path: str | os.PathLike[str] = "images/earth.png") -> HittableList:
    """A single sphere textured with the image at ``image_path``."""
    material = Lambertian(ImageTexture(image_path))
    return _wrap([Sphere(Point3(0.0, 0.0, 0.0), 2.0, material)])


def simple_light() -> HittableList:
    """Two marble spheres lit by a glowing sphere and a rectangular lamp."""
    marble = Lambertian(NoiseTexture(4.0))
    glow = DiffuseLight(SolidColor(Color(4.0, 4.0, 4.0)))
    return _wrap(
        [
            Sphere(Point3(0.0, -1000.0, 0.0), 1000.0, marble),
            Sphere(Point3(0.0, 2.0, 0.0), 2.0, marble),
            Sphere(Point3(0.0, 7.0, 0.0), 2.0, glow),
            XYRect(3.0, 5.0, 1.0, 3.0, -2.0, glow),
        ]
    )


def two_checker_spheres() -> HittableList:
    """Two large checkered spheres touching at the origin."""
    checker = Checker(
        SolidColor(Color(0.2, 0.3, 0.1)),
        SolidColor(Color(0.9, 0.9, 0.9)),
    )
    material = Lambertian(checker)
    return _wrap(
        [
            Sphere(Point3(0.0, -10.0, 0.0), 10.0, material),
            Sphere(Point3(0.0, 10.0, 0.0), 10.0, material),
        ]
    )


def two_perlin_spheres() -> HittableList:
    """A marble sphere resting on a marble ground sphere."""
    material = Lambertian(NoiseTexture(3.0))
    return _wrap(
        [
            Sphere(Point3(0.0, -1000.0, 0.0), 1000.0, material),
            Sphere(Point3(0.0, 2.0, 0.0), 2.0, material),
        ]
    )