"""Randomly generated scenes: the sphere field and the final showcase."""

from __future__ import annotations

import os
import random

from raytracer.bvh import BvhNode, ConstantMedium
from raytracer.hittable import Hittable, HittableList, MovingSphere, Sphere
from raytracer.material import Dielectric, DiffuseLight, Lambertian, Material, Metal
from raytracer.shapes import Cuboid, XZRect
from raytracer.texture import Checker, ImageTexture, NoiseTexture, SolidColor
from raytracer.transform import RotateY, Translation
from raytracer.vec3 import Color, Point3, Vec3

_SMALL_RADIUS = 0.2


def _lambertian(color: Color) -> Material:
    return Lambertian(SolidColor(color))


def _small_sphere_spots():
    """Yield ``(choose_mat, center)`` for each small sphere kept in the field."""
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = random.random()
            center = Point3(a + 0.9 * random.random(), _SMALL_RADIUS, b + 0.9 * random.random())
            if (center - Point3(4.0, _SMALL_RADIUS, 0.0)).length() > 0.9:
                yield choose_mat, center


def _metal_material() -> Material:
    albedo = Color.random_range(0.5, 1.0)
    fuzz = 0.5 * random.random()
    return Metal(albedo, fuzz)


def _big_spheres() -> list[Hittable]:
    return [
        Sphere(Point3(0.0, 1.0, 0.0), 1.0, Dielectric(1.5)),
        Sphere(Point3(-4.0, 1.0, 0.0), 1.0, _lambertian(Color(0.4, 0.2, 0.1))),
        Sphere(Point3(4.0, 1.0, 0.0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)),
    ]


def random_scene() -> HittableList:
    """A checkered ground covered with random small spheres and three large ones."""
    checker = Checker(
        SolidColor(Color(0.2, 0.3, 0.1)),
        SolidColor(Color(0.9, 0.9, 0.9)),
    )
    world: list[Hittable] = [Sphere(Point3(0.0, -1000.0, 0.0), 1000.0, Lambertian(checker))]

    for choose_mat, center in _small_sphere_spots():
        if choose_mat < 0.7:
            material = _lambertian(Color.random() * Color.random())
        elif choose_mat < 0.85:
            material = _metal_material()
        else:
            material = Dielectric(1.5)
        world.append(Sphere(center, _SMALL_RADIUS, material))

    world.extend(_big_spheres())
    return HittableList([BvhNode(world, 0.0, 1.0)])


def random_moving_scene() -> HittableList:
    """The random sphere field with its diffuse spheres bouncing upward over time."""
    world = HittableList()
    world.add(Sphere(Point3(0.0, -1000.0, 0.0), 1000.0, _lambertian(Color(0.5, 0.5, 0.5))))

    for choose_mat, center in _small_sphere_spots():
        if choose_mat < 0.7:
            material = _lambertian(Color.random() * Color.random())
            center2 = center + Point3(0.0, 0.5 * random.random(), 0.0)
            world.add(MovingSphere(center, center2, _SMALL_RADIUS, material, 0.0, 1.0))
        elif choose_mat < 0.85:
            world.add(Sphere(center, _SMALL_RADIUS, _metal_material()))
        else:
            world.add(Sphere(center, _SMALL_RADIUS, Dielectric(1.5)))

    for sphere in _big_spheres():
        world.add(sphere)
    return world


def final_scene(image_path: str | os.PathLike[str] = "images/earth.png") -> HittableList:
    """The showcase scene combining every kind of object, material and texture."""
    ground = _lambertian(Color(0.5, 0.5, 0.5))
    boxes_per_side = 20
    width = 100.0
    boxes: list[Hittable] = []
    for i in range(boxes_per_side):
        for j in range(boxes_per_side):
            x0 = -1000.0 + i * width
            z0 = -1000.0 + j * width
            y1 = 1.0 + 100.0 * random.random()
            boxes.append(
                Cuboid(Point3(x0, 0.0, z0), Point3(x0 + width, y1, z0 + width), ground)
            )

    world = HittableList()
    world.add(BvhNode(boxes, 0.0, 1.0))

    intensity = 7.0
    light = DiffuseLight(SolidColor(Color(1.0, 1.0, 1.0) * intensity))
    world.add(XZRect(123.0, 423.0, 147.0, 412.0, 554.0, light))

    center1 = Point3(400.0, 400.0, 200.0)
    center2 = center1 + Vec3(30.0, 0.0, 0.0)
    world.add(MovingSphere(center1, center2, 50.0, _lambertian(Color(0.7, 0.3, 0.1)), 0.0, 1.0))

    world.add(Sphere(Point3(260.0, 150.0, 45.0), 50.0, Dielectric(1.5)))
    world.add(Sphere(Point3(0.0, 150.0, 145.0), 50.0, Metal(Color(0.8, 0.8, 0.9), 10.0)))

    boundary = Sphere(Point3(360.0, 150.0, 145.0), 70.0, Dielectric(1.5))
    world.add(boundary)
    world.add(ConstantMedium(boundary, 0.2, SolidColor(Color(0.2, 0.4, 0.9))))

    mist = Sphere(Point3(0.0, 0.0, 0.0), 5000.0, Dielectric(1.5))
    world.add(ConstantMedium(mist, 0.0001, SolidColor(Color(1.0, 1.0, 1.0))))

    world.add(Sphere(Point3(400.0, 200.0, 400.0), 100.0, Lambertian(ImageTexture(image_path))))
    world.add(Sphere(Point3(220.0, 280.0, 300.0), 80.0, Lambertian(NoiseTexture(0.1))))

    white = _lambertian(Color(0.73, 0.73, 0.73))
    cluster: list[Hittable] = [
        Sphere(Point3.random_range(0.0, 165.0), 10.0, white) for _ in range(1000)
    ]
    world.add(
        Translation(
            RotateY(BvhNode(cluster, 0.0, 1.0), 15.0),
            Vec3(-100.0, 270.0, 395.0),
        )
    )
    return world