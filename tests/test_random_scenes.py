import math

import pytest
from PIL import Image

from raytracer.bvh import BvhNode, ConstantMedium
from raytracer.hittable import HittableList, MovingSphere, Sphere
from raytracer.material import Dielectric, DiffuseLight, Lambertian, Metal
from raytracer.ray import Ray
from raytracer.scenes.random_scenes import final_scene, random_moving_scene, random_scene
from raytracer.shapes import XZRect
from raytracer.texture import SolidColor
from raytracer.transform import Translation
from raytracer.vec3 import Color, Point3, Vec3


def _down_at(x, z):
    return Ray(Point3(x, 10.0, z), Vec3(0.0, -1.0, 0.0), 0.5)


@pytest.fixture(scope="module")
def earth_image(tmp_path_factory):
    path = tmp_path_factory.mktemp("img") / "earth.png"
    Image.new("RGB", (4, 2), (255, 0, 0)).save(path)
    return path


@pytest.fixture(scope="module")
def showcase(earth_image):
    return final_scene(earth_image)


def test_random_scene_is_wrapped_hierarchy():
    world = random_scene()
    assert isinstance(world, HittableList)
    assert len(world.objects) == 1
    assert isinstance(world.objects[0], BvhNode)


@pytest.mark.parametrize(
    "x, expected",
    [
        (0.0, Dielectric(1.5)),
        (4.0, Metal(Color(0.7, 0.6, 0.5), 0.0)),
        (-4.0, Lambertian(SolidColor(Color(0.4, 0.2, 0.1)))),
    ],
)
def test_random_scene_big_spheres(x, expected):
    record = random_scene().hit(_down_at(x, 0.0), 0.001, math.inf)
    assert record is not None
    assert record.material == expected
    assert record.t == pytest.approx(8.0)


def test_random_moving_scene_layout():
    world = random_moving_scene()
    objects = world.objects
    assert 4 <= len(objects) <= 4 + 22 * 22
    assert objects[0].center == Point3(0.0, -1000.0, 0.0)
    assert objects[-3].material == Dielectric(1.5)
    small = objects[1:-3]
    for obj in small:
        center = obj.center0 if isinstance(obj, MovingSphere) else obj.center
        assert (center - Point3(4.0, 0.2, 0.0)).length() > 0.9
        assert obj.radius == 0.2


def test_random_moving_scene_motion_is_vertical():
    for _ in range(3):
        movers = [o for o in random_moving_scene().objects if isinstance(o, MovingSphere)]
        for sphere in movers:
            assert sphere.time0 == 0.0 and sphere.time1 == 1.0
            delta = sphere.center1 - sphere.center0
            assert delta.x == 0.0 and delta.z == 0.0
            assert 0.0 <= delta.y < 0.5
            assert isinstance(sphere.material, Lambertian)


def test_final_scene_structure(showcase):
    kinds = [type(o) for o in showcase.objects]
    assert kinds == [
        BvhNode,
        XZRect,
        MovingSphere,
        Sphere,
        Sphere,
        Sphere,
        ConstantMedium,
        ConstantMedium,
        Sphere,
        Sphere,
        Translation,
    ]


def test_final_scene_light(showcase):
    light = showcase.objects[1]
    assert light == XZRect(
        123.0, 423.0, 147.0, 412.0, 554.0, DiffuseLight(SolidColor(Color(7.0, 7.0, 7.0)))
    )


def test_final_scene_ground_boxes(showcase):
    box = showcase.objects[0].bounding_box(0.0, 1.0)
    assert box.minimum.x == -1000.0
    assert box.minimum.y == 0.0
    assert box.minimum.z == -1000.0
    assert box.maximum.y < 101.0


def test_final_scene_earth_texture(showcase):
    earth = showcase.objects[8]
    record = earth.hit(Ray(Point3(400.0, 400.0, 400.0), Vec3(0.0, -1.0, 0.0)), 0.001, math.inf)
    assert record is not None
    assert record.material.albedo.value(record.u, record.v, record.p) == Color(1.0, 0.0, 0.0)


def test_final_scene_missing_image(tmp_path):
    with pytest.raises(FileNotFoundError):
        final_scene(tmp_path / "missing.png")