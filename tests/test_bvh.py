import math
import random
from unittest import mock

import pytest

from raytracer.bvh import BvhNode, ConstantMedium
from raytracer.hittable import HittableList, Sphere
from raytracer.material import Isotropic, Lambertian
from raytracer.ray import Ray
from raytracer.texture import SolidColor
from raytracer.vec3 import Vec3


def _material():
    return Lambertian(SolidColor(Vec3(0.5, 0.5, 0.5)))


def _leaves(node):
    if isinstance(node, BvhNode):
        yield from _leaves(node.left)
        yield from _leaves(node.right)
    else:
        yield node


def test_empty_list_is_rejected():
    with pytest.raises(ValueError):
        BvhNode([], 0.0, 1.0)


def test_single_object_fills_both_children():
    sphere = Sphere(Vec3(0.0, 0.0, 0.0), 1.0, _material())
    node = BvhNode([sphere], 0.0, 1.0)
    assert node.left is sphere
    assert node.right is sphere
    record = node.hit(Ray(Vec3(0.0, 0.0, -5.0), Vec3(0.0, 0.0, 1.0)), 0.001, math.inf)
    expected = sphere.hit(Ray(Vec3(0.0, 0.0, -5.0), Vec3(0.0, 0.0, 1.0)), 0.001, math.inf)
    assert record.t == pytest.approx(expected.t)


@pytest.mark.parametrize("seed", range(6))
def test_two_objects_are_ordered_by_box_minimum(seed):
    random.seed(seed)
    near = Sphere(Vec3(0.0, 0.0, 0.0), 1.0, _material())
    far = Sphere(Vec3(5.0, 5.0, 5.0), 1.0, _material())
    node = BvhNode([far, near], 0.0, 1.0)
    assert node.left is near
    assert node.right is far


def test_bounding_box_matches_list_box():
    random.seed(3)
    spheres = [
        Sphere(Vec3.random_range(-10.0, 10.0), 0.5, _material()) for _ in range(20)
    ]
    node = BvhNode(spheres, 0.0, 1.0)
    expected = HittableList(list(spheres)).bounding_box(0.0, 1.0)
    box = node.bounding_box(0.0, 1.0)
    assert box.minimum == expected.minimum
    assert box.maximum == expected.maximum
    assert node.bbox == box


def test_every_object_is_a_leaf():
    random.seed(5)
    spheres = [
        Sphere(Vec3.random_range(-10.0, 10.0), 0.5, _material()) for _ in range(13)
    ]
    node = BvhNode(spheres, 0.0, 1.0)
    assert {id(leaf) for leaf in _leaves(node)} == {id(s) for s in spheres}


def test_input_list_is_left_untouched():
    random.seed(1)
    spheres = [Sphere(Vec3(float(i), 0.0, 0.0), 0.3, _material()) for i in (4, 1, 3, 0, 2)]
    original = list(spheres)
    BvhNode(spheres, 0.0, 1.0)
    assert spheres == original


def test_hits_agree_with_brute_force():
    random.seed(11)
    spheres = [
        Sphere(Vec3.random_range(-5.0, 5.0), 0.7, _material()) for _ in range(30)
    ]
    node = BvhNode(spheres, 0.0, 1.0)
    world = HittableList(list(spheres))
    for _ in range(200):
        origin = Vec3.random_range(-20.0, 20.0)
        direction = Vec3.random_range(-1.0, 1.0)
        ray = Ray(origin, direction)
        fast = node.hit(ray, 0.001, math.inf)
        slow = world.hit(ray, 0.001, math.inf)
        assert (fast is None) == (slow is None)
        if fast is not None:
            assert fast.t == pytest.approx(slow.t)


def test_missing_bounding_box_warns_and_fails_later(capsys):
    node = BvhNode([HittableList()], 0.0, 1.0)
    assert "No bounding box" in capsys.readouterr().err
    with pytest.raises(ValueError):
        node.bounding_box(0.0, 1.0)


def _medium(density=1.0):
    boundary = Sphere(Vec3(0.0, 0.0, 0.0), 1.0, _material())
    return ConstantMedium(boundary, density, SolidColor(Vec3(0.2, 0.4, 0.9))), boundary


def test_medium_bounding_box_is_boundary_box():
    medium, boundary = _medium()
    assert medium.bounding_box(0.0, 1.0) == boundary.bounding_box(0.0, 1.0)


def test_medium_missed_by_ray():
    medium, _ = _medium()
    ray = Ray(Vec3(-5.0, 3.0, 0.0), Vec3(1.0, 0.0, 0.0))
    assert medium.hit(ray, 0.001, math.inf) is None


def test_medium_scatters_inside_boundary():
    medium, _ = _medium()
    ray = Ray(Vec3(-5.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0))
    with mock.patch("raytracer.bvh.random.random", return_value=0.5):
        record = medium.hit(ray, 0.001, math.inf)
    assert 4.0 < record.t < 6.0
    assert record.p == ray.at(record.t)
    assert record.normal == Vec3(1.0, 0.0, 0.0)
    assert record.front_face is True
    assert isinstance(record.material, Isotropic)
    assert record.material.albedo == SolidColor(Vec3(0.2, 0.4, 0.9))


def test_medium_zero_sample_passes_through():
    medium, _ = _medium()
    ray = Ray(Vec3(-5.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0))
    with mock.patch("raytracer.bvh.random.random", return_value=0.0):
        assert medium.hit(ray, 0.001, math.inf) is None


def test_thin_medium_lets_ray_through():
    medium, _ = _medium(density=1e-6)
    ray = Ray(Vec3(-5.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0))
    with mock.patch("raytracer.bvh.random.random", return_value=0.5):
        assert medium.hit(ray, 0.001, math.inf) is None


def test_ray_starting_inside_medium():
    medium, _ = _medium()
    ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0))
    with mock.patch("raytracer.bvh.random.random", return_value=0.9):
        record = medium.hit(ray, 0.001, math.inf)
    assert 0.001 < record.t < 1.0


def test_medium_outside_interval():
    medium, _ = _medium()
    ray = Ray(Vec3(-5.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0))
    with mock.patch("raytracer.bvh.random.random", return_value=0.5):
        assert medium.hit(ray, 0.001, 3.0) is None