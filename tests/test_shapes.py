import math

import pytest

from raytracer.hittable import AABB
from raytracer.material import Lambertian
from raytracer.ray import Ray
from raytracer.shapes import Cuboid, XYRect, XZRect, YZRect
from raytracer.texture import SolidColor
from raytracer.vec3 import Vec3


@pytest.fixture
def material():
    return Lambertian(SolidColor(Vec3(0.5, 0.5, 0.5)))


def _approx(v):
    return pytest.approx(tuple(v))


def test_xy_rect_hit_point_lies_on_plane(material):
    rect = XYRect(0.0, 1.0, 0.0, 1.0, 0.0, material)
    ray = Ray(Vec3(0.5, 0.5, -1.0), Vec3(0.0, 0.0, 1.0))
    rec = rect.hit(ray, 0.001, math.inf)
    assert rec is not None
    assert rec.p.z == 0.0
    assert tuple(rec.p) == _approx(ray.at(rec.t))
    assert rec.material is material


def test_xy_rect_normal_faces_ray(material):
    rect = XYRect(0.0, 1.0, 0.0, 1.0, 0.0, material)
    rec = rect.hit(Ray(Vec3(0.5, 0.5, -1.0), Vec3(0.0, 0.0, 1.0)), 0.001, math.inf)
    assert rec.front_face is False
    assert rec.normal == Vec3(0.0, 0.0, -1.0)


def test_xy_rect_texture_coordinates(material):
    rect = XYRect(0.0, 2.0, 0.0, 4.0, 3.0, material)
    rec = rect.hit(Ray(Vec3(1.0, 2.0, 0.0), Vec3(0.0, 0.0, 1.0)), 0.001, math.inf)
    assert rec.u == pytest.approx(0.5)
    assert rec.v == pytest.approx(0.5)


@pytest.mark.parametrize(
    "rect,origin,direction,axis",
    [
        (XZRect(0.0, 1.0, 0.0, 1.0, 2.0, None), Vec3(0.5, 0.0, 0.5), Vec3(0.0, 1.0, 0.0), 1),
        (YZRect(0.0, 1.0, 0.0, 1.0, 2.0, None), Vec3(0.0, 0.5, 0.5), Vec3(1.0, 0.0, 0.0), 0),
        (XYRect(0.0, 1.0, 0.0, 1.0, 2.0, None), Vec3(0.5, 0.5, 0.0), Vec3(0.0, 0.0, 1.0), 2),
    ],
)
def test_rect_hit_lands_on_plane(rect, origin, direction, axis):
    ray = Ray(origin, direction)
    rec = rect.hit(ray, 0.001, math.inf)
    assert rec is not None
    assert rec.p[axis] == pytest.approx(rect.k)
    assert tuple(rec.p) == _approx(ray.at(rec.t))
    assert 0.0 <= rec.u <= 1.0
    assert 0.0 <= rec.v <= 1.0


def test_rect_miss_outside_bounds(material):
    rect = XYRect(0.0, 1.0, 0.0, 1.0, 0.0, material)
    assert rect.hit(Ray(Vec3(5.0, 0.5, -1.0), Vec3(0.0, 0.0, 1.0)), 0.001, math.inf) is None


def test_rect_miss_outside_t_range(material):
    rect = XYRect(0.0, 1.0, 0.0, 1.0, 10.0, material)
    ray = Ray(Vec3(0.5, 0.5, 0.0), Vec3(0.0, 0.0, 1.0))
    assert rect.hit(ray, 0.001, 5.0) is None
    assert rect.hit(Ray(Vec3(0.5, 0.5, 20.0), Vec3(0.0, 0.0, 1.0)), 0.001, math.inf) is None


def test_rect_parallel_ray_misses(material):
    rect = XYRect(0.0, 1.0, 0.0, 1.0, 0.0, material)
    ray = Ray(Vec3(0.5, 0.5, -1.0), Vec3(1.0, 0.0, 0.0))
    assert rect.hit(ray, 0.001, 100.0) is None
    assert rect.hit(ray, 0.001, math.inf) is None


def test_rect_bounding_boxes_are_padded(material):
    assert XYRect(0.0, 1.0, 2.0, 3.0, 5.0, material).bounding_box(0.0, 1.0) == AABB(
        Vec3(0.0, 2.0, 5.0 - 0.0001), Vec3(1.0, 3.0, 5.0 + 0.0001)
    )
    assert XZRect(0.0, 1.0, 2.0, 3.0, 5.0, material).bounding_box(0.0, 1.0) == AABB(
        Vec3(0.0, 5.0 - 0.0001, 2.0), Vec3(1.0, 5.0 + 0.0001, 3.0)
    )
    assert YZRect(0.0, 1.0, 2.0, 3.0, 5.0, material).bounding_box(0.0, 1.0) == AABB(
        Vec3(5.0 - 0.0001, 0.0, 2.0), Vec3(5.0 + 0.0001, 1.0, 3.0)
    )


def test_cuboid_bounding_box_is_its_corners(material):
    p0, p1 = Vec3(-1.0, 0.0, 2.0), Vec3(3.0, 4.0, 5.0)
    assert Cuboid(p0, p1, material).bounding_box(0.0, 1.0) == AABB(p0, p1)


def test_cuboid_has_six_sides(material):
    cube = Cuboid(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 1.0, 1.0), material)
    assert len(cube.sides.objects) == 6
    assert all(side.material is material for side in cube.sides.objects)


def test_cuboid_hit_from_outside_hits_nearest_face(material):
    p0, p1 = Vec3(0.0, 0.0, 0.0), Vec3(1.0, 1.0, 1.0)
    cube = Cuboid(p0, p1, material)
    ray = Ray(Vec3(0.5, 0.5, -5.0), Vec3(0.0, 0.0, 1.0))
    rec = cube.hit(ray, 0.001, math.inf)
    assert rec is not None
    assert rec.p.z == pytest.approx(p0.z)
    assert rec.normal.dot(ray.direction) <= 0.0


def test_cuboid_hit_from_inside_is_back_face(material):
    cube = Cuboid(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 1.0, 1.0), material)
    ray = Ray(Vec3(0.5, 0.5, 0.5), Vec3(0.0, 0.0, 1.0))
    rec = cube.hit(ray, 0.001, math.inf)
    assert rec.front_face is False
    assert rec.p.z == pytest.approx(1.0)


def test_cuboid_miss(material):
    cube = Cuboid(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 1.0, 1.0), material)
    assert cube.hit(Ray(Vec3(5.0, 5.0, -5.0), Vec3(0.0, 0.0, 1.0)), 0.001, math.inf) is None