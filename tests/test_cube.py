import math

import pytest

from raytrace.cube import Cube
from raytrace.ray import Ray
from raytrace.vec3 import Vec3


def _unit_cube():
    return Cube(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 1.0, 1.0), Vec3(0.8, 0.6, 0.2))


def test_translate_moves_both_corners():
    cube = _unit_cube()
    cube.translate(Vec3(1.0, 2.0, 3.0))
    assert cube.min_corner == Vec3(1.0, 2.0, 3.0)
    assert cube.max_corner == Vec3(2.0, 3.0, 4.0)


def test_rotate_full_turn_keeps_box():
    cube = Cube(Vec3(-1.0, -0.5, -2.0), Vec3(0.0, 0.5, -1.0), Vec3(0.8, 0.6, 0.2))
    cube.rotate_y(2.0 * math.pi)
    assert tuple(cube.min_corner) == pytest.approx((-1.0, -0.5, -2.0), abs=1e-9)
    assert tuple(cube.max_corner) == pytest.approx((0.0, 0.5, -1.0), abs=1e-9)


def test_rotate_quarter_turn_swaps_axes():
    cube = Cube(Vec3(-1.0, -0.5, -2.0), Vec3(0.0, 0.5, -1.0), Vec3(0.8, 0.6, 0.2))
    cube.rotate_y(math.pi / 2.0)
    assert tuple(cube.min_corner) == pytest.approx((-2.0, -0.5, 0.0), abs=1e-9)
    assert tuple(cube.max_corner) == pytest.approx((-1.0, 0.5, 1.0), abs=1e-9)


def test_rotate_keeps_y_extent_and_ordering():
    cube = _unit_cube()
    cube.rotate_y(0.3)
    assert cube.min_corner.y == 0.0
    assert cube.max_corner.y == 1.0
    assert cube.min_corner.x <= cube.max_corner.x
    assert cube.min_corner.z <= cube.max_corner.z


def test_hit_along_z_with_zero_components():
    cube = _unit_cube()
    ray = Ray(Vec3(0.5, 0.5, -5.0), Vec3(0.0, 0.0, 1.0))
    record = cube.hit(ray, 0.001, math.inf)
    assert record.t == pytest.approx(5.0)
    assert record.normal == Vec3(0.0, 0.0, -1.0)
    assert record.color == Vec3(0.8, 0.6, 0.2)


def test_hit_along_x_gets_min_x_normal():
    cube = _unit_cube()
    ray = Ray(Vec3(-5.0, 0.5, 0.5), Vec3(1.0, 0.0, 0.0))
    record = cube.hit(ray, 0.001, math.inf)
    assert record.normal == Vec3(-1.0, 0.0, 0.0)
    assert record.point.x == pytest.approx(0.0)


def test_hit_from_above_gets_max_y_normal():
    cube = _unit_cube()
    ray = Ray(Vec3(0.5, 5.0, 0.5), Vec3(0.0, -1.0, 0.0))
    record = cube.hit(ray, 0.001, math.inf)
    assert record.normal == Vec3(0.0, 1.0, 0.0)
    assert record.point.y == pytest.approx(1.0)


def test_diagonal_hit_point_on_boundary():
    cube = _unit_cube()
    ray = Ray(Vec3(-2.0, -1.5, -1.0), Vec3(1.0, 0.8, 0.6))
    record = cube.hit(ray, 0.001, math.inf)
    p = record.point
    assert all(-1e-9 <= c <= 1.0 + 1e-9 for c in p)
    assert record.normal.length() == pytest.approx(1.0)


def test_miss_returns_none():
    cube = _unit_cube()
    ray = Ray(Vec3(5.0, 5.0, -5.0), Vec3(0.0, 0.0, 1.0))
    assert cube.hit(ray, 0.001, math.inf) is None


def test_box_behind_ray_returns_none():
    cube = _unit_cube()
    ray = Ray(Vec3(0.5, 0.5, 5.0), Vec3(0.0, 0.0, 1.0))
    assert cube.hit(ray, 0.001, math.inf) is None


def test_t_max_excludes_hit():
    cube = _unit_cube()
    ray = Ray(Vec3(0.5, 0.5, -5.0), Vec3(0.0, 0.0, 1.0))
    assert cube.hit(ray, 0.001, 2.0) is None