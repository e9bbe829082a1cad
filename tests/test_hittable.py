import pytest

from raytrace.hittable import HitRecord, Hittable
from raytrace.ray import Ray
from raytrace.vec3 import Vec3


class _AlwaysAt(Hittable):
    def __init__(self, t):
        self.t = t

    def hit(self, ray, t_min, t_max):
        if t_min < self.t < t_max:
            return HitRecord(self.t, ray.at(self.t), -ray.direction, Vec3(1.0, 1.0, 1.0))
        return None


def test_hittable_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Hittable()


def test_subclass_hit_returns_record_in_range():
    ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0))
    record = _AlwaysAt(2.0).hit(ray, 0.001, 10.0)
    assert record.t == 2.0
    assert record.point == ray.at(2.0)


def test_subclass_hit_out_of_range_is_none():
    ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0))
    assert _AlwaysAt(20.0).hit(ray, 0.001, 10.0) is None


def test_hit_record_equality_and_immutability():
    a = HitRecord(1.0, Vec3(0.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0), Vec3(1.0, 0.0, 0.0))
    b = HitRecord(1.0, Vec3(0.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0), Vec3(1.0, 0.0, 0.0))
    assert a == b
    with pytest.raises(AttributeError):
        a.t = 2.0