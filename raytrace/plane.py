"""Infinite planes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from raytrace.hittable import HitRecord, Hittable
from raytrace.ray import Ray
from raytrace.vec3 import Vec3

PARALLEL_EPSILON = 1e-6


@dataclass
class Plane(Hittable):
    """An infinite plane through ``point``; ``normal`` is normalised on creation."""

    point: Vec3
    normal: Vec3
    color: Vec3

    def __post_init__(self) -> None:
        self.normal = self.normal.normalize()

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Return the intersection in ``[t_min, t_max]``, or None if parallel or outside."""
        denom = self.normal.dot(ray.direction)
        if abs(denom) < PARALLEL_EPSILON:
            return None
        t = (self.point - ray.origin).dot(self.normal) / denom
        if t < t_min or t > t_max:
            return None
        return HitRecord(t=t, point=ray.at(t), normal=self.normal, color=self.color)