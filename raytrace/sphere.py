"""Spheres."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from raytrace.hittable import HitRecord, Hittable
from raytrace.ray import Ray
from raytrace.vec3 import Vec3


@dataclass
class Sphere(Hittable):
    """A solid-coloured sphere."""

    center: Vec3
    radius: float
    color: Vec3

    def _record(self, ray: Ray, t: float) -> HitRecord:
        point = ray.at(t)
        normal = (point - self.center) * (1.0 / self.radius)
        return HitRecord(t=t, point=point, normal=normal, color=self.color)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Return the nearest intersection strictly inside ``(t_min, t_max)``."""
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - a * c
        if discriminant <= 0.0:
            return None

        root = math.sqrt(discriminant)
        for t in ((-b - root) / a, (-b + root) / a):
            if t_min < t < t_max:
                return self._record(ray, t)
        return None