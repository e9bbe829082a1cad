"""Finite open cylinders."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from raytrace.hittable import HitRecord, Hittable
from raytrace.ray import Ray
from raytrace.vec3 import Vec3


@dataclass
class Cylinder(Hittable):
    """The side surface of a cylinder rising ``height`` from ``base`` along ``axis``.

    ``axis`` is normalised on creation. The caps are not rendered.
    """

    base: Vec3
    axis: Vec3
    radius: float
    height: float
    color: Vec3

    def __post_init__(self) -> None:
        self.axis = self.axis.normalize()

    def _within_height(self, point: Vec3) -> bool:
        projection = self.axis.dot(point - self.base)
        return 0.0 <= projection <= self.height

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Return the intersection with the side surface in ``[t_min, t_max]``, or None."""
        oc = ray.origin - self.base
        dir_perp = ray.direction - self.axis * self.axis.dot(ray.direction)
        oc_perp = oc - self.axis * self.axis.dot(oc)

        a = dir_perp.length_squared()
        if a == 0.0:
            # A ray along the axis never crosses the side surface.
            return None
        b = 2.0 * oc_perp.dot(dir_perp)
        c = oc_perp.length_squared() - self.radius * self.radius

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return None

        root = math.sqrt(discriminant)
        t = (-b - root) / (2.0 * a)
        if not self._within_height(ray.at(t)):
            t = (-b + root) / (2.0 * a)
            if not self._within_height(ray.at(t)):
                return None

        if t < t_min or t > t_max:
            return None

        point = ray.at(t)
        projection = self.axis * self.axis.dot(point - self.base)
        normal = (point - (self.base + projection)).normalize()
        return HitRecord(t=t, point=point, normal=normal, color=self.color)