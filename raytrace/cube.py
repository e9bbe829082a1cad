"""Axis-aligned boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from raytrace.hittable import HitRecord, Hittable
from raytrace.ray import Ray
from raytrace.vec3 import Vec3

FACE_EPSILON = 0.0001


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: division by zero gives an infinity or NaN."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _slab(low: float, high: float, origin: float, direction: float) -> Tuple[float, float]:
    near = _divide(low - origin, direction)
    far = _divide(high - origin, direction)
    return (far, near) if near > far else (near, far)


@dataclass
class Cube(Hittable):
    """An axis-aligned box between ``min_corner`` and ``max_corner``."""

    min_corner: Vec3
    max_corner: Vec3
    color: Vec3

    def translate(self, offset: Vec3) -> None:
        """Move the box by ``offset``."""
        self.min_corner = self.min_corner + offset
        self.max_corner = self.max_corner + offset

    def rotate_y(self, angle: float) -> None:
        """Rotate the corners about the Y axis and refit an axis-aligned box to them."""
        cos_t = math.cos(angle)
        sin_t = math.sin(angle)
        lo, hi = self.min_corner, self.max_corner
        corners = [
            Vec3(x, y, z) for x in (lo.x, hi.x) for y in (lo.y, hi.y) for z in (lo.z, hi.z)
        ]
        rotated = [
            Vec3(v.x * cos_t + v.z * sin_t, v.y, -v.x * sin_t + v.z * cos_t)
            for v in corners
        ]
        xs, ys, zs = zip(*rotated)
        self.min_corner = Vec3(min(xs), min(ys), min(zs))
        self.max_corner = Vec3(max(xs), max(ys), max(zs))

    def _normal_at(self, point: Vec3) -> Vec3:
        lo, hi = self.min_corner, self.max_corner
        faces = (
            (point.x, lo.x, Vec3(-1.0, 0.0, 0.0)),
            (point.x, hi.x, Vec3(1.0, 0.0, 0.0)),
            (point.y, lo.y, Vec3(0.0, -1.0, 0.0)),
            (point.y, hi.y, Vec3(0.0, 1.0, 0.0)),
            (point.z, lo.z, Vec3(0.0, 0.0, -1.0)),
        )
        for coordinate, face, normal in faces:
            if abs(coordinate - face) < FACE_EPSILON:
                return normal
        return Vec3(0.0, 0.0, 1.0)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Return the entry intersection of ``ray`` with the box, or None."""
        lo, hi = self.min_corner, self.max_corner
        o, d = ray.origin, ray.direction

        tmin, tmax = _slab(lo.x, hi.x, o.x, d.x)

        tymin, tymax = _slab(lo.y, hi.y, o.y, d.y)
        if tmin > tymax or tymin > tmax:
            return None
        if tymin > tmin:
            tmin = tymin
        if tymax < tmax:
            tmax = tymax

        tzmin, tzmax = _slab(lo.z, hi.z, o.z, d.z)
        if tmin > tzmax or tzmin > tmax:
            return None
        if tzmin > tmin:
            tmin = tzmin
        if tzmax < tmax:
            tmax = tzmax

        if tmin < t_max and tmax > t_min:
            point = ray.at(tmin)
            return HitRecord(
                t=tmin, point=point, normal=self._normal_at(point), color=self.color
            )
        return None