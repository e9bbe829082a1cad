"""A collection of hittable objects."""

from __future__ import annotations

from typing import List, Optional

from raytrace.hittable import HitRecord, Hittable
from raytrace.ray import Ray


class World:
    """The scene: every object a ray may hit."""

    def __init__(self) -> None:
        self.objects: List[Hittable] = []

    def add(self, obj: Hittable) -> None:
        """Add an object to the scene."""
        self.objects.append(obj)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Return the closest intersection in ``(t_min, t_max)``, or None."""
        closest: Optional[HitRecord] = None
        closest_t = t_max
        for obj in self.objects:
            record = obj.hit(ray, t_min, closest_t)
            if record is not None and record.t < closest_t:
                closest_t = record.t
                closest = record
        return closest