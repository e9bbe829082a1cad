"""Intersection records and the interface of renderable objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from raytrace.ray import Ray
from raytrace.vec3 import Vec3


@dataclass(frozen=True)
class HitRecord:
    """Where and how a ray met a surface."""

    t: float
    point: Vec3
    normal: Vec3
    color: Vec3


class Hittable(ABC):
    """An object that a ray can intersect."""

    @abstractmethod
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Return the intersection with ``ray`` in ``(t_min, t_max)``, or None."""