"""Rays with a normalised direction."""

from __future__ import annotations

from dataclasses import dataclass

from raytrace.vec3 import Vec3


@dataclass(frozen=True)
class Ray:
    """A half-line from ``origin``; ``direction`` is normalised on creation."""

    origin: Vec3
    direction: Vec3

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", self.direction.normalize())

    def at(self, t: float) -> Vec3:
        """Return the point at parameter ``t`` along the ray."""
        return self.origin + self.direction * t