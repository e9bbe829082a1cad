"""A pinhole camera."""

from __future__ import annotations

import math

from raytrace.ray import Ray
from raytrace.vec3 import Vec3

ORBIT_RADIUS = 1.0
ORBIT_ANGLE_DEGREES = 45.0
ORBIT_HEIGHT = 2.0


class Camera:
    """A camera looking from ``lookfrom`` towards ``lookat``.

    ``vfov`` is the vertical field of view in degrees and ``aspect``
    the width to height ratio of the image.
    """

    def __init__(
        self, lookfrom: Vec3, lookat: Vec3, vup: Vec3, vfov: float, aspect: float
    ) -> None:
        theta = math.radians(vfov)
        half_height = math.tan(theta / 2.0)
        half_width = aspect * half_height

        w = (lookfrom - lookat).normalize()
        u = vup.cross(w).normalize()
        v = w.cross(u)

        self.origin = lookfrom
        self.lower_left_corner = lookfrom - u * half_width - v * half_height - w
        self.horizontal = u * (2.0 * half_width)
        self.vertical = v * (2.0 * half_height)

    def __repr__(self) -> str:
        return (
            f"Camera(origin={self.origin!r}, lower_left_corner={self.lower_left_corner!r}, "
            f"horizontal={self.horizontal!r}, vertical={self.vertical!r})"
        )

    def get_ray(self, u: float, v: float) -> Ray:
        """Return the ray through the image point ``(u, v)`` in [0, 1]^2."""
        target = self.lower_left_corner + self.horizontal * u + self.vertical * v
        return Ray(self.origin, target - self.origin)

    def move_to_orbit(self) -> None:
        """Move the origin to a fixed point on a unit orbit around the Y axis."""
        theta = math.radians(ORBIT_ANGLE_DEGREES)
        self.origin = Vec3(
            ORBIT_RADIUS * math.cos(theta), ORBIT_HEIGHT, ORBIT_RADIUS * math.sin(theta)
        )