"""Point lights and Phong-style shading with hard shadows."""

from __future__ import annotations

from dataclasses import dataclass

from raytrace.hittable import HitRecord
from raytrace.ray import Ray
from raytrace.vec3 import Vec3
from raytrace.world import World

AMBIENT_STRENGTH = 0.1
SPECULAR_STRENGTH = 0.5
SHININESS = 32.0
SHADOW_BIAS = 0.001


@dataclass(frozen=True)
class Light:
    """A point light."""

    position: Vec3
    intensity: float


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """Reflect ``v`` about the normal ``n``."""
    return v - n * (2.0 * v.dot(n))


def calculate_lighting(hit_record: HitRecord, light: Light, world: World) -> Vec3:
    """Return the colour ``light`` contributes at ``hit_record``.

    A point whose path to the light is blocked gets only the ambient term.
    """
    to_light = light.position - hit_record.point
    distance = to_light.length()
    shadow_ray = Ray(hit_record.point + hit_record.normal * SHADOW_BIAS, to_light)

    ambient = hit_record.color * AMBIENT_STRENGTH
    if world.hit(shadow_ray, SHADOW_BIAS, distance) is not None:
        return ambient

    light_direction = to_light.normalize()
    normal = hit_record.normal
    diff = max(normal.dot(light_direction), 0.0)
    diffuse = hit_record.color * (diff * light.intensity)

    view_direction = (-hit_record.point).normalize()
    reflect_direction = reflect(-light_direction, normal)
    spec = max(reflect_direction.dot(view_direction), 0.0) ** SHININESS
    specular = Vec3(1.0, 1.0, 1.0) * (spec * SPECULAR_STRENGTH * light.intensity)

    return ambient + diffuse + specular