"""Scene set-up and rendering to a plain-text PPM image."""

from __future__ import annotations

import argparse
import math
import random
from typing import Callable, Optional, Sequence, TextIO, Tuple

from tqdm import tqdm

from raytrace.camera import Camera
from raytrace.cube import Cube
from raytrace.cylinder import Cylinder
from raytrace.light import Light, calculate_lighting
from raytrace.plane import Plane
from raytrace.ray import Ray
from raytrace.sphere import Sphere
from raytrace.vec3 import Vec3
from raytrace.world import World

WIDTH = 800
HEIGHT = 600
SAMPLES = 10
OUTPUT = "world_scene.ppm"
HIT_T_MIN = 0.001
BACKGROUND = Vec3(0.5, 0.7, 1.0)
WHITE = Vec3(1.0, 1.0, 1.0)


def ray_color(ray: Ray, world: World, lights: Sequence[Light]) -> Vec3:
    """Return the colour seen along ``ray``: lit surface or sky gradient."""
    record = world.hit(ray, HIT_T_MIN, math.inf)
    if record is None:
        t = 0.5 * (ray.direction.y + 1.0)
        return BACKGROUND * (1.0 - t) + WHITE * t
    total = Vec3(0.0, 0.0, 0.0)
    for light in lights:
        total = total + calculate_lighting(record, light, world)
    return total


def _scene_camera(aspect: float) -> Camera:
    return Camera(
        Vec3(0.1, 1.0, 6.0),
        Vec3(0.0, 0.0, 0.0),
        Vec3(0.0, 1.0, 0.0),
        60.0,
        aspect,
    )


def build_scene() -> Tuple[World, list, Camera]:
    """Return the demo scene's world, lights and camera for the default image size."""
    world = World()
    world.add(Plane(Vec3(0.0, -0.5, 0.0), Vec3(0.0, 1.0, 0.0), Vec3(0.8, 0.8, 0.8)))
    world.add(Plane(Vec3(-4.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0), Vec3(0.8, 0.3, 0.3)))
    world.add(Sphere(Vec3(1.0, 1.5, 0.0), 0.5, Vec3(1.0, 1.0, 0.0)))
    world.add(Sphere(Vec3(0.0, 0.0, 0.0), 0.09, Vec3(0.0, 0.0, 0.0)))
    world.add(
        Cylinder(
            Vec3(4.0, 0.0, -3.0), Vec3(1.0, 0.0, 0.0), 0.5, 1.0, Vec3(0.3, 0.3, 0.8)
        )
    )
    cube = Cube(Vec3(-1.0, -0.5, -2.0), Vec3(0.0, 0.5, -1.0), Vec3(0.8, 0.6, 0.2))
    cube.rotate_y(math.pi / 2.0)
    world.add(cube)

    lights = [Light(Vec3(5.0, 5.0, -5.0), 0.8)]

    return world, lights, _scene_camera(WIDTH / HEIGHT)


def _to_byte(channel: float) -> int:
    """Gamma-correct a channel and saturate it into 0..255."""
    if math.isnan(channel) or channel <= 0.0:
        return 0
    value = 255.99 * math.sqrt(channel)
    if value >= 255.0:
        return 255
    return int(value)


def render(
    world: World,
    lights: Sequence[Light],
    camera: Camera,
    width: int,
    height: int,
    samples: int,
    out: TextIO,
    rng: Optional[random.Random] = None,
    progress: Optional[Callable[[int], object]] = None,
) -> None:
    """Write the scene as a P3 PPM image to ``out``, top row first.

    ``progress`` is called with 1 after each pixel.
    """
    rng = rng if rng is not None else random.Random()
    out.write(f"P3\n{width} {height}\n255\n")
    for j in reversed(range(height)):
        for i in range(width):
            color = Vec3(0.0, 0.0, 0.0)
            for _ in range(samples):
                u = (i + rng.random()) / width
                v = (j + rng.random()) / height
                color = color + ray_color(camera.get_ray(u, v), world, lights)
            color = color * (1.0 / samples)
            out.write(" ".join(str(_to_byte(c)) for c in color) + "\n")
            if progress is not None:
                progress(1)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the demo scene to a PPM file."""
    parser = argparse.ArgumentParser(description="Render the demo scene to a PPM image.")
    parser.add_argument("-o", "--output", default=OUTPUT)
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--height", type=int, default=HEIGHT)
    parser.add_argument("--samples", type=int, default=SAMPLES)
    args = parser.parse_args(argv)

    world, lights, camera = build_scene()
    if (args.width, args.height) != (WIDTH, HEIGHT):
        camera = _scene_camera(args.width / args.height)
    with open(args.output, "w", encoding="ascii") as out, tqdm(
        total=args.width * args.height,
        unit="px",
        bar_format="[{elapsed}] {bar:40} {n_fmt}/{total_fmt} pixels ({remaining})",
        ascii=" ->=",
    ) as bar:
        render(
            world,
            lights,
            camera,
            args.width,
            args.height,
            args.samples,
            out,
            progress=bar.update,
        )
    return 0