# raytrace

A small ray tracer written in plain Python. It renders a fixed scene made of
two planes, two spheres, a finite open cylinder and an axis-aligned box, lit
by a point light with ambient, diffuse and specular shading and hard shadows.
Rays that hit nothing show a sky gradient. The result is written as a
plain-text PPM (P3) image.

## Installation

```
pip install .
```

## Rendering the built-in scene

```
raytrace
```

By default this renders an 800×600 image with 10 jittered samples per pixel
and writes it to `world_scene.ppm` in the current directory, showing a
progress bar while it works. Pure-Python rendering at this size takes a while.

Options:

- `-o`, `--output PATH`: file to write (default `world_scene.ppm`).
- `--width N`, `--height N`: image size in pixels (default 800 and 600). The
  camera's aspect ratio follows the chosen size.
- `--samples N`: samples per pixel (default 10).

For a quick preview:

```
raytrace --width 160 --height 120 --samples 2 -o preview.ppm
```

## Using it as a library

Build a scene from the shape classes and render it yourself:

```python
import random

from raytrace.camera import Camera
from raytrace.light import Light
from raytrace.plane import Plane
from raytrace.render import render
from raytrace.sphere import Sphere
from raytrace.vec3 import Vec3
from raytrace.world import World

world = World()
world.add(Plane(Vec3(0, -0.5, 0), Vec3(0, 1, 0), Vec3(0.8, 0.8, 0.8)))
world.add(Sphere(Vec3(0, 0, -1), 0.5, Vec3(0.8, 0.3, 0.3)))

lights = [Light(Vec3(5, 5, -5), 0.8)]
camera = Camera(Vec3(0, 1, 4), Vec3(0, 0, 0), Vec3(0, 1, 0), 60.0, 4 / 3)

with open("scene.ppm", "w") as out:
    render(world, lights, camera, 160, 120, 4, out, rng=random.Random(1))
```

`render` writes the image top row first. Pass `rng` for reproducible sampling
and `progress`, a callable, to be called with `1` after each pixel.

Available building blocks:

- `raytrace.vec3.Vec3`: immutable 3-component vector with `+`, `-`, unary
  `-`, scalar `*`, `dot`, `cross`, `length`, `length_squared`, `normalize`.
- `raytrace.ray.Ray`: origin and direction, normalised on creation; `at(t)`
  gives the point at parameter `t`.
- `raytrace.hittable.Hittable` and `HitRecord`: the interface every shape
  implements, and the intersection it returns (`t`, `point`, `normal`,
  `color`).
- `raytrace.sphere.Sphere`, `raytrace.plane.Plane`,
  `raytrace.cylinder.Cylinder`, `raytrace.cube.Cube`: shapes, each with
  `hit(ray, t_min, t_max)` returning a `HitRecord` or `None`. `Cube` also has
  `translate(offset)` and `rotate_y(angle)`; the latter refits an
  axis-aligned box around the rotated corners.
- `raytrace.world.World`: a collection of shapes; `add(obj)`, and `hit`
  returns the closest intersection.
- `raytrace.light.Light`, `calculate_lighting(hit_record, light, world)` and
  `reflect(v, n)`.
- `raytrace.camera.Camera`: look-from/look-at pinhole camera; `get_ray(u, v)`
  for image coordinates in [0, 1], and `move_to_orbit()` to place the origin
  at a fixed point on a unit orbit.
- `raytrace.render.ray_color`, `build_scene` (the demo world, lights and
  camera) and `render`.

## What it does not do

There is no scene file format: the command always renders the built-in scene,
and other scenes are built in Python code. Surfaces are plain diffuse and
specular colours with no reflection, refraction or textures, cylinder caps
are not drawn, and boxes stay axis-aligned. The only output format is P3 PPM.

## Running the tests

```
pip install .[test]
pytest
```