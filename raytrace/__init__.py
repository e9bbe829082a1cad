"""A small ray tracer that renders planes, spheres, cylinders and boxes to PPM images."""

__version__ = "0.1.0"