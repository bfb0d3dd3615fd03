"""Geometry module for the sphere primitive.

Intersection routines are Taichi functions (@ti.func) called from the
render kernel:
    hit, t = intersect_sphere(ray_origin, ray_direction, sphere)
"""

from .sphere import Sphere, intersect_sphere, make_sphere

__all__ = [
    "Sphere",
    "intersect_sphere",
    "make_sphere",
]
