"""Small fixed-size vectors, the Ray dataclass and vector helpers.

The vector types are Taichi's own small vectors (``vec2``, ``vec3``,
``vec4``), which already provide componentwise addition, subtraction,
negation and scalar multiplication, and default to all-zero components.
This module adds the free functions the renderer builds on: an N-ary dot
product, the 3D cross product, the Euclidean norm and normalization to a
target length.

All helpers are ``@ti.func`` and are meant to be called from inside Taichi
kernels.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> @ti.kernel
    ... def unit_x() -> vec3:
    ...     return normalize(vec3(4.0, 0.0, 0.0))
    >>> unit_x()
    [1. 0. 0.]
"""

import taichi as ti
import taichi.math as tm

vec2 = tm.vec2
vec3 = tm.vec3
vec4 = tm.vec4


@ti.dataclass
class Ray:
    """A half-line ``origin + t * direction`` for ``t >= 0``.

    Attributes:
        origin: The starting point of the ray (vec3).
        direction: The direction of the ray (vec3). Primary rays are always
            built with a unit direction; the sphere test relies on it.
    """

    origin: vec3
    direction: vec3


@ti.func
def ray_at(ray: Ray, t: ti.f32) -> vec3:
    """Point along the ray at parameter t."""
    return ray.origin + t * ray.direction


@ti.func
def make_ray(origin: vec3, direction: vec3) -> Ray:
    return Ray(origin=origin, direction=direction)


# =============================================================================
# Vector Algebra
# =============================================================================


@ti.func
def dot(a, b):
    """Dot product of two vectors of the same arity (2, 3 or 4 components).

    Args:
        a: First vector.
        b: Second vector.

    Returns:
        The sum of the componentwise products.
    """
    return (a * b).sum()


@ti.func
def cross(a: vec3, b: vec3) -> vec3:
    """Right-handed cross product of two 3-component vectors.

    The result is orthogonal to both inputs and its length is the area of
    the parallelogram they span.
    """
    return vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


@ti.func
def norm(v):
    """Euclidean length of a vector."""
    return ti.sqrt(dot(v, v))


@ti.func
def length_squared(v):
    return dot(v, v)


@ti.func
def normalize_to(v, length: ti.f32):
    """Rescale a vector so that its norm equals ``length``.

    The vector must be nonzero. This is checked by an assertion, which
    Taichi only evaluates when initialized with ``debug=True``; a zero
    vector is never silently replaced.

    Args:
        v: The vector to rescale (2, 3 or 4 components).
        length: The requested norm of the result.

    Returns:
        ``v * (length / norm(v))``.
    """
    n = norm(v)
    assert n > 0.0, "cannot normalize a zero-length vector"
    return v * (length / n)


@ti.func
def normalize(v):
    """Rescale a nonzero vector to unit length."""
    return normalize_to(v, 1.0)
