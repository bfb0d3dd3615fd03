"""Sphere primitive with the geometric ray-sphere intersection test.

Rather than expanding the quadratic in ``t``, the test projects the vector
from the ray origin to the sphere center onto the ray and works with the
perpendicular distance from the center to the ray line. This needs a unit
ray direction, which every primary ray has.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from tinyray.geometry.sphere import Sphere, intersect_sphere
    >>> # Within a Taichi kernel:
    >>> # hit, t = intersect_sphere(origin, direction, Sphere(center=c, radius=r))
"""

import taichi as ti
import taichi.math as tm

from tinyray.core.vector import dot

vec3 = tm.vec3


@ti.dataclass
class Sphere:
    """A sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere (vec3).
        radius: The radius of the sphere. Always positive; the scene
            description rejects anything else before it reaches a kernel.
    """

    center: vec3
    radius: ti.f32


@ti.func
def intersect_sphere(ray_origin: vec3, ray_direction: vec3, sphere: Sphere):
    """Find the nearest non-negative hit parameter of a ray on a sphere.

    With ``L = center - origin``:

        tca = L . direction          (projection of L onto the ray)
        d2  = L . L - tca^2          (squared distance from center to ray line)

    If ``d2 > radius^2`` the ray line passes outside the sphere. Otherwise
    ``thc = sqrt(radius^2 - d2)`` and the roots are ``tca - thc`` and
    ``tca + thc``. When the near root lies behind the origin (ray starts
    inside the sphere) the far root is used instead. A tangent ray has
    ``thc == 0`` and both roots equal ``tca``.

    Args:
        ray_origin: The starting point of the ray.
        ray_direction: The unit direction of the ray.
        sphere: The sphere to test.

    Returns:
        A tuple ``(hit, t)``. ``hit`` is 1 when ``t >= 0``, 0 otherwise;
        ``t`` is only meaningful when ``hit`` is 1.
    """
    did_hit = 0
    t0 = 0.0

    offset = sphere.center - ray_origin
    tca = dot(offset, ray_direction)
    d2 = dot(offset, offset) - tca * tca
    radius2 = sphere.radius * sphere.radius

    if d2 <= radius2:
        thc = ti.sqrt(radius2 - d2)
        t0 = tca - thc
        t1 = tca + thc
        if t0 < 0.0:
            t0 = t1
        if t0 >= 0.0:
            did_hit = 1

    return did_hit, t0


@ti.func
def make_sphere(center: vec3, radius: ti.f32) -> Sphere:
    return Sphere(center=center, radius=radius)
