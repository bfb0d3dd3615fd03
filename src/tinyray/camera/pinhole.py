"""Fixed pinhole camera for primary ray generation.

The camera sits at the origin and looks down the -z axis with +y up. The
image plane is at z = -1; pixel (i, j), with i counted from the left and j
from the top, maps to the direction

    x =  (2 * (i + 0.5) / width  - 1) * tan(fov / 2) * aspect_ratio
    y = -(2 * (j + 0.5) / height - 1) * tan(fov / 2)
    direction = normalize(x, y, -1)

Rays go through pixel centers; there is no jitter, so a render is fully
deterministic.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from tinyray.camera.pinhole import get_ray
    >>> # Within a Taichi kernel:
    >>> # ray = get_ray(i, j, width, height, tan_half_fov)
"""

import taichi as ti
import taichi.math as tm

from tinyray.core.vector import Ray, make_ray, normalize

vec3 = tm.vec3

# Camera position, fixed by convention
CAMERA_ORIGIN = (0.0, 0.0, 0.0)


@ti.func
def camera_direction(
    pixel_i: ti.i32,
    pixel_j: ti.i32,
    width: ti.i32,
    height: ti.i32,
    tan_half_fov: ti.f32,
) -> vec3:
    """Unit direction of the primary ray through the center of a pixel.

    Args:
        pixel_i: Pixel column (0 = left).
        pixel_j: Pixel row (0 = top).
        width: Image width in pixels.
        height: Image height in pixels.
        tan_half_fov: ``tan(fov / 2)`` for the vertical field of view.

    Returns:
        The normalized camera-space direction.
    """
    w = ti.cast(width, ti.f32)
    h = ti.cast(height, ti.f32)
    aspect_ratio = w / h
    x = (2.0 * (ti.cast(pixel_i, ti.f32) + 0.5) / w - 1.0) * tan_half_fov * aspect_ratio
    y = -(2.0 * (ti.cast(pixel_j, ti.f32) + 0.5) / h - 1.0) * tan_half_fov
    return normalize(vec3(x, y, -1.0))


@ti.func
def get_ray(
    pixel_i: ti.i32,
    pixel_j: ti.i32,
    width: ti.i32,
    height: ti.i32,
    tan_half_fov: ti.f32,
) -> Ray:
    """Primary ray from the camera origin through the center of a pixel."""
    origin = vec3(CAMERA_ORIGIN[0], CAMERA_ORIGIN[1], CAMERA_ORIGIN[2])
    return make_ray(origin, camera_direction(pixel_i, pixel_j, width, height, tan_half_fov))
