"""Diffuse material and the Lambertian point-light term.

A diffuse material is a single base color. Unlit, the shader returns that
color as is. With point lights, each light adds

    intensity * max(0, N . L)

where ``N`` is the unit surface normal and ``L`` the unit vector from the
hit point toward the light, and the summed intensity scales the base color.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from tinyray.materials.diffuse import DiffuseMaterial, lambert_term
    >>> # Within a Taichi kernel:
    >>> # weight = lambert_term(normal, point, light_position)
"""

import taichi as ti
import taichi.math as tm

from tinyray.core.vector import dot, length_squared, normalize

vec3 = tm.vec3


@ti.dataclass
class DiffuseMaterial:
    """Diffuse material properties.

    Attributes:
        diffuse_color: The base color (RGB). Not clamped; the encoder clamps
            the final pixel value.
    """

    diffuse_color: vec3


@ti.func
def lambert_term(normal: vec3, point: vec3, light_position: vec3) -> ti.f32:
    """Cosine between the surface normal and the direction to a light.

    Args:
        normal: The unit surface normal at the hit point.
        point: The hit point.
        light_position: The position of the point light.

    Returns:
        ``max(0, N . L)``. Zero when the light is behind the surface, and
        zero for a light located exactly at the hit point, where ``L`` is
        undefined.
    """
    to_light = light_position - point
    weight = 0.0
    if length_squared(to_light) > 0.0:
        weight = ti.max(0.0, dot(normal, normalize(to_light)))
    return weight


@ti.func
def eval_diffuse(material: DiffuseMaterial, light_intensity: ti.f32) -> vec3:
    """Base color scaled by the accumulated light intensity."""
    return material.diffuse_color * light_intensity
