"""Core rendering module.

Components:
    vector: Ray dataclass and vector helpers (dot, cross, norm, normalize)
    config: RenderConfig, the explicit per-render configuration
    integrator: Shading, the parallel pixel loop and render entry points

Note: integrator is NOT imported here to avoid circular imports.
Import it directly from tinyray.core.integrator.
"""

from .config import RenderConfig
from .vector import (
    Ray,
    cross,
    dot,
    length_squared,
    make_ray,
    norm,
    normalize,
    normalize_to,
    ray_at,
    vec2,
    vec3,
    vec4,
)

__all__ = [
    "RenderConfig",
    "Ray",
    "ray_at",
    "make_ray",
    "vec2",
    "vec3",
    "vec4",
    "dot",
    "cross",
    "norm",
    "length_squared",
    "normalize",
    "normalize_to",
]
