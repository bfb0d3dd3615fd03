"""Materials module.

Components:
    diffuse: Diffuse base color and the Lambertian point-light term
"""

from .diffuse import DiffuseMaterial, eval_diffuse, lambert_term

__all__ = [
    "DiffuseMaterial",
    "eval_diffuse",
    "lambert_term",
]
