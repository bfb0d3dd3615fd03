"""Camera module for primary ray generation.

Components:
    pinhole: Fixed pinhole camera at the origin looking down -z
"""

from .pinhole import CAMERA_ORIGIN, camera_direction, get_ray

__all__ = [
    "CAMERA_ORIGIN",
    "camera_direction",
    "get_ray",
]
