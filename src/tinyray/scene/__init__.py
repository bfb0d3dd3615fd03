"""Scene module for scene description and ray-scene queries.

Components:
    manager: Validated sphere/material/light descriptions (SceneManager)
    intersection: Taichi field storage and nearest-hit resolution
    demo: The hardcoded demo scene
"""

from .demo import DEMO_LIGHTS, DEMO_SPHERES, IVORY, RED_RUBBER, create_demo_scene
from .intersection import (
    MAX_LIGHTS,
    MAX_SPHERES,
    SceneHitRecord,
    SceneStorage,
    resolve_scene,
)
from .manager import LightInfo, MaterialInfo, SceneManager, SphereInfo, as_vec3

__all__ = [
    # Intersection module
    "SceneHitRecord",
    "SceneStorage",
    "resolve_scene",
    "MAX_SPHERES",
    "MAX_LIGHTS",
    # Manager module
    "SceneManager",
    "MaterialInfo",
    "SphereInfo",
    "LightInfo",
    "as_vec3",
    # Demo scene
    "create_demo_scene",
    "DEMO_SPHERES",
    "DEMO_LIGHTS",
    "IVORY",
    "RED_RUBBER",
]
