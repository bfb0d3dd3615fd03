"""Scene description: spheres, materials and point lights.

The SceneManager collects validated, immutable descriptions of the objects
in a scene and lazily snapshots them into a SceneStorage (Taichi fields)
for rendering. Invalid geometry is rejected here with ValueError, before
anything reaches a kernel.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from tinyray.scene.manager import MaterialInfo, SceneManager
    >>> ivory = MaterialInfo((0.4, 0.4, 0.3))
    >>> scene = SceneManager()
    >>> scene.add_sphere((-3, 0, -16), 2.0, ivory)
    0
    >>> scene.add_light((-20, 20, 20), 1.5)
    0
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass

from tinyray.core.config import Vec3Like, as_vec3
from tinyray.scene.intersection import SceneStorage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MaterialInfo:
    """A diffuse material.

    Attributes:
        diffuse_color: Base color (R, G, B).
    """

    diffuse_color: tuple[float, float, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "diffuse_color", as_vec3(self.diffuse_color, "diffuse_color"))


@dataclass(frozen=True)
class SphereInfo:
    """A sphere in the scene.

    The material is held by value; spheres built from the same MaterialInfo
    share nothing mutable.

    Attributes:
        center: The center of the sphere.
        radius: The radius of the sphere (must be positive).
        material: The sphere's material.
    """

    center: tuple[float, float, float]
    radius: float
    material: MaterialInfo

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", as_vec3(self.center, "center"))
        radius = float(self.radius)
        if not radius > 0.0 or not math.isfinite(radius):
            raise ValueError(f"Sphere radius must be positive, got {self.radius}")
        object.__setattr__(self, "radius", radius)
        if not isinstance(self.material, MaterialInfo):
            object.__setattr__(self, "material", MaterialInfo(self.material))


@dataclass(frozen=True)
class LightInfo:
    """A point light.

    Attributes:
        position: The position of the light.
        intensity: Scalar intensity (must be non-negative).
    """

    position: tuple[float, float, float]
    intensity: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", as_vec3(self.position, "position"))
        intensity = float(self.intensity)
        if not intensity >= 0.0 or not math.isfinite(intensity):
            raise ValueError(f"Light intensity must be non-negative, got {self.intensity}")
        object.__setattr__(self, "intensity", intensity)


class SceneManager:
    """Ordered collection of spheres and point lights.

    Scene order matters: when two spheres are hit at exactly the same
    distance, the one added first is reported.

    Attributes:
        spheres: SphereInfo for every sphere, in insertion order.
        lights: LightInfo for every point light.
    """

    def __init__(
        self,
        spheres: Iterable[SphereInfo] = (),
        lights: Iterable[LightInfo] = (),
    ) -> None:
        self.spheres: list[SphereInfo] = []
        self.lights: list[LightInfo] = []
        self._storage: SceneStorage | None = None
        for sphere in spheres:
            self._append_sphere(sphere)
        for light in lights:
            self._append_light(light)

    def _append_sphere(self, sphere: SphereInfo) -> int:
        self.spheres.append(sphere)
        self._storage = None
        return len(self.spheres) - 1

    def _append_light(self, light: LightInfo) -> int:
        self.lights.append(light)
        self._storage = None
        return len(self.lights) - 1

    def add_sphere(
        self,
        center: Vec3Like,
        radius: float,
        material: MaterialInfo | Vec3Like,
    ) -> int:
        """Add a sphere to the scene.

        Args:
            center: The center of the sphere.
            radius: The radius of the sphere (must be positive).
            material: A MaterialInfo, or a bare (R, G, B) diffuse color.

        Returns:
            The index of the added sphere.

        Raises:
            ValueError: If the radius is not positive or a vector is malformed.
        """
        if not isinstance(material, MaterialInfo):
            material = MaterialInfo(tuple(material))
        return self._append_sphere(SphereInfo(tuple(center), radius, material))

    def add_light(self, position: Vec3Like, intensity: float) -> int:
        """Add a point light to the scene.

        Returns:
            The index of the added light.

        Raises:
            ValueError: If the intensity is negative or the position malformed.
        """
        return self._append_light(LightInfo(tuple(position), intensity))

    def clear(self) -> None:
        """Remove all spheres and lights."""
        self.spheres.clear()
        self.lights.clear()
        self._storage = None

    @property
    def sphere_count(self) -> int:
        return len(self.spheres)

    @property
    def light_count(self) -> int:
        return len(self.lights)

    def get_storage(self) -> SceneStorage:
        """Get the Taichi field snapshot of the scene.

        The snapshot is built on first use and reused until the scene
        changes, so rendering the same scene repeatedly does not reallocate
        fields or recompile kernels.

        Raises:
            RuntimeError: If the scene exceeds the storage capacity.
        """
        if self._storage is None:
            logger.debug(
                "Uploading scene: %d spheres, %d lights", self.sphere_count, self.light_count
            )
            self._storage = SceneStorage(self.spheres, self.lights)
        return self._storage

    def __repr__(self) -> str:
        return f"SceneManager(spheres={self.sphere_count}, lights={self.light_count})"
