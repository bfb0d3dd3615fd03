"""Scene storage and nearest-hit resolution.

The spheres of a scene are copied into Taichi fields (Structure of Arrays
layout) once per scene, together with the point lights used by the shader.
``resolve_scene`` then tests a ray against every sphere by brute force and
keeps the globally nearest hit.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from tinyray.scene.manager import SceneManager
    >>> scene = SceneManager()
    >>> scene.add_sphere((0, 0, -16), 2.0, (0.4, 0.4, 0.3))
    0
    >>> storage = scene.get_storage()
    >>> # Within a Taichi kernel taking ``storage: ti.template()``:
    >>> # rec = resolve_scene(origin, direction, storage, 1000.0)
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np
import taichi as ti
import taichi.math as tm

from tinyray.core.vector import normalize
from tinyray.geometry.sphere import intersect_sphere, make_sphere
from tinyray.materials.diffuse import DiffuseMaterial

if TYPE_CHECKING:
    from tinyray.scene.manager import LightInfo, SphereInfo

vec3 = tm.vec3

# Maximum number of primitives and lights supported in one scene
MAX_SPHERES = 1024
MAX_LIGHTS = 64


@ti.dataclass
class SceneHitRecord:
    """Record of the nearest ray-scene intersection.

    Attributes:
        hit: 1 if some sphere was hit closer than the visibility bound,
            0 for a miss. The other fields are only valid when hit == 1.
        t: The distance along the ray to the hit point.
        point: The hit point.
        normal: The unit outward normal, ``normalize(point - center)``.
        material: Copy of the hit sphere's material.
    """

    hit: ti.i32
    t: ti.f32
    point: vec3
    normal: vec3
    material: DiffuseMaterial


@ti.data_oriented
class SceneStorage:
    """Taichi field storage for one immutable snapshot of a scene.

    Fields are allocated with at least one slot so that an empty scene is
    still a valid kernel argument; ``num_spheres`` and ``num_lights`` hold
    the real counts and are compile-time constants for the kernels that
    read this storage.

    Attributes:
        num_spheres: Number of spheres stored.
        num_lights: Number of point lights stored.
        sphere_centers: Sphere centers, shape ``(capacity,)`` of vec3.
        sphere_radii: Sphere radii.
        sphere_colors: Diffuse color of each sphere's material.
        light_positions: Point light positions.
        light_intensities: Point light intensities.
    """

    def __init__(
        self, spheres: "Sequence[SphereInfo]", lights: "Sequence[LightInfo]" = ()
    ) -> None:
        """Copy spheres and lights into newly allocated fields.

        Args:
            spheres: Validated sphere descriptions, in scene order.
            lights: Validated point lights.

        Raises:
            RuntimeError: If the scene exceeds MAX_SPHERES or MAX_LIGHTS.
        """
        if len(spheres) > MAX_SPHERES:
            raise RuntimeError(f"Maximum number of spheres ({MAX_SPHERES}) exceeded")
        if len(lights) > MAX_LIGHTS:
            raise RuntimeError(f"Maximum number of lights ({MAX_LIGHTS}) exceeded")

        self.num_spheres = len(spheres)
        self.num_lights = len(lights)

        sphere_capacity = max(self.num_spheres, 1)
        light_capacity = max(self.num_lights, 1)

        self.sphere_centers = ti.Vector.field(3, dtype=ti.f32, shape=sphere_capacity)
        self.sphere_radii = ti.field(dtype=ti.f32, shape=sphere_capacity)
        self.sphere_colors = ti.Vector.field(3, dtype=ti.f32, shape=sphere_capacity)
        self.light_positions = ti.Vector.field(3, dtype=ti.f32, shape=light_capacity)
        self.light_intensities = ti.field(dtype=ti.f32, shape=light_capacity)

        centers = np.zeros((sphere_capacity, 3), dtype=np.float32)
        radii = np.zeros(sphere_capacity, dtype=np.float32)
        colors = np.zeros((sphere_capacity, 3), dtype=np.float32)
        for i, sphere in enumerate(spheres):
            centers[i] = sphere.center
            radii[i] = sphere.radius
            colors[i] = sphere.material.diffuse_color

        positions = np.zeros((light_capacity, 3), dtype=np.float32)
        intensities = np.zeros(light_capacity, dtype=np.float32)
        for i, light in enumerate(lights):
            positions[i] = light.position
            intensities[i] = light.intensity

        self.sphere_centers.from_numpy(centers)
        self.sphere_radii.from_numpy(radii)
        self.sphere_colors.from_numpy(colors)
        self.light_positions.from_numpy(positions)
        self.light_intensities.from_numpy(intensities)


@ti.func
def _make_miss_record() -> SceneHitRecord:
    return SceneHitRecord(
        hit=0,
        t=0.0,
        point=vec3(0.0, 0.0, 0.0),
        normal=vec3(0.0, 0.0, 0.0),
        material=DiffuseMaterial(diffuse_color=vec3(0.0, 0.0, 0.0)),
    )


@ti.func
def resolve_scene(
    ray_origin: vec3,
    ray_direction: vec3,
    storage: ti.template(),
    visibility: ti.f32,
) -> SceneHitRecord:
    """Find the nearest sphere hit along a ray.

    Every sphere is tested in scene order. A hit replaces the current best
    only when it is strictly closer, so of two spheres at the same distance
    the one earlier in the scene wins. Hits at or beyond ``visibility`` are
    treated as no hit at all.

    Args:
        ray_origin: The starting point of the ray.
        ray_direction: The unit direction of the ray.
        storage: The SceneStorage to test against.
        visibility: Distance bound; only hits with ``t < visibility`` count.

    Returns:
        The nearest SceneHitRecord, or a miss record (hit == 0).
    """
    closest_t = visibility
    result = _make_miss_record()

    for i in range(storage.num_spheres):
        sphere = make_sphere(storage.sphere_centers[i], storage.sphere_radii[i])
        did_hit, t = intersect_sphere(ray_origin, ray_direction, sphere)
        if did_hit == 1 and t < closest_t:
            closest_t = t
            point = ray_origin + t * ray_direction
            result = SceneHitRecord(
                hit=1,
                t=t,
                point=point,
                normal=normalize(point - sphere.center),
                material=DiffuseMaterial(diffuse_color=storage.sphere_colors[i]),
            )

    return result
