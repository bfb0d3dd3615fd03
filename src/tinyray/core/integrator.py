"""Shading and the per-pixel render loop.

For every pixel the render kernel builds the primary ray, resolves the
nearest sphere hit and shades it:

    - no hit: the background color
    - hit, no lights: the material's diffuse color
    - hit, with lights: diffuse color * sum(intensity * max(0, N . L))

Pixels are independent, so the pixel loop is the kernel's outermost loop
and Taichi runs it in parallel. Each pixel writes only its own slot of the
framebuffer; the scene storage is read only while the kernel runs.

The framebuffer is a flat, row-major NumPy array of shape
``(width * height, 3)``, top row first, allocated per render call.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from tinyray.core.config import RenderConfig
    >>> from tinyray.core.integrator import render
    >>> from tinyray.scene.manager import SceneManager
    >>> scene = SceneManager()
    >>> scene.add_sphere((0, 0, -16), 2.0, (0.4, 0.4, 0.3))
    0
    >>> framebuffer = render(scene, RenderConfig(width=64, height=48))
    >>> framebuffer.shape
    (3072, 3)
"""

import logging
import time

import numpy as np
import numpy.typing as npt
import taichi as ti
import taichi.math as tm

from tinyray.camera.pinhole import get_ray
from tinyray.core.config import RenderConfig
from tinyray.materials.diffuse import eval_diffuse, lambert_term
from tinyray.scene.intersection import SceneHitRecord, resolve_scene
from tinyray.scene.manager import SceneManager

logger = logging.getLogger(__name__)

vec3 = tm.vec3

Framebuffer = npt.NDArray[np.float32]


# =============================================================================
# Shading
# =============================================================================


@ti.func
def shade(record: SceneHitRecord, storage: ti.template(), background: vec3) -> vec3:
    """Color for a resolved hit or miss.

    The lights of ``storage`` parameterize the shading stage: with none,
    the hit material's color is returned unmodified; otherwise each light
    adds its Lambertian contribution.

    Args:
        record: The nearest hit (or miss) along the ray.
        storage: Scene storage providing the point lights.
        background: Color returned for a miss.

    Returns:
        The shaded color (RGB), not yet clamped.
    """
    color = background
    if record.hit == 1:
        if ti.static(storage.num_lights == 0):
            color = record.material.diffuse_color
        else:
            light_intensity = 0.0
            for k in range(storage.num_lights):
                light_intensity += storage.light_intensities[k] * lambert_term(
                    record.normal, record.point, storage.light_positions[k]
                )
            color = eval_diffuse(record.material, light_intensity)
    return color


@ti.func
def cast_ray(
    ray_origin: vec3,
    ray_direction: vec3,
    storage: ti.template(),
    background: vec3,
    visibility: ti.f32,
) -> vec3:
    """Resolve the nearest hit along a ray and shade it."""
    record = resolve_scene(ray_origin, ray_direction, storage, visibility)
    return shade(record, storage, background)


# =============================================================================
# Rendering Kernels
# =============================================================================


@ti.kernel
def _render_kernel(
    framebuffer: ti.types.ndarray(dtype=vec3, ndim=1),
    storage: ti.template(),
    width: ti.i32,
    height: ti.i32,
    tan_half_fov: ti.f32,
    background: vec3,
    visibility: ti.f32,
):
    for j, i in ti.ndrange(height, width):
        ray = get_ray(i, j, width, height, tan_half_fov)
        framebuffer[i + j * width] = cast_ray(
            ray.origin, ray.direction, storage, background, visibility
        )


@ti.kernel
def _render_single_pixel(
    pixel_i: ti.i32,
    pixel_j: ti.i32,
    storage: ti.template(),
    width: ti.i32,
    height: ti.i32,
    tan_half_fov: ti.f32,
    background: vec3,
    visibility: ti.f32,
) -> vec3:
    ray = get_ray(pixel_i, pixel_j, width, height, tan_half_fov)
    return cast_ray(ray.origin, ray.direction, storage, background, visibility)


@ti.kernel
def _gradient_kernel(
    framebuffer: ti.types.ndarray(dtype=vec3, ndim=1),
    width: ti.i32,
    height: ti.i32,
):
    for j, i in ti.ndrange(height, width):
        framebuffer[i + j * width] = vec3(
            ti.cast(j, ti.f32) / ti.cast(height, ti.f32),
            ti.cast(i, ti.f32) / ti.cast(width, ti.f32),
            0.0,
        )


# =============================================================================
# Public Rendering API
# =============================================================================


def _background(config: RenderConfig):
    return vec3(config.background[0], config.background[1], config.background[2])


def render(scene: SceneManager, config: RenderConfig | None = None) -> Framebuffer:
    """Render a scene into a new framebuffer.

    Args:
        scene: The scene to render. It must not change during the call.
        config: Render configuration. Defaults to RenderConfig().

    Returns:
        Float32 array of shape ``(width * height, 3)``, row-major, top row
        first. Values are not clamped.

    Raises:
        RuntimeError: If the scene exceeds the storage capacity.
    """
    if config is None:
        config = RenderConfig()

    storage = scene.get_storage()
    framebuffer = np.zeros((config.pixel_count, 3), dtype=np.float32)

    logger.info(
        "Rendering %dx%d: %d spheres, %d lights",
        config.width,
        config.height,
        scene.sphere_count,
        scene.light_count,
    )
    start_time = time.perf_counter()

    _render_kernel(
        framebuffer,
        storage,
        config.width,
        config.height,
        config.tan_half_fov,
        _background(config),
        config.visibility,
    )

    logger.debug("Render finished in %.3fs", time.perf_counter() - start_time)
    return framebuffer


def render_pixel(
    scene: SceneManager,
    pixel_i: int,
    pixel_j: int,
    config: RenderConfig | None = None,
) -> tuple[float, float, float]:
    """Shade a single pixel without allocating a framebuffer.

    Args:
        scene: The scene to render.
        pixel_i: Pixel column (0 = left).
        pixel_j: Pixel row (0 = top).
        config: Render configuration. Defaults to RenderConfig().

    Returns:
        Tuple of (R, G, B) color values.

    Raises:
        IndexError: If the pixel lies outside the configured image.
    """
    if config is None:
        config = RenderConfig()
    if not (0 <= pixel_i < config.width and 0 <= pixel_j < config.height):
        raise IndexError(
            f"Pixel ({pixel_i}, {pixel_j}) outside {config.width}x{config.height} image"
        )

    color = _render_single_pixel(
        pixel_i,
        pixel_j,
        scene.get_storage(),
        config.width,
        config.height,
        config.tan_half_fov,
        _background(config),
        config.visibility,
    )
    return (float(color[0]), float(color[1]), float(color[2]))


def render_gradient(config: RenderConfig | None = None) -> Framebuffer:
    """Render the scene-less test pattern.

    Pixel (i, j) gets color ``(j / height, i / width, 0)``: red grows down
    the image, green grows to the right.

    Args:
        config: Render configuration; only the resolution is used.

    Returns:
        Float32 array of shape ``(width * height, 3)``.
    """
    if config is None:
        config = RenderConfig()

    framebuffer = np.zeros((config.pixel_count, 3), dtype=np.float32)
    logger.info("Rendering %dx%d gradient", config.width, config.height)
    _gradient_kernel(framebuffer, config.width, config.height)
    return framebuffer
