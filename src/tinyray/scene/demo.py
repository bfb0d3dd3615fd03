"""Demo scene: four spheres in two materials, lit by one point light.

Coordinates are camera space: the camera sits at the origin looking down
-z, so every sphere has a negative z.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from tinyray.scene.demo import create_demo_scene
    >>> scene = create_demo_scene(lit=True)
    >>> scene.sphere_count, scene.light_count
    (4, 1)
"""

from tinyray.scene.manager import LightInfo, MaterialInfo, SceneManager, SphereInfo

# =============================================================================
# Demo Scene Constants
# =============================================================================

IVORY = MaterialInfo((0.4, 0.4, 0.3))
RED_RUBBER = MaterialInfo((0.3, 0.1, 0.1))

DEMO_SPHERES = (
    SphereInfo((-3.0, 0.0, -16.0), 2.0, IVORY),
    SphereInfo((-1.0, -1.5, -12.0), 2.0, RED_RUBBER),
    SphereInfo((1.5, -0.5, -18.0), 3.0, RED_RUBBER),
    SphereInfo((7.0, 5.0, -18.0), 4.0, IVORY),
)

DEMO_LIGHTS = (LightInfo((-20.0, 20.0, 20.0), 1.5),)


def create_demo_scene(lit: bool = False) -> SceneManager:
    """Create the demo scene.

    Args:
        lit: If True, add the point light so spheres get Lambertian
            shading. If False, spheres show their flat diffuse colors.

    Returns:
        A SceneManager holding the demo spheres (and light).
    """
    return SceneManager(spheres=DEMO_SPHERES, lights=DEMO_LIGHTS if lit else ())
