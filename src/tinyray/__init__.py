"""Small Taichi-based ray tracer for scenes of diffuse spheres.

Subpackages:
    core: Vector helpers, render configuration, shading and the render loop
    geometry: Sphere primitive and ray-sphere intersection
    materials: Diffuse material and the Lambertian light term
    scene: Scene description, scene storage and nearest-hit resolution
    camera: Fixed pinhole camera ray generation
    preview: PPM/PNG encoding and export
    utils: Logging setup
"""

__version__ = "0.1.0"
