"""Pytest configuration for tinyray tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls, which would
    invalidate every field and kernel created earlier in the session.
    """
    ti.init(arch=ti.cpu, random_seed=42)
    yield


@pytest.fixture
def single_sphere_scene():
    """One ivory sphere on the camera axis at depth 16, radius 2."""
    from tinyray.scene.manager import SceneManager

    scene = SceneManager()
    scene.add_sphere((0.0, 0.0, -16.0), 2.0, (0.4, 0.4, 0.3))
    return scene


@pytest.fixture
def small_config():
    """Low-resolution configuration with the default camera and background."""
    from tinyray.core.config import RenderConfig

    return RenderConfig(width=64, height=48)
