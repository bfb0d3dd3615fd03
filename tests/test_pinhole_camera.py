"""Unit tests for the pinhole camera module.

Tests cover:
- Primary ray direction through pixel centers
- Image orientation (left/right, top/bottom)
- Symmetry, normalization and aspect ratio
- Field of view
"""

import math

import numpy as np
import pytest
import taichi as ti


def _directions(pixels, width, height, tan_half_fov=1.0):
    """Run camera_direction for each (i, j) pixel and return an (N, 3) array."""
    from tinyray.camera.pinhole import camera_direction

    n = len(pixels)
    pixel_i = ti.field(dtype=ti.i32, shape=n)
    pixel_j = ti.field(dtype=ti.i32, shape=n)
    result = ti.Vector.field(3, dtype=ti.f32, shape=n)
    pixel_i.from_numpy(np.array([p[0] for p in pixels], dtype=np.int32))
    pixel_j.from_numpy(np.array([p[1] for p in pixels], dtype=np.int32))

    @ti.kernel
    def test_kernel(width: ti.i32, height: ti.i32, tan_half_fov: ti.f32):
        for k in range(n):
            result[k] = camera_direction(pixel_i[k], pixel_j[k], width, height, tan_half_fov)

    test_kernel(width, height, tan_half_fov)
    return result.to_numpy()


def _expected(i, j, width, height, tan_half_fov=1.0):
    x = (2.0 * (i + 0.5) / width - 1.0) * tan_half_fov * width / height
    y = -(2.0 * (j + 0.5) / height - 1.0) * tan_half_fov
    d = np.array([x, y, -1.0])
    return d / np.linalg.norm(d)


class TestRayGeneration:
    """Tests for primary ray generation."""

    def test_center_pixel_of_odd_image_looks_down_negative_z(self):
        (d,) = _directions([(2, 1)], width=5, height=3)
        assert d == pytest.approx([0.0, 0.0, -1.0], abs=1e-6)

    @pytest.mark.parametrize(
        "i, j",
        [(0, 0), (63, 0), (0, 47), (63, 47), (32, 24), (10, 40)],
    )
    def test_direction_matches_pixel_center_formula(self, i, j):
        (d,) = _directions([(i, j)], width=64, height=48)
        assert d == pytest.approx(_expected(i, j, 64, 48), abs=1e-5)

    def test_image_orientation(self):
        """Column 0 is on the left (-x), row 0 is at the top (+y)."""
        top_left, bottom_right = _directions([(0, 0), (63, 47)], width=64, height=48)
        assert top_left[0] < 0.0 and top_left[1] > 0.0
        assert bottom_right[0] > 0.0 and bottom_right[1] < 0.0

    def test_corner_rays_symmetric(self):
        top_left, top_right, bottom_left, bottom_right = _directions(
            [(0, 0), (63, 0), (0, 47), (63, 47)], width=64, height=48
        )
        assert top_right == pytest.approx(top_left * [-1.0, 1.0, 1.0], abs=1e-6)
        assert bottom_left == pytest.approx(top_left * [1.0, -1.0, 1.0], abs=1e-6)
        assert bottom_right == pytest.approx(top_left * [-1.0, -1.0, 1.0], abs=1e-6)

    def test_ray_direction_normalized(self):
        pixels = [(i, j) for i in range(0, 64, 9) for j in range(0, 48, 7)]
        directions = _directions(pixels, width=64, height=48)
        assert np.linalg.norm(directions, axis=1) == pytest.approx(
            np.ones(len(pixels)), abs=1e-5
        )
        assert (directions[:, 2] < 0.0).all()

    def test_ray_origin_is_camera_origin(self):
        from tinyray.camera.pinhole import get_ray

        origin = ti.field(dtype=ti.math.vec3, shape=())
        direction = ti.field(dtype=ti.math.vec3, shape=())

        @ti.kernel
        def test_kernel():
            ray = get_ray(3, 4, 10, 10, 1.0)
            origin[None] = ray.origin
            direction[None] = ray.direction

        test_kernel()
        assert origin[None].to_numpy() == pytest.approx([0.0, 0.0, 0.0])
        assert direction[None].to_numpy() == pytest.approx(_expected(3, 4, 10, 10), abs=1e-5)


class TestFieldOfView:
    """Tests for field of view and aspect ratio."""

    def test_fov_90_edge_rays(self):
        """With fov = 90 degrees the image plane spans y in [-1, 1] at z = -1."""
        # Middle column of an odd-width image has x == 0
        top, bottom = _directions([(1, 0), (1, 999)], width=3, height=1000)
        assert top[1] / -top[2] == pytest.approx(1.0 - 1.0 / 1000.0, abs=1e-4)
        assert bottom[1] / -bottom[2] == pytest.approx(-(1.0 - 1.0 / 1000.0), abs=1e-4)

    def test_narrow_fov(self):
        tan_half = math.tan(math.radians(10.0))
        wide, narrow = _directions([(0, 0)], 8, 8), _directions([(0, 0)], 8, 8, tan_half)
        assert abs(narrow[0][1]) < abs(wide[0][1])
        assert narrow[0] == pytest.approx(_expected(0, 0, 8, 8, tan_half), abs=1e-5)

    def test_aspect_ratio_affects_horizontal(self):
        """Same pixel fraction, wider image: larger x, same y on the image plane."""
        (square,) = _directions([(0, 0)], width=10, height=10)
        (wide,) = _directions([(0, 0)], width=20, height=10)
        assert wide[0] / wide[2] == pytest.approx(2.0 * (0.95 / 0.9) * square[0] / square[2], rel=1e-4)
        assert wide[1] / wide[2] == pytest.approx(square[1] / square[2], rel=1e-5)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
