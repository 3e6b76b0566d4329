import math

import numpy as np
import pytest

from voxelkit.camera import Camera


def _apply(matrix, point):
    v = matrix @ np.array([*point, 1.0])
    return v[:3] / v[3]


def test_initial_vectors():
    cam = Camera((0.0, 0.0, 0.0), 1.5)
    np.testing.assert_allclose(cam.front, (0.0, 0.0, -1.0))
    np.testing.assert_allclose(cam.right, (1.0, 0.0, 0.0))
    np.testing.assert_allclose(cam.up, (0.0, 1.0, 0.0))
    np.testing.assert_allclose(cam.dir, (0.0, 0.0, -1.0))


def test_fov_is_settable():
    cam = Camera((0.0, 0.0, 0.0), 1.0)
    cam.fov = 2.0
    assert cam.fov == 2.0


@pytest.mark.parametrize("angles", [(0.3, 0.7, 0.0), (-1.1, 2.0, 0.4), (0.0, 0.0, 1.2)])
def test_rotation_keeps_basis_orthonormal(angles):
    cam = Camera((0.0, 0.0, 0.0), 1.0)
    cam.rotate(*angles)
    for vec in (cam.front, cam.up, cam.right):
        assert np.linalg.norm(vec) == pytest.approx(1.0)
    assert np.dot(cam.front, cam.up) == pytest.approx(0.0, abs=1e-9)
    assert np.dot(cam.front, cam.right) == pytest.approx(0.0, abs=1e-9)


def test_dir_is_horizontal_and_unit():
    cam = Camera((0.0, 0.0, 0.0), 1.0)
    cam.rotate(0.5, 1.0, 0.0)
    assert cam.dir[1] == 0.0
    assert math.hypot(cam.dir[0], cam.dir[2]) == pytest.approx(1.0)


def test_full_turn_returns_to_identity():
    cam = Camera((0.0, 0.0, 0.0), 1.0)
    cam.rotate(0.0, 2 * math.pi, 0.0)
    np.testing.assert_allclose(cam.rotation, np.identity(4), atol=1e-9)


def test_yaw_keeps_front_horizontal():
    cam = Camera((0.0, 0.0, 0.0), 1.0)
    cam.rotate(0.0, math.pi / 2, 0.0)
    assert cam.front[1] == pytest.approx(0.0, abs=1e-9)
    np.testing.assert_allclose(cam.up, (0.0, 1.0, 0.0), atol=1e-9)


def test_view_at_origin_without_rotation_is_identity():
    cam = Camera((0.0, 0.0, 0.0), 1.0)
    np.testing.assert_allclose(cam.view(), np.identity(4), atol=1e-12)


def test_view_moves_camera_position_to_origin():
    cam = Camera((3.0, -2.0, 7.0), 1.0)
    cam.rotate(0.2, 0.9, 0.0)
    np.testing.assert_allclose(_apply(cam.view(), cam.position), (0.0, 0.0, 0.0), atol=1e-9)


def test_view_without_position_ignores_position():
    cam = Camera((3.0, -2.0, 7.0), 1.0)
    other = Camera((0.0, 0.0, 0.0), 1.0)
    np.testing.assert_allclose(cam.view(with_position=False), other.view())


def test_perspective_projection_structure():
    cam = Camera((0.0, 0.0, 0.0), 1.2)
    proj = cam.projection(1280, 720)
    assert proj[3, 2] == -1.0
    assert proj[0, 0] * 1280 / 720 == pytest.approx(proj[1, 1])


def test_perspective_near_and_far_planes_map_to_clip_bounds():
    cam = Camera((0.0, 0.0, 0.0), 1.2)
    proj = cam.projection(4, 3)
    assert _apply(proj, (0.0, 0.0, -0.05))[2] == pytest.approx(-1.0)
    assert _apply(proj, (0.0, 0.0, -1500.0))[2] == pytest.approx(1.0)


def test_explicit_aspect_overrides_size():
    cam = Camera((0.0, 0.0, 0.0), 1.0)
    cam.aspect = 2.0
    np.testing.assert_allclose(cam.projection(100, 100), cam.projection(10, 5))


def test_orthographic_projection_corners():
    cam = Camera((0.0, 0.0, 0.0), 10.0)
    cam.perspective = False
    proj = cam.projection(200, 100)
    np.testing.assert_allclose(_apply(proj, (0.0, 0.0, 0.0))[:2], (-1.0, -1.0))
    np.testing.assert_allclose(_apply(proj, (20.0, 10.0, 0.0))[:2], (1.0, 1.0))


def test_flipped_orthographic_projection_inverts_y():
    cam = Camera((0.0, 0.0, 0.0), 10.0)
    cam.perspective = False
    cam.flipped = True
    proj = cam.projection(200, 100)
    np.testing.assert_allclose(_apply(proj, (0.0, 0.0, 0.0))[:2], (-1.0, 1.0))
    np.testing.assert_allclose(_apply(proj, (20.0, 10.0, 0.0))[:2], (1.0, -1.0))


def test_orthographic_view_is_translation():
    cam = Camera((4.0, 5.0, 6.0), 1.0)
    cam.perspective = False
    np.testing.assert_allclose(_apply(cam.view(), (0.0, 0.0, 0.0)), (4.0, 5.0, 6.0))


def test_proj_view_is_product():
    cam = Camera((1.0, 2.0, 3.0), 1.3)
    cam.rotate(0.1, 0.4, 0.0)
    np.testing.assert_allclose(cam.proj_view(800, 600), cam.projection(800, 600) @ cam.view())


def test_zoom_narrows_perspective():
    cam = Camera((0.0, 0.0, 0.0), 1.2)
    wide = cam.projection(1, 1)[1, 1]
    cam.zoom = 0.5
    assert cam.projection(1, 1)[1, 1] > wide