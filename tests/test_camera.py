import numpy as np
import pytest

from fivednine.render.camera import Camera, look_at, ortho


def test_default_view_is_identity():
    assert np.allclose(Camera().view_matrix(), np.identity(4))


def test_look_at_moves_eye_to_origin():
    eye = (3.0, -2.0, 5.0)
    view = look_at(eye, (0.0, 1.0, 0.0), (0.0, 1.0, 0.0))
    assert np.allclose(view @ np.array([*eye, 1.0]), [0.0, 0.0, 0.0, 1.0])


def test_look_at_puts_center_on_negative_z():
    eye = np.array([1.0, 2.0, 3.0])
    center = np.array([4.0, 6.0, 3.0])
    view = look_at(eye, center, (0.0, 0.0, 1.0))
    mapped = view @ np.append(center, 1.0)
    distance = np.linalg.norm(center - eye)
    assert np.allclose(mapped[:3], [0.0, 0.0, -distance])


def test_look_at_rotation_is_orthonormal():
    view = look_at((1.0, 2.0, 3.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    rotation = view[:3, :3]
    assert np.allclose(rotation @ rotation.T, np.identity(3))


def test_ortho_maps_box_corners_to_clip_cube():
    proj = ortho(0.0, 1024.0, 768.0, 0.0, 0.1, 1000.0)
    near_corner = proj @ np.array([0.0, 768.0, -0.1, 1.0])
    far_corner = proj @ np.array([1024.0, 0.0, -1000.0, 1.0])
    assert np.allclose(near_corner, [-1.0, -1.0, -1.0, 1.0])
    assert np.allclose(far_corner, [1.0, 1.0, 1.0, 1.0])


def test_set_translation_also_sets_target():
    camera = Camera()
    camera.set_translation((5.0, 6.0, 7.0))
    assert np.allclose(camera.translation, (5.0, 6.0, 7.0))
    assert np.allclose(camera.translation_target, camera.translation)
    camera.tick(1.0)
    assert np.allclose(camera.translation, (5.0, 6.0, 7.0))


def test_translate_leaves_target():
    camera = Camera()
    camera.translate((1.0, 0.0, 0.0))
    camera.translate((0.0, 2.0, 0.0))
    assert np.allclose(camera.translation, (1.0, 2.0, 0.0))
    assert np.allclose(camera.translation_target, (0.0, 0.0, 0.0))


@pytest.mark.parametrize("dt", [0.5, 1.0, 16.0])
def test_tick_moves_towards_target(dt):
    camera = Camera()
    target = np.array([100.0, -40.0, 1.0])
    camera.set_translation_target(target)
    before = np.linalg.norm(target - camera.translation)
    camera.tick(dt)
    after_delta = target - camera.translation
    after = np.linalg.norm(after_delta)
    assert after < before
    assert np.allclose(np.cross(after_delta, target), 0.0)


def test_translation_is_a_copy():
    camera = Camera()
    snapshot = camera.translation
    snapshot[0] = 99.0
    assert camera.translation[0] == 0.0


def test_view_follows_translation():
    camera = Camera()
    camera.set_translation((10.0, 20.0, 1.0))
    view = camera.view_matrix()
    assert np.allclose(view @ np.array([10.0, 20.0, 1.0, 1.0]), [0.0, 0.0, 0.0, 1.0])