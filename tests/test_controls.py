import pytest

from fildefer.controls import LIMIT_DN, LIMIT_UP, Action, apply_action
from fildefer.parsing import HeightMap
from fildefer.render import Camera


@pytest.fixture
def heightmap():
    return HeightMap(2, 2, (0, 1, 2, 3))


@pytest.fixture
def camera(heightmap):
    return Camera.for_map(heightmap)


def test_zoom_in_grows_scale(camera, heightmap):
    before = camera.scale
    assert apply_action(camera, Action.ZOOM_IN, heightmap) is True
    assert camera.scale == before + 1


def test_zoom_out_shrinks_scale(camera, heightmap):
    before = camera.scale
    apply_action(camera, Action.ZOOM_OUT, heightmap)
    assert camera.scale == before - 1


def test_zoom_out_stops_at_one(heightmap):
    camera = Camera(scale=1, angle_x=0.0, angle_y=0.0, z_mod=1.0)
    apply_action(camera, Action.ZOOM_OUT, heightmap)
    assert camera.scale == 1


def test_rotate_up_is_clamped(camera, heightmap):
    for _ in range(100):
        apply_action(camera, Action.ROTATE_UP, heightmap)
    assert camera.angle_y < LIMIT_UP
    assert camera.angle_y == pytest.approx(LIMIT_UP - 0.01)


def test_rotate_down_is_clamped(camera, heightmap):
    for _ in range(100):
        apply_action(camera, Action.ROTATE_DOWN, heightmap)
    assert camera.angle_y > LIMIT_DN
    assert camera.angle_y == pytest.approx(LIMIT_DN + 0.01)


def test_rotate_left_and_right_cancel(camera, heightmap):
    start = camera.angle_x
    apply_action(camera, Action.ROTATE_LEFT, heightmap)
    assert camera.angle_x > start
    apply_action(camera, Action.ROTATE_RIGHT, heightmap)
    assert camera.angle_x == pytest.approx(start)


def test_height_multiplier_moves_both_ways(camera, heightmap):
    start = camera.z_mod
    apply_action(camera, Action.Z_PLUS, heightmap)
    assert camera.z_mod > start
    apply_action(camera, Action.Z_MINUS, heightmap)
    apply_action(camera, Action.Z_MINUS, heightmap)
    assert camera.z_mod < start


def test_reset_restores_default_view(camera, heightmap):
    for action in (Action.ZOOM_IN, Action.ROTATE_LEFT, Action.ROTATE_UP, Action.Z_PLUS):
        apply_action(camera, action, heightmap)
    apply_action(camera, Action.RESET, heightmap)
    assert camera == Camera.for_map(heightmap)


def test_quit_returns_false_and_leaves_camera(camera, heightmap):
    snapshot = Camera.for_map(heightmap)
    assert apply_action(camera, Action.QUIT, heightmap) is False
    assert camera == snapshot