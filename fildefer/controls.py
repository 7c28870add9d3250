"""Camera adjustments driven by user actions."""

from __future__ import annotations

from enum import Enum, auto

from fildefer.parsing import HeightMap
from fildefer.render import Camera

ANGLE_STEP = 0.1
Z_STEP = 0.1
LIMIT_UP = 3.1
LIMIT_DN = -0.004


class Action(Enum):
    """Everything the viewer can be asked to do."""

    ROTATE_UP = auto()
    ROTATE_DOWN = auto()
    ROTATE_LEFT = auto()
    ROTATE_RIGHT = auto()
    ZOOM_IN = auto()
    ZOOM_OUT = auto()
    Z_PLUS = auto()
    Z_MINUS = auto()
    RESET = auto()
    QUIT = auto()


def _tilt(camera: Camera, delta: float) -> None:
    camera.angle_y += delta
    if camera.angle_y >= LIMIT_UP:
        camera.angle_y = LIMIT_UP - 0.01
    elif camera.angle_y <= LIMIT_DN:
        camera.angle_y = LIMIT_DN + 0.01


def apply_action(camera: Camera, action: Action, heightmap: HeightMap) -> bool:
    """Apply ``action`` to ``camera`` in place.

    Returns False when the action asks the viewer to stop, True otherwise.
    """
    match action:
        case Action.QUIT:
            return False
        case Action.ROTATE_UP:
            _tilt(camera, ANGLE_STEP)
        case Action.ROTATE_DOWN:
            _tilt(camera, -ANGLE_STEP)
        case Action.ROTATE_LEFT:
            camera.angle_x += ANGLE_STEP
        case Action.ROTATE_RIGHT:
            camera.angle_x -= ANGLE_STEP
        case Action.ZOOM_IN:
            camera.scale += 1
        case Action.ZOOM_OUT:
            if camera.scale > 1:
                camera.scale -= 1
        case Action.Z_MINUS:
            camera.z_mod -= Z_STEP
        case Action.Z_PLUS:
            camera.z_mod += Z_STEP
        case Action.RESET:
            camera.reset(heightmap)
    return True