"""The interactive wireframe viewer."""

from __future__ import annotations

import os
import sys
from array import array
from collections.abc import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from fildefer.colors import build_color_lut  # noqa: E402
from fildefer.controls import Action, apply_action  # noqa: E402
from fildefer.parsing import HeightMap, MapError, parse_map  # noqa: E402
from fildefer.render import HEIGHT, HUD_COLOR, WIDTH, Camera, Frame, render  # noqa: E402

_HUD_TEXT = (
    "controls:",
    " ",
    "move:       arrow keys",
    "zoom:       +/-",
    "change z:   z/x",
    "reset:      r",
    "exit:       esc",
)

_KEYMAP = {
    pygame.K_UP: Action.ROTATE_UP,
    pygame.K_DOWN: Action.ROTATE_DOWN,
    pygame.K_LEFT: Action.ROTATE_LEFT,
    pygame.K_RIGHT: Action.ROTATE_RIGHT,
    pygame.K_EQUALS: Action.ZOOM_IN,
    pygame.K_PLUS: Action.ZOOM_IN,
    pygame.K_KP_PLUS: Action.ZOOM_IN,
    pygame.K_MINUS: Action.ZOOM_OUT,
    pygame.K_KP_MINUS: Action.ZOOM_OUT,
    pygame.K_z: Action.Z_PLUS,
    pygame.K_x: Action.Z_MINUS,
    pygame.K_r: Action.RESET,
    pygame.K_ESCAPE: Action.QUIT,
}


def hud_lines() -> list[tuple[int, int, str]]:
    """Return the help overlay as ``(x, y, text)`` entries, top to bottom."""
    x = WIDTH >> 4
    return [(x, 30 + 20 * row, text) for row, text in enumerate(_HUD_TEXT)]


def action_for_key(key: int) -> Action | None:
    """Return the action bound to a pygame key code, or None if it is unbound."""
    return _KEYMAP.get(key)


def _rgb_bytes(frame: Frame) -> bytes:
    data = array("I", frame.pixels)
    if sys.byteorder == "big":
        data.byteswap()
    raw = data.tobytes()
    rgb = bytearray(len(frame.pixels) * 3)
    rgb[0::3] = raw[2::4]
    rgb[1::3] = raw[1::4]
    rgb[2::3] = raw[0::4]
    return bytes(rgb)


def _present(screen, font, frame: Frame, heightmap: HeightMap, camera: Camera, lut) -> None:
    render(frame, heightmap, camera, lut)
    image = pygame.image.frombuffer(_rgb_bytes(frame), (frame.width, frame.height), "RGB")
    screen.blit(image, (0, 0))
    hud_rgb = ((HUD_COLOR >> 16) & 0xFF, (HUD_COLOR >> 8) & 0xFF, HUD_COLOR & 0xFF)
    for x, y, text in hud_lines():
        screen.blit(font.render(text, True, hud_rgb), (x, y))
    pygame.display.flip()


def _run(heightmap: HeightMap) -> int:
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("FdF")
        font = pygame.font.Font(None, 20)
        camera = Camera.for_map(heightmap)
        lut = build_color_lut()
        frame = Frame(WIDTH, HEIGHT)
        _present(screen, font, frame, heightmap, camera, lut)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type != pygame.KEYDOWN:
                continue
            action = action_for_key(event.key)
            if action is None:
                continue
            if not apply_action(camera, action, heightmap):
                return 0
            _present(screen, font, frame, heightmap, camera, lut)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the viewer on the map named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: fildefer <map.fdf>", file=sys.stderr)
        return 1
    try:
        heightmap = parse_map(args[0])
    except MapError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    try:
        return _run(heightmap)
    except pygame.error as exc:
        print(f"Display initialization failed: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())