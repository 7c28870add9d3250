"""Projecting a height map onto the screen and rasterising its wireframe."""

from __future__ import annotations

from array import array
from dataclasses import dataclass
from math import cos, pi, sin

from fildefer.colors import get_color
from fildefer.line import Point, line_pixels
from fildefer.parsing import HeightMap

WIDTH = 1000
HEIGHT = 700
HUD_COLOR = 0xADD8E6


@dataclass
class Camera:
    """View parameters: zoom, two rotation angles and a height multiplier."""

    scale: int
    angle_x: float
    angle_y: float
    z_mod: float

    @classmethod
    def for_map(cls, heightmap: HeightMap) -> Camera:
        """Return the default view for ``heightmap``."""
        return cls(
            scale=1000 // (heightmap.width + heightmap.height),
            angle_x=pi / 6,
            angle_y=pi / 3,
            z_mod=0.6,
        )

    def reset(self, heightmap: HeightMap) -> None:
        """Restore the default view for ``heightmap`` in place."""
        fresh = Camera.for_map(heightmap)
        self.scale = fresh.scale
        self.angle_x = fresh.angle_x
        self.angle_y = fresh.angle_y
        self.z_mod = fresh.z_mod


class Frame:
    """A block of packed RGB pixels, stored row by row."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width < 1 or height < 1:
            raise ValueError("a frame needs a positive width and height")
        self.width = width
        self.height = height
        self.pixels = array("I", [0]) * (width * height)

    def clear(self) -> None:
        """Paint every pixel black."""
        self.pixels = array("I", [0]) * (self.width * self.height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set a pixel; points outside the frame are silently dropped."""
        if self._inside(x, y):
            self.pixels[y * self.width + x] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour of the pixel at ``(x, y)``."""
        if not self._inside(x, y):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} frame")
        return self.pixels[y * self.width + x]


def project(heightmap: HeightMap, camera: Camera, index: int) -> Point:
    """Project the map cell at flat ``index`` to screen coordinates."""
    if not 0 <= index < len(heightmap.values):
        raise IndexError(f"cell {index} is outside the map")
    width = heightmap.width
    height_value = heightmap.values[index]
    z = height_value * camera.z_mod
    relat_x = (index % width) - width / 2.0
    cos_x, sin_x = cos(camera.angle_x), sin(camera.angle_x)
    x = int((relat_x * cos_x - z * sin_x) * camera.scale + WIDTH // 2)
    z_rot_y = relat_x * sin_x + z * cos_x
    relat_y = (index // width) - heightmap.height / 2.0
    y_rot_x = relat_y * cos(camera.angle_y) - z_rot_y * sin(camera.angle_y)
    y = int(y_rot_x * camera.scale + HEIGHT // 2)
    return Point(x, y, height_value)


def _draw_segment(
    frame: Frame, heightmap: HeightMap, a: Point, b: Point, lut
) -> None:
    for x, y, z in line_pixels(a, b):
        frame.put_pixel(x, y, get_color(z, heightmap.z_min, heightmap.z_max, lut))


def render(frame: Frame, heightmap: HeightMap, camera: Camera, lut) -> None:
    """Clear ``frame`` and draw the wireframe of ``heightmap`` into it."""
    frame.clear()
    width, height = heightmap.width, heightmap.height
    points = [project(heightmap, camera, i) for i in range(width * height)]
    for index, point in enumerate(points):
        row, column = divmod(index, width)
        if column < width - 1:
            _draw_segment(frame, heightmap, point, points[index + 1], lut)
        if row < height - 1:
            _draw_segment(frame, heightmap, point, points[index + width], lut)