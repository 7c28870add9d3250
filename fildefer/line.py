"""Integer line rasterisation with height interpolation along the line."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A projected point on screen with the map height it came from."""

    x: int
    y: int
    z: int = 0


@dataclass(frozen=True)
class LineSetup:
    """A line normalised for stepping along its major axis from left to right."""

    ax: int
    ay: int
    bx: int
    by: int
    dx: int
    dy: int
    z_a: int
    z_b: int
    z_step: float
    increm: int
    steep: bool

    @classmethod
    def from_points(cls, a: Point, b: Point) -> LineSetup:
        """Prepare the line from ``a`` to ``b``.

        Steep lines have their axes swapped, and the end points are ordered
        by x; the heights stay attached to the original ``a`` and ``b``.
        """
        steep = abs(b.y - a.y) > abs(b.x - a.x)
        ax, ay, bx, by = a.x, a.y, b.x, b.y
        if steep:
            ax, ay = ay, ax
            bx, by = by, bx
        if ax > bx:
            ax, bx = bx, ax
            ay, by = by, ay
        dx = bx - ax
        dz = b.z - a.z
        return cls(
            ax=ax,
            ay=ay,
            bx=bx,
            by=by,
            dx=dx,
            dy=abs(by - ay),
            z_a=a.z,
            z_b=b.z,
            z_step=dz / dx if dx else float(dz),
            increm=1 if ay < by else -1,
            steep=steep,
        )


def line_pixels(a: Point, b: Point) -> Iterator[tuple[int, int, float]]:
    """Yield ``(x, y, z)`` for every pixel of the line from ``a`` to ``b``."""
    line = LineSetup.from_points(a, b)
    y = line.ay
    error = line.dx >> 1
    z = float(line.z_a)
    for x in range(line.ax, line.bx + 1):
        yield (y, x, z) if line.steep else (x, y, z)
        error -= line.dy
        if error < 0:
            y += line.increm
            error += line.dx
        z += line.z_step