"""Height-to-colour mapping through a 256-entry gradient table."""

from __future__ import annotations

from collections.abc import Sequence

LUT_SIZE = 256
FLAT_COLOR = 0xFFFFFF


def _lut_entry(i: int) -> int:
    if i < 128:
        red, green = i, 0
    else:
        red, green = 255, (i - 128) * 2
    blue = 255 - i
    return (red << 16) | (green << 8) | blue


def build_color_lut() -> tuple[int, ...]:
    """Return the 256 packed RGB colours of the gradient, lowest height first."""
    return tuple(_lut_entry(i) for i in range(LUT_SIZE))


def get_color(z: float, z_min: float, z_max: float, lut: Sequence[int]) -> int:
    """Pick the gradient colour for height ``z`` within ``[z_min, z_max]``.

    A map without any height range is drawn white.
    """
    if z_max == z_min:
        return FLAT_COLOR
    norm = (z - z_min) / (z_max - z_min)
    index = int(norm * 255.0)
    index = min(max(index, 0), len(lut) - 1)
    return lut[index]