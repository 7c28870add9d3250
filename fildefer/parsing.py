"""Reading height maps: rows of space-separated integers, one row per line."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from itertools import chain, takewhile
from os import PathLike

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


class MapError(Exception):
    """The map file cannot be read or is malformed."""


@dataclass(frozen=True)
class HeightMap:
    """A rectangular grid of heights stored row by row."""

    width: int
    height: int
    values: tuple[int, ...]
    z_min: int = field(init=False)
    z_max: int = field(init=False)

    def __post_init__(self) -> None:
        values = tuple(self.values)
        if self.width < 1 or self.height < 1:
            raise ValueError("a height map needs at least one row and one column")
        if len(values) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} values, got {len(values)}"
            )
        low, high = min(values), max(values)
        if low == high:
            high = low + 1
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "z_min", low)
        object.__setattr__(self, "z_max", high)

    def at(self, x: int, y: int) -> int:
        """Return the height at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} map")
        return self.values[y * self.width + x]


def atoi(text: str) -> int:
    """Read a leading decimal integer, C-style: skip blanks, take a sign, stop at a non-digit.

    The result wraps around like a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: ch in _DIGITS, rest))
    value = int(digits or "0") * sign
    return (value - INT_MIN) % 2**32 + INT_MIN


def numlen(num: int) -> int:
    """Return the number of decimal digits of ``num``, ignoring its sign (11 for INT_MIN)."""
    if num == INT_MIN:
        return 11
    return len(str(abs(num)))


def _lines(text: str) -> Iterator[str]:
    """Yield lines with their trailing newline kept, as a line reader would."""
    parts = text.split("\n")
    for part in parts[:-1]:
        yield part + "\n"
    if parts[-1]:
        yield parts[-1]


def _tokens(line: str) -> list[str]:
    return [token for token in line.split(" ") if token]


def parse_map_text(text: str) -> HeightMap:
    """Build a height map from the text of a map file.

    Every row must hold as many fields as the first one; a row without
    any field ends the map. A field may carry a ``,colour`` suffix,
    which is ignored.
    """
    rows: list[list[int]] = []
    for line in _lines(text):
        tokens = _tokens(line)
        if not tokens:
            break
        if rows and len(tokens) != len(rows[0]):
            raise MapError(
                f"row {len(rows) + 1} has {len(tokens)} fields, expected {len(rows[0])}"
            )
        rows.append([atoi(token) for token in tokens])
    if not rows:
        raise MapError("map is empty")
    return HeightMap(len(rows[0]), len(rows), tuple(chain.from_iterable(rows)))


def parse_map(path: str | PathLike[str]) -> HeightMap:
    """Read and parse the map file at ``path``."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError(f"{path}: {exc.strerror or exc}") from exc
    return parse_map_text(text)