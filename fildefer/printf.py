"""Formatted output driven by a small printf-style directive language."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from fildefer.formatting import (
    NULL_POINTER,
    NULL_STRING,
    FormatSpec,
    format_plain,
    format_with_flags,
    hex_len,
    is_conversion,
    num_len,
)


def _int32(value: int) -> int:
    return (int(value) + 2**31) % 2**32 - 2**31


def _uint32(value: int) -> int:
    return int(value) % 2**32


def _uint64(value: int) -> int:
    return int(value) % 2**64


def content_len(conv: str, value: Any) -> int:
    """Return how many characters ``value`` takes when printed by ``conv``.

    Unknown conversions take no room.
    """
    if conv == "c":
        return 1
    if conv == "s":
        return len(NULL_STRING) if value is None else len(value)
    if conv in ("d", "i"):
        return num_len(_int32(value))
    if conv == "u":
        return num_len(_uint32(value))
    if conv == "p":
        pointer = 0 if value is None else _uint64(value)
        return hex_len(pointer) if pointer else len(NULL_POINTER)
    if conv in ("x", "X"):
        return hex_len(_uint32(value))
    return 0


class _Arguments:
    """The positional values of one call, consumed front to back."""

    def __init__(self, values: tuple[Any, ...]) -> None:
        self._values = values
        self._next = 0

    @property
    def available(self) -> bool:
        return self._next < len(self._values)

    def peek(self) -> Any:
        return self._values[self._next]

    def take(self) -> Any:
        if not self.available:
            raise TypeError("not enough arguments for format string")
        value = self._values[self._next]
        self._next += 1
        return value


def _next_conversion(fmt: str, pos: int) -> str | None:
    return next((ch for ch in fmt[pos:] if is_conversion(ch)), None)


def _render(fmt: str, args: tuple[Any, ...]) -> str:
    if not isinstance(fmt, str):
        raise TypeError("format must be a string")
    arguments = _Arguments(args)
    pieces: list[str] = []
    literal = 0
    content = 0
    pos = 0
    end = len(fmt)
    while pos < end:
        if fmt[pos] != "%":
            pieces.append(fmt[pos])
            literal += 1
            pos += 1
            continue
        if fmt.startswith("%%", pos):
            pieces.append("%")
            literal += 1
            pos += 2
            continue
        pos += 1
        scanned = _next_conversion(fmt, pos)
        if scanned is None:
            raise ValueError(f"directive at position {pos - 1} has no conversion")
        peeked = content_len(scanned, arguments.peek()) if arguments.available else 0
        spec, pos = FormatSpec.parse(fmt, pos)
        if not spec.conv:
            content += peeked
        elif not spec.has_flag:
            pieces.append(format_plain(spec.conv, arguments.take()))
            content += peeked
        elif spec.takes_argument:
            text, length = format_with_flags(spec, arguments.take())
            pieces.append(text)
            content += length
    output = "".join(pieces)
    if len(output) < content + literal:
        raise ValueError("output is shorter than its directives account for")
    return output


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Raises TypeError when the arguments run out and ValueError when a
    directive has no conversion or the output falls short of its content.
    """
    return _render(fmt, args)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = _render(fmt, args)
    out = sys.stdout if file is None else file
    out.write(text)
    return len(text)