"""Conversion directives: flag parsing and rendering of single fields."""

from __future__ import annotations

from dataclasses import dataclass

from fildefer.parsing import atoi

CONVERSIONS = "cspdiuxX"
NUMERIC_CONVERSIONS = "diuxXp"
_DIGITS = "0123456789"
_FLAG_CHARS = "-.0" + _DIGITS
NULL_STRING = "(null)"
NULL_POINTER = "(nil)"


def _as_int32(value: int) -> int:
    return (int(value) + 2**31) % 2**32 - 2**31


def _as_uint32(value: int) -> int:
    return int(value) % 2**32


def _as_int64(value: int) -> int:
    return (int(value) + 2**63) % 2**64 - 2**63


def _as_uint64(value: int) -> int:
    return int(value) % 2**64


def _pointer(value: int | None) -> int:
    return 0 if value is None else _as_uint64(value)


def _char(value: int | str) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("a character conversion needs exactly one character")
        value = ord(value)
    return chr(int(value) % 256)


def is_conversion(char: str) -> bool:
    """Tell whether ``char`` is one of the supported conversion letters."""
    return len(char) == 1 and char in CONVERSIONS


def num_len(num: int) -> int:
    """Return the printed length of ``num`` in decimal, minus sign included."""
    length = 1
    minus = 0
    if num < 0:
        num = -num
        minus = 1
    while num >= 10:
        num //= 10
        length += 1
    return length + minus


def hex_len(num: int) -> int:
    """Return the hexadecimal digit count of ``num``.

    Negative input is squared with its sign kept, so it always counts as
    two characters unless the 64-bit product wraps.
    """
    length = 1
    minus = 0
    if num < 0:
        num = _as_int64(num * -num)
        minus = 1
    while num >= 16:
        num //= 16
        length += 1
    return length + minus


def _pointer_len(pointer: int) -> int:
    if not pointer:
        return len(NULL_POINTER)
    return hex_len(pointer)


def _content_length(conv: str, value) -> int:
    if conv == "c":
        return 1
    if conv == "s":
        return len(NULL_STRING) if value is None else len(value)
    if conv in ("d", "i"):
        return num_len(_as_int32(value))
    if conv == "u":
        return num_len(_as_uint32(value))
    if conv == "p":
        return _pointer_len(_pointer(value))
    if conv in ("x", "X"):
        return hex_len(_as_uint32(value))
    return 0


def _hex(num: int, conv: str) -> str:
    return format(num, "X" if conv == "X" else "x")


def _number_body(num: int, conv: str) -> str:
    if conv in ("d", "i", "u"):
        return str(num)
    if conv in ("x", "X"):
        return _hex(num, conv)
    if conv == "p":
        if not num:
            return NULL_POINTER
        return "0x" + _hex(_as_uint64(num), conv)
    return ""


def _trimmed(text: str | None, trim: int) -> str:
    if text is None:
        return NULL_STRING
    return text[: len(text) - trim]


@dataclass
class FormatSpec:
    """The flags, width, precision and conversion of one directive."""

    has_flag: bool = False
    left_justify: bool = False
    pad: str = " "
    precision: int = -1
    width: int = 0
    conv: str = ""

    @classmethod
    def parse(cls, fmt: str, pos: int) -> tuple[FormatSpec, int]:
        """Read the directive starting at ``fmt[pos]``, just after the ``%``.

        Returns the spec and the index just past the character that ended it.
        """
        spec = cls()
        end = len(fmt)
        while pos < end and fmt[pos] in _FLAG_CHARS:
            spec.has_flag = True
            ch = fmt[pos]
            if ch == "-":
                spec.left_justify = True
                spec.pad = " "
            elif ch == "0" and spec.width == 0 and not spec.left_justify:
                spec.pad = "0"
            elif ch == ".":
                spec.precision = atoi(fmt[pos + 1 :])
                if spec.precision:
                    pos += num_len(spec.precision)
            elif ch in _DIGITS and spec.precision == -1:
                spec.width = atoi(fmt[pos:])
                pos += num_len(spec.width) - 1
            pos += 1
        pos = min(pos, end)
        if pos < end and is_conversion(fmt[pos]):
            spec.conv = fmt[pos]
        return spec, min(pos + 1, end)

    @property
    def takes_argument(self) -> bool:
        """Whether rendering this directive consumes an argument."""
        if not self.conv:
            return False
        return not (
            self.has_flag and self.precision == 0 and self.conv in NUMERIC_CONVERSIONS
        )


def format_plain(conv: str, value) -> str:
    """Render ``value`` for a directive that carries no flags."""
    if conv == "c":
        return _char(value)
    if conv == "s":
        return _trimmed(value, 0)
    if conv in ("d", "i"):
        return str(_as_int32(value))
    if conv == "u":
        return str(_as_uint32(value))
    if conv == "p":
        pointer = _pointer(value)
        return "0x" + _hex(pointer, conv) if pointer else NULL_POINTER
    if conv in ("x", "X"):
        return _hex(_as_uint32(value), conv)
    return ""


def _format_char(spec: FormatSpec, value) -> str:
    char = _char(value)
    if not spec.width:
        return char
    padding = " " * (spec.width - 1)
    return char + padding if spec.left_justify else padding + char


def _format_string(spec: FormatSpec, value, length: int) -> tuple[str, int]:
    trim = 0
    if spec.precision >= 0 and length > spec.precision:
        trim = length - spec.precision
    body = _trimmed(value, trim)
    if spec.width > length:
        padding = " " * (spec.width - length + trim)
        text = body + padding if spec.left_justify else padding + body
    else:
        text = body
    return text, length - trim


def _format_number(spec: FormatSpec, value, length: int) -> tuple[str, int]:
    conv = spec.conv
    precision, width = spec.precision, spec.width
    sign = ""
    if conv in ("d", "i"):
        num = _as_int32(value)
        if num < 0:
            sign = "-"
            num = -num
            if precision > 0:
                length -= 1
    elif conv in ("u", "x", "X"):
        num = _as_uint32(value)
    else:
        num = _as_int64(_pointer(value))
        precision = -1
        if num:
            length += 2
    body = _number_body(num, conv)
    if not spec.left_justify:
        if precision > length:
            zeros = "0" * (precision - length)
            lead = zeros if precision > width else " " * (width - precision) + zeros
        elif width > length:
            lead = spec.pad * (width - length)
        else:
            lead = ""
        return sign + lead + body, length
    if precision > length:
        tail = " " * (width - precision) if width > precision else ""
        return sign + "0" * (precision - length) + body + tail, length
    tail = " " * (width - length) if width > length else ""
    return sign + body + tail, length


def format_with_flags(spec: FormatSpec, value) -> tuple[str, int]:
    """Render ``value`` according to ``spec``.

    Returns the text and the content length the field is accounted for,
    which the width and precision rules are measured against.
    """
    conv = spec.conv
    if not spec.has_flag:
        return format_plain(conv, value), _content_length(conv, value)
    if not conv:
        return "", 0
    length = _content_length(conv, value) if spec.takes_argument else 0
    if conv == "c":
        return _format_char(spec, value), length
    if conv == "s":
        return _format_string(spec, value, length)
    if spec.precision == 0:
        return "", 0
    return _format_number(spec, value, length)