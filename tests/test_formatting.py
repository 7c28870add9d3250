import pytest

from fildefer.formatting import (
    FormatSpec,
    format_plain,
    format_with_flags,
    hex_len,
    is_conversion,
    num_len,
)

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
UINT_MAX = 2**32 - 1


def render(directive, value):
    spec, end = FormatSpec.parse(directive, 0)
    assert end == len(directive)
    return format_with_flags(spec, value)[0]


@pytest.mark.parametrize("char", list("cspdiuxX"))
def test_conversions_recognised(char):
    assert is_conversion(char) is True


@pytest.mark.parametrize("char", ["%", "q", "o", "f", "", "dd"])
def test_other_characters_not_conversions(char):
    assert is_conversion(char) is False


@pytest.mark.parametrize("num", [0, 7, 10, 99, 100, -1, -99, INT_MAX, INT_MIN, UINT_MAX])
def test_num_len_matches_decimal_text(num):
    assert num_len(num) == len(str(num))


@pytest.mark.parametrize("num", [0, 15, 16, 255, 256, INT_MAX, UINT_MAX])
def test_hex_len_matches_hex_text(num):
    assert hex_len(num) == len(format(num, "x"))


def test_hex_len_negative_counts_sign_and_one_digit():
    assert hex_len(-1) == 2


def test_parse_full_directive():
    spec, end = FormatSpec.parse("-10.5d", 0)
    assert spec.has_flag and spec.left_justify
    assert spec.width == 10
    assert spec.precision == 5
    assert spec.conv == "d"
    assert end == 6


def test_parse_zero_pad():
    spec, _ = FormatSpec.parse("05d", 0)
    assert spec.pad == "0"
    assert spec.width == 5


def test_parse_without_flags():
    spec, end = FormatSpec.parse("d", 0)
    assert spec.has_flag is False
    assert spec.conv == "d"
    assert end == 1


def test_parse_unknown_conversion():
    spec, end = FormatSpec.parse("5q", 0)
    assert spec.conv == ""
    assert spec.width == 5
    assert end == 2
    assert spec.takes_argument is False


def test_parse_from_offset():
    spec, end = FormatSpec.parse("ab%7x!", 3)
    assert spec.width == 7
    assert spec.conv == "x"
    assert end == 5


def test_zero_precision_numeric_takes_no_argument():
    spec, _ = FormatSpec.parse(".0x", 0)
    assert spec.precision == 0
    assert spec.takes_argument is False
    assert format_with_flags(spec, 123) == ("", 0)


def test_zero_precision_string_still_takes_argument():
    spec, _ = FormatSpec.parse(".s", 0)
    assert spec.takes_argument is True
    assert format_with_flags(spec, "abc") == ("", 0)


@pytest.mark.parametrize("value", [0, -99, 100, INT_MAX, INT_MIN])
def test_plain_decimal(value):
    assert format_plain("d", value) == "%d" % value
    assert format_plain("i", value) == "%i" % value


def test_plain_decimal_wraps_to_32_bits():
    assert format_plain("d", UINT_MAX) == "%d" % -1


@pytest.mark.parametrize("value", [-100, INT_MAX, INT_MIN, UINT_MAX])
def test_plain_unsigned(value):
    assert format_plain("u", value) == str(value % 2**32)


@pytest.mark.parametrize("value", [0, -1, 1, 10, 99, -101, INT_MAX, INT_MIN, UINT_MAX])
def test_plain_hex(value):
    assert format_plain("x", value) == format(value % 2**32, "x")
    assert format_plain("X", value) == format(value % 2**32, "X")


def test_plain_pointer():
    assert format_plain("p", 0) == "(nil)"
    assert format_plain("p", None) == "(nil)"
    assert format_plain("p", 15) == hex(15)
    assert format_plain("p", -1) == hex(2**64 - 1)


def test_plain_string_and_char():
    assert format_plain("s", None) == "(null)"
    assert format_plain("s", "Hello") == "Hello"
    assert format_plain("c", ord("0") + 256) == "0"
    assert format_plain("c", "A") == "A"
    assert format_plain("q", 5) == ""


@pytest.mark.parametrize(
    "directive, value",
    [
        ("-10d", 42),
        ("010d", -42),
        (".5d", -42),
        ("10.5d", 42),
        (".3d", -1234),
        (".0d", 0),
        (".0u", 0),
        (".20d", INT_MAX),
        (".20d", INT_MIN),
        (".10u", UINT_MAX),
        ("20.15X", UINT_MAX),
        ("-20.15u", UINT_MAX),
        ("-20.15d", INT_MAX),
        ("-14X", 0),
        ("-9X", INT_MAX),
    ],
)
def test_numbers_match_standard_printf(directive, value):
    assert render(directive, value) == ("%" + directive) % value


@pytest.mark.parametrize(
    "directive, value",
    [(".5s", "Hello, world!"), ("-20s", "Hello, world!"), ("20s", "Hello, world!"),
     ("2s", "@@@"), ("-9s", "Aperture"), (".s", "")],
)
def test_strings_match_standard_printf(directive, value):
    assert render(directive, value) == ("%" + directive) % value


@pytest.mark.parametrize("directive", ["-5c", "5c"])
def test_chars_match_standard_printf(directive):
    assert render(directive, "A") == ("%" + directive) % "A"


def test_null_pointer_padding():
    assert render("-6p", 0) == "(nil)".ljust(6)
    assert render("8p", None) == "(nil)".rjust(8)


def test_long_pointer_not_truncated_by_width():
    assert render("-9p", -(2**63)) == hex(2**63)


def test_negative_sign_precedes_space_padding():
    text = render("5d", -42)
    assert len(text) == 5
    assert text[0] == "-"
    assert text.endswith("42")
    assert text[1:-2].strip() == ""


def test_null_string_not_trimmed():
    assert render("5s", None) == "(null)"


def test_string_length_reports_trimmed_content():
    spec, _ = FormatSpec.parse(".5s", 0)
    text, length = format_with_flags(spec, "Hello, world!")
    assert length == len(text)


def test_plain_spec_reports_content_length():
    spec, _ = FormatSpec.parse("x", 0)
    text, length = format_with_flags(spec, UINT_MAX)
    assert text == format(UINT_MAX, "x")
    assert length == len(text)


def test_character_needs_single_char():
    with pytest.raises(ValueError):
        format_plain("c", "ab")