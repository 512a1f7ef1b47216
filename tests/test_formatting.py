import io

import pytest

from gbclib.formatting import (
    AssertionFailure,
    ScanMismatch,
    assert_failed,
    printf,
    puts,
    scanf,
    sprintf,
)


def _reader(*lines):
    it = iter(lines)
    return lambda: next(it, None)


def test_sprintf_signed_and_strings():
    assert sprintf("%d:%s", -5, "ok") == "-5:ok"


def test_sprintf_char_from_code_and_str():
    assert sprintf("%c%c", ord("A"), "b") == "Ab"


def test_sprintf_hex_is_upper_case():
    assert sprintf("%x", 255) == "FF"


def test_sprintf_unsigned_wraps_to_16_bits():
    assert sprintf("%u", -1) == "65535"
    assert sprintf("%u", 1234) == str(1234)


def test_sprintf_signed_reads_high_bit():
    assert sprintf("%d", 0xFFFF) == sprintf("%d", -1)


def test_sprintf_unknown_conversion_prints_nothing():
    assert sprintf("a%%b%q") == "ab"


def test_sprintf_stops_at_terminator():
    assert sprintf("ab\0cd") == "ab"


def test_sprintf_missing_argument():
    with pytest.raises(TypeError):
        sprintf("%d")


def test_printf_and_puts_write_to_stream():
    out = io.StringIO()
    printf("%s=%d", "x", 7, out=out)
    puts("done", out=out)
    assert out.getvalue() == "x=7done\n"


def test_scanf_decimal_and_hex():
    assert scanf("%d %x", _reader("12 1f")) == [12, 0x1F]


def test_scanf_reads_further_lines():
    assert scanf("%d %d", _reader("5", "   ", "7")) == [5, 7]


def test_scanf_signs_and_octal():
    assert scanf("%d %o", _reader("-3 +17")) == [-3, 0o17]


def test_scanf_int_wraps_to_8_bits():
    assert scanf("%d", _reader("200")) == [-56]


def test_scanf_long_has_wider_range():
    assert scanf("%ld", _reader("1000")) == [1000]


def test_scanf_char_and_rest_of_line():
    assert scanf("%c%s", _reader("  xhello world")) == ["x", "hello world"]


def test_scanf_literal_mismatch():
    with pytest.raises(ScanMismatch):
        scanf("%d;", _reader("4,"))


def test_scanf_end_of_input():
    with pytest.raises(EOFError):
        scanf("%d", _reader(""))


def test_assert_failed_message():
    with pytest.raises(AssertionFailure) as info:
        assert_failed("x > 0", "main", "a.c", 12)
    assert str(info.value) == "Assert(x > 0) failed in function main at line 12 in file a.c."