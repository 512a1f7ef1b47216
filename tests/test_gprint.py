import pytest

from gbclib.gprint import DIGITS, TextWriter


def test_gprint_stops_at_terminator():
    w = TextWriter()
    w.gprint("abc\0def")
    assert w.text == "abc"


def test_emit_callback_receives_each_char():
    seen = []
    w = TextWriter(seen.append)
    w.gprint("abc")
    assert seen == list("abc")


def test_gprintn_signed_negative():
    w = TextWriter()
    w.gprintn(-5, 10, True)
    assert w.text == "-5"


def test_gprintn_unsigned_wraps_to_byte():
    w = TextWriter()
    w.gprintn(-1, 16, False)
    assert w.text == "FF"


def test_gprintn_most_negative():
    w = TextWriter()
    w.gprintn(-128, 10, True)
    assert w.text == "-128"


def test_gprintln_wraps_to_16_bits():
    w = TextWriter()
    w.gprintln(-1, 16, False)
    assert w.text == "FFFF"


def test_gprintln_round_trips_through_int():
    for value in (0, 7, 300, 32767, -32768, -1234):
        w = TextWriter()
        w.gprintln(value, 10, True)
        assert int(w.text) == value


def test_every_digit_in_radix_16():
    w = TextWriter()
    for value in range(16):
        w.gprintn(value, 16, False)
    assert w.text == DIGITS


def test_bad_radix_rejected():
    with pytest.raises(ValueError):
        TextWriter().gprintn(5, 17, False)


def test_gprintf_counts_conversions():
    w = TextWriter()
    assert w.gprintf("%d %s%c%%", 3, "hi", "!") == 4
    assert w.text == "3 hi!%"


def test_gprintf_unsigned_reads_byte():
    w = TextWriter()
    w.gprintf("%u", -1)
    assert w.text == "255"


def test_gprintf_hex_and_octal():
    w = TextWriter()
    w.gprintf("%x/%o", 0x3C, 0o17)
    assert w.text == "3C/17"


def test_gprintf_unknown_conversion_raises_after_prefix():
    w = TextWriter()
    with pytest.raises(ValueError):
        w.gprintf("ab%q")
    assert w.text == "ab"