import pytest

from gbclib.arith import int_abs, long_abs, mullong, mulslong


@pytest.mark.parametrize("a,b", [(3, 7), (0x1234, 0x5678), (65535, 65535), (0, 99)])
def test_mullong_is_commutative(a, b):
    assert mullong(a, b) == mullong(b, a)


@pytest.mark.parametrize("a", [0, 1, 12345, 0xFFFFFFFF, 0x80000000])
def test_mullong_identity(a):
    assert mullong(a, 1) == a
    assert mullong(a, 0) == 0


def test_mullong_wraps_to_32_bits():
    assert mullong(0x10000, 0x10000) == 0
    assert mullong(0xFFFFFFFF, 0xFFFFFFFF) == 1


def test_mullong_result_is_unsigned():
    assert mullong(-1, 1) == 0xFFFFFFFF


@pytest.mark.parametrize("a,b", [(-3, 7), (3, -7), (-3, -7), (1000, -1000)])
def test_mulslong_signs(a, b):
    assert mulslong(a, b) == a * b


def test_mulslong_agrees_with_mullong_low_bits():
    assert mulslong(0x12345, 0x6789A) & 0xFFFFFFFF == mullong(0x12345, 0x6789A)


@pytest.mark.parametrize("num", [0, 1, 5, 32767])
def test_int_abs_positive_unchanged(num):
    assert int_abs(num) == num
    assert int_abs(-num) == num


def test_int_abs_most_negative_wraps():
    assert int_abs(-32768) == -32768


@pytest.mark.parametrize("num", [0, 7, 70000, 2**31 - 1])
def test_long_abs(num):
    assert long_abs(-num) == num
    assert long_abs(num) == num


def test_long_abs_most_negative_wraps():
    assert long_abs(-(2**31)) == -(2**31)