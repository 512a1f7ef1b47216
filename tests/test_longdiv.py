import pytest

from gbclib.longdiv import divslong, divulong, modslong, modulong

UNSIGNED_PAIRS = [
    (0, 1),
    (1, 1),
    (100, 7),
    (0xFFFFFFFF, 1),
    (0xFFFFFFFF, 0xFFFFFFFF),
    (0xFFFFFFFF, 0x80000001),
    (0xFFFFFFFE, 0xFFFFFFFF),
    (0x12345678, 0x1234),
    (0x80000000, 3),
    (5, 0x80000000),
]

SIGNED_PAIRS = [
    (100, 7),
    (-100, 7),
    (0, 5),
    (-1, 1),
    (2147483647, 2),
    (-2147483647, 3),
    (123456789, 1000),
    (-123456789, 1000),
]


@pytest.mark.parametrize("a,b", UNSIGNED_PAIRS)
def test_unsigned_division_identity(a, b):
    q = divulong(a, b)
    r = modulong(a, b)
    assert q * b + r == a
    assert 0 <= r < b


@pytest.mark.parametrize("a,b", UNSIGNED_PAIRS)
def test_unsigned_results_fit_in_32_bits(a, b):
    assert 0 <= divulong(a, b) <= 0xFFFFFFFF
    assert 0 <= modulong(a, b) <= 0xFFFFFFFF


def test_divulong_by_zero_sets_all_bits():
    assert divulong(12345, 0) == 0xFFFFFFFF
    assert divulong(0, 0) == 0xFFFFFFFF


def test_modulong_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        modulong(10, 0)


def test_modslong_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        modslong(-10, 0)


def test_unsigned_arguments_wrap_to_32_bits():
    assert divulong(0x1_0000_0064, 7) == divulong(100, 7)
    assert modulong(-1, 0x10000) == modulong(0xFFFFFFFF, 0x10000)


@pytest.mark.parametrize("a,b", SIGNED_PAIRS)
def test_signed_identity_for_positive_divisor(a, b):
    q = divslong(a, b)
    r = modslong(a, b)
    assert q * b + r == a
    assert abs(r) < b


@pytest.mark.parametrize("a,b", SIGNED_PAIRS)
def test_signed_quotient_truncates_toward_zero(a, b):
    q = divslong(a, b)
    assert abs(q) == abs(a) // b
    assert q == -divslong(-a, b)


@pytest.mark.parametrize("a,b", SIGNED_PAIRS)
def test_negating_divisor_negates_results(a, b):
    assert divslong(a, -b) == -divslong(a, b)
    assert modslong(a, -b) == -modslong(a, b)


@pytest.mark.parametrize("a,b", SIGNED_PAIRS)
def test_remainder_sign_follows_operand_signs(a, b):
    r = modslong(a, -b)
    if a > 0 and abs(a) % b:
        assert r < 0


def test_remainder_magnitude_matches_unsigned():
    for a, b in SIGNED_PAIRS:
        assert abs(modslong(a, b)) == modulong(abs(a), b)


def test_signed_overflow_wraps():
    assert divslong(-(2**31), -1) == -(2**31)


def test_signed_arguments_are_reduced_to_32_bits():
    assert divslong(0xFFFFFFFF, 1) == -1
    assert modslong(0xFFFFFFF9, 2) == modslong(-7, 2)