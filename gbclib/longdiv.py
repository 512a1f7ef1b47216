"""32-bit long division and modulus with fixed-width wrap-around.

Arguments are reduced to 32 bits first: modulo 2**32 for the unsigned
routines, and to a two's-complement value for the signed ones.
Results wrap the same way.
"""

from __future__ import annotations

__all__ = ["divulong", "divslong", "modulong", "modslong"]

_MASK = 0xFFFFFFFF
_SIGN = 0x80000000


def _u32(value: int) -> int:
    return value & _MASK


def _s32(value: int) -> int:
    value &= _MASK
    return value - 0x100000000 if value & _SIGN else value


def divulong(a: int, b: int) -> int:
    """Unsigned 32-bit quotient of ``a / b``.

    Dividing by zero does not raise. The shift-and-subtract algorithm
    sets every quotient bit in that case, so the result is 0xFFFFFFFF.
    """
    a, b = _u32(a), _u32(b)
    if b == 0:
        return _MASK
    return a // b


def modulong(a: int, b: int) -> int:
    """Unsigned 32-bit remainder of ``a / b``.

    Raises ZeroDivisionError when ``b`` is zero.
    """
    a, b = _u32(a), _u32(b)
    if b == 0:
        raise ZeroDivisionError("modulus by zero")
    return a % b


def _signed_pair(a: int, b: int) -> tuple[int, int, bool]:
    a, b = _s32(a), _s32(b)
    negative = (a < 0) != (b < 0)
    return _u32(abs(a)), _u32(abs(b)), negative


def divslong(a: int, b: int) -> int:
    """Signed 32-bit quotient, rounded toward zero, wrapping on overflow."""
    ua, ub, negative = _signed_pair(a, b)
    result = divulong(ua, ub)
    return _s32(-result if negative else result)


def modslong(a: int, b: int) -> int:
    """Signed 32-bit remainder.

    The remainder's magnitude is ``|a| % |b|``. It is negative when exactly
    one of the operands is negative, so its sign is not simply the
    dividend's. Raises ZeroDivisionError when ``b`` is zero.
    """
    ua, ub, negative = _signed_pair(a, b)
    result = modulong(ua, ub)
    return _s32(-result if negative else result)