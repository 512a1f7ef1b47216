"""Conversion between decimal text and fixed-width integers.

``atoi`` accumulates in a signed 8-bit variable, so values outside
-128..127 wrap while they are parsed; ``atol`` accumulates in 32 bits.
``itoa`` formats a 16-bit int and ``ltoa`` a 32-bit long.
"""

from __future__ import annotations

from gbclib.ctype import isdigit

__all__ = ["atoi", "atol", "itoa", "ltoa"]

_BLANKS = " \n\t"


def _wrap(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    return value - (1 << bits) if value >> (bits - 1) else value


def _parse(s: str, bits: int) -> tuple[int, bool]:
    rest = s.lstrip(_BLANKS)
    negative = rest.startswith("-")
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    n = 0
    for ch in rest:
        if not isdigit(ch):
            break
        n = _wrap(10 * n + ord(ch) - ord("0"), bits)
    return n, negative


def atoi(s: str) -> int:
    """Parse a decimal int with an 8-bit accumulator.

    Leading spaces, tabs and newlines and one sign are accepted; parsing
    stops at the first non-digit.
    """
    n, negative = _parse(s, 8)
    return -n if negative else n


def atol(s: str) -> int:
    """Parse a decimal long, wrapping to 32 bits."""
    n, negative = _parse(s, 32)
    return _wrap(-n, 32) if negative else n


def _truncating_div10(n: int) -> int:
    q = abs(n) // 10
    return -q if n < 0 else q


def _format(n: int, bits: int) -> str:
    n = _wrap(n, bits)
    negative = n < 0
    if negative:
        n = _wrap(-n, bits)
    digits = []
    while True:
        q = _truncating_div10(n)
        digits.append(chr(n - 10 * q + ord("0")))
        n = q
        if n <= 0:
            break
    if negative:
        digits.append("-")
    return "".join(reversed(digits))


def itoa(n: int) -> str:
    """Decimal text of a 16-bit int."""
    return _format(n, 16)


def ltoa(n: int) -> str:
    """Decimal text of a 32-bit long."""
    return _format(n, 32)