"""Fixed-width multiplication and absolute values.

``int`` is 16 bits wide and ``long`` 32 bits wide, and every result wraps
to that width the way the target's two's-complement registers do.
"""

from __future__ import annotations

__all__ = ["mullong", "mulslong", "int_abs", "long_abs"]


def _wrap_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _wrap_signed(value: int, bits: int) -> int:
    value = _wrap_unsigned(value, bits)
    return value - (1 << bits) if value >> (bits - 1) else value


def mullong(a: int, b: int) -> int:
    """Low 32 bits of ``a * b``, as an unsigned value."""
    return _wrap_unsigned(_wrap_unsigned(a, 32) * _wrap_unsigned(b, 32), 32)


def mulslong(a: int, b: int) -> int:
    """Low 32 bits of ``a * b``, read as a signed value.

    Signed and unsigned products agree in their low 32 bits, so this is
    :func:`mullong` with the result reinterpreted.
    """
    return _wrap_signed(mullong(a, b), 32)


def int_abs(num: int) -> int:
    """Absolute value of a 16-bit int; the most negative value maps to itself."""
    num = _wrap_signed(num, 16)
    return _wrap_signed(-num, 16) if num < 0 else num


def long_abs(num: int) -> int:
    """Absolute value of a 32-bit long; the most negative value maps to itself."""
    num = _wrap_signed(num, 32)
    return _wrap_signed(-num, 32) if num < 0 else num