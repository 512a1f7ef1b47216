"""Text output for the graphics screen, one character at a time.

Numbers printed with :meth:`TextWriter.gprintn` are 8-bit and those printed
with :meth:`TextWriter.gprintln` 16-bit; both wrap to their width first.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

__all__ = ["DIGITS", "TextWriter"]

DIGITS = "0123456789ABCDEF"
NUL = "\0"


def _wrap(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    return value - (1 << bits) if value >> (bits - 1) else value


class TextWriter:
    """Collects written characters and passes each to an optional callback."""

    def __init__(self, emit: Callable[[str], None] | None = None) -> None:
        self._emit = emit
        self._written: list[str] = []

    @property
    def text(self) -> str:
        """Everything written so far."""
        return "".join(self._written)

    def wrtchr(self, c: str) -> None:
        """Write one character."""
        if not isinstance(c, str) or len(c) != 1:
            raise TypeError("expected a single character")
        self._written.append(c)
        if self._emit is not None:
            self._emit(c)

    def gprint(self, s: str) -> None:
        """Write a string up to its terminator."""
        for c in s.partition(NUL)[0]:
            self.wrtchr(c)

    def _number(self, number: int, radix: int, signed: bool, bits: int) -> None:
        if not 2 <= radix <= len(DIGITS):
            raise ValueError(f"radix must be in 2..{len(DIGITS)}")
        n = _wrap(number, bits)
        if n < 0 and signed:
            self.wrtchr("-")
            n = -n
        u = n & ((1 << bits) - 1)
        digits = []
        while True:
            digits.append(DIGITS[u % radix])
            u //= radix
            if not u:
                break
        self.gprint("".join(reversed(digits)))

    def gprintn(self, number: int, radix: int, signed: bool) -> None:
        """Write an 8-bit number in ``radix``, with a minus sign if ``signed``."""
        self._number(number, radix, signed, 8)

    def gprintln(self, number: int, radix: int, signed: bool) -> None:
        """Write a 16-bit number in ``radix``, with a minus sign if ``signed``."""
        self._number(number, radix, signed, 16)

    def gprintf(self, fmt: str, *args: Any) -> int:
        """Write formatted text and return the number of conversions.

        Supports ``%c``, ``%d``, ``%u``, ``%o``, ``%x``, ``%s`` and ``%%``;
        numbers are 8-bit. An unknown conversion raises ValueError after
        the text before it has been written.
        """
        values = iter(args)

        def arg() -> Any:
            try:
                return next(values)
            except StopIteration:
                raise TypeError("not enough arguments for format string") from None

        count = 0
        chars = iter(fmt.partition(NUL)[0])
        for ch in chars:
            if ch != "%":
                self.wrtchr(ch)
                continue
            conv = next(chars, "")
            if conv == "c":
                value = arg()
                self.wrtchr(chr(value & 0xFF) if isinstance(value, int) else value)
            elif conv == "d":
                self.gprintn(arg(), 10, True)
            elif conv == "u":
                self.gprintn(arg(), 10, False)
            elif conv == "o":
                self.gprintn(arg(), 8, False)
            elif conv == "x":
                self.gprintn(arg(), 16, False)
            elif conv == "s":
                self.gprint(arg())
            elif conv == "%":
                self.wrtchr("%")
            else:
                raise ValueError(f"unknown conversion %{conv}")
            count += 1
        return count