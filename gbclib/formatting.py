"""Minimal formatted output, line input scanning and assertion reports.

Output numbers are 16-bit; ``%d`` reads them as signed. Only ``%c``,
``%u``, ``%d``, ``%x`` and ``%s`` produce output; any other conversion,
``%%`` included, produces nothing.

Scanning converts ``%d``, ``%u``, ``%o`` and ``%x`` with an 8-bit
accumulator and the ``%l`` forms with a 16-bit one, wrapping on overflow.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

from gbclib.ctype import isalpha, isdigit, isspace, toupper

__all__ = [
    "AssertionFailure",
    "ScanMismatch",
    "sprintf",
    "printf",
    "puts",
    "scanf",
    "assert_failed",
]

NUL = "\0"
_HEX = "0123456789ABCDEF"


class AssertionFailure(AssertionError):
    """An assertion in the program did not hold."""


class ScanMismatch(ValueError):
    """The input did not match the scan format."""


def _terminated(s: str) -> str:
    return s.partition(NUL)[0]


def _wrap(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    return value - (1 << bits) if value >> (bits - 1) else value


def _number(value: int, base: int, signed: bool) -> str:
    u = value & 0xFFFF
    sign = ""
    if signed and u & 0x8000:
        sign = "-"
        u = (0x10000 - u) & 0xFFFF
    digits = []
    while True:
        digits.append(_HEX[u % base])
        u //= base
        if not u:
            break
    return sign + "".join(reversed(digits))


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _char(value: Any) -> str:
    if isinstance(value, int):
        return chr(value & 0xFF)
    if isinstance(value, str) and len(value) == 1:
        return value
    raise TypeError("%c needs a single character or a character code")


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    values = iter(args)
    chars = iter(_terminated(fmt))
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        conv = next(chars, "")
        if conv == "c":
            yield _char(_next_arg(values))
        elif conv == "u":
            yield _number(_next_arg(values), 10, False)
        elif conv == "d":
            yield _number(_next_arg(values), 10, True)
        elif conv == "x":
            yield _number(_next_arg(values), 16, False)
        elif conv == "s":
            yield _terminated(_next_arg(values))


def sprintf(fmt: str, *args: Any) -> str:
    """The formatted text."""
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any, out: TextIO | None = None) -> None:
    """Write the formatted text to ``out``, standard output by default."""
    (out or sys.stdout).write(sprintf(fmt, *args))


def puts(s: str, out: TextIO | None = None) -> None:
    """Write ``s`` and a newline to ``out``, standard output by default."""
    (out or sys.stdout).write(_terminated(s) + "\n")


def _read(read_line: Callable[[], str | None]) -> str:
    text = read_line()
    if text is None:
        raise EOFError("no more input")
    return _terminated(text).rstrip("\n")


def _skip(line: str, i: int, read_line: Callable[[], str | None]) -> tuple[str, int]:
    while True:
        while i < len(line) and isspace(line[i]):
            i += 1
        if i < len(line):
            return line, i
        line, i = _read(read_line), 0


def _scan_int(line: str, i: int, base: int, bits: int) -> tuple[int, int]:
    negative = False
    if i < len(line) and line[i] in "+-":
        negative = line[i] == "-"
        i += 1
    n = 0
    while i < len(line):
        ch = line[i]
        if isdigit(ch):
            digit = ord(ch) - ord("0")
        elif isalpha(ch):
            digit = ord(toupper(ch)) - ord("A") + 10
        else:
            break
        if digit >= base:
            break
        n = _wrap(base * n + digit, bits)
        i += 1
    return _wrap(-n if negative else n, bits), i


_BASES = {"d": 10, "u": 10, "o": 8, "x": 16}


def scanf(fmt: str, read_line: Callable[[], str | None]) -> list[Any]:
    """Convert input lines according to ``fmt`` and return the values.

    ``read_line`` supplies one line per call and returns None at the end of
    input, which raises EOFError. Blanks are skipped before every format
    item, reading further lines as needed. ``%s`` takes the rest of the
    line. A literal character, or an unknown conversion, is checked against
    the next input character without consuming it; ScanMismatch is raised
    when they differ.
    """
    line, i = _read(read_line), 0
    values: list[Any] = []
    chars = iter(_terminated(fmt))
    for f in chars:
        if isspace(f):
            continue
        line, i = _skip(line, i, read_line)
        if f != "%":
            if line[i] != f:
                raise ScanMismatch(f"expected {f!r}, found {line[i]!r}")
            continue
        conv = next(chars, "")
        if conv == "c":
            values.append(line[i])
            i += 1
        elif conv in _BASES:
            value, i = _scan_int(line, i, _BASES[conv], 8)
            values.append(value)
        elif conv == "s":
            values.append(line[i:])
            i = len(line)
        elif conv == "l":
            size = next(chars, "")
            if size in _BASES:
                value, i = _scan_int(line, i, _BASES[size], 16)
                values.append(value)
        elif line[i] != conv:
            raise ScanMismatch(f"expected {conv!r}, found {line[i]!r}")
    return values


def assert_failed(expression: str, function: str, filename: str, line: int) -> None:
    """Report a failed assertion by raising AssertionFailure."""
    raise AssertionFailure(
        f"Assert({expression}) failed in function {function} "
        f"at line {line & 0xFFFF} in file {filename}."
    )