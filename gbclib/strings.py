"""String routines over NUL-terminated text.

A string ends at its first ``"\\0"``; anything after that is not part of
its value. The copying routines treat ``dest`` as a buffer: they overwrite
its start and keep whatever lies past the written part.
"""

from __future__ import annotations

from itertools import islice, zip_longest

__all__ = [
    "strlen",
    "strcat",
    "strncat",
    "strcmp",
    "strncmp",
    "strcpy",
    "strncpy",
    "memcpy",
    "reverse",
]

NUL = "\0"


def _terminated(s: str) -> str:
    return s.partition(NUL)[0]


def _overwrite(dest: str, data: str) -> str:
    return data + dest[len(data):]


def strlen(s: str) -> int:
    """Number of characters before the terminator."""
    return len(_terminated(s))


def strcat(s1: str, s2: str) -> str:
    """``s2`` appended to ``s1``."""
    return _terminated(s1) + _terminated(s2)


def strncat(s1: str, s2: str, n: int) -> str:
    """At most ``n`` characters of ``s2`` appended to ``s1``.

    A negative ``n`` never reaches its limit, so all of ``s2`` is appended.
    """
    tail = _terminated(s2)
    return _terminated(s1) + (tail if n < 0 else tail[:n])


def strcmp(s1: str, s2: str) -> int:
    """-1, 0 or 1 as ``s1`` sorts before, equal to or after ``s2``."""
    a, b = _terminated(s1), _terminated(s2)
    return (a > b) - (a < b)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first differing character codes, with
    the terminator counting as zero, or 0 when no difference was found.
    """
    a, b = _terminated(s1) + NUL, _terminated(s2) + NUL
    if n < 0:
        return ord(a[0]) - ord(b[0])
    for x, y in islice(zip_longest(a, b, fillvalue=NUL), n):
        if x != y:
            return ord(x) - ord(y)
        if x == NUL:
            return 0
    return 0


def strcpy(dest: str, source: str) -> str:
    """``dest`` with ``source`` and its terminator written over its start."""
    return _overwrite(dest, _terminated(source) + NUL)


def strncpy(s1: str, s2: str, n: int) -> str:
    """Write exactly ``n`` characters of ``s2`` over ``s1``.

    ``s2`` is truncated or padded with terminators to ``n`` characters; if
    it is truncated no terminator is written.
    """
    if n <= 0:
        return s1
    return _overwrite(s1, _terminated(s2)[:n].ljust(n, NUL))


def memcpy(dest: str, source: str, count: int) -> str:
    """``dest`` with the first ``count`` characters of ``source`` written over it."""
    if count < 0 or count > len(source):
        raise ValueError("count exceeds the source length")
    return _overwrite(dest, source[:count])


def reverse(s: str) -> str:
    """The string reversed in place; anything past the terminator is kept."""
    text = _terminated(s)
    return text[::-1] + s[len(text):]