"""ASCII character classification and case conversion.

Only the ASCII letters, digits and the three blanks space, tab and newline
are recognised; every other character is left alone.
"""

from __future__ import annotations

__all__ = ["isalpha", "isdigit", "islower", "isspace", "isupper", "tolower", "toupper"]


def _check(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise TypeError("expected a single character")
    return c


def isalpha(c: str) -> bool:
    """True for ASCII letters."""
    return islower(c) or isupper(c)


def isdigit(c: str) -> bool:
    """True for the digits 0 to 9."""
    return "0" <= _check(c) <= "9"


def islower(c: str) -> bool:
    """True for ASCII lower-case letters."""
    return "a" <= _check(c) <= "z"


def isupper(c: str) -> bool:
    """True for ASCII upper-case letters."""
    return "A" <= _check(c) <= "Z"


def isspace(c: str) -> bool:
    """True for space, tab and newline only."""
    return _check(c) in " \t\n"


def tolower(c: str) -> str:
    """Lower-case an ASCII upper-case letter; return anything else as is."""
    return chr(ord(c) + 32) if isupper(c) else c


def toupper(c: str) -> str:
    """Upper-case an ASCII lower-case letter; return anything else as is."""
    return chr(ord(c) - 32) if islower(c) else c