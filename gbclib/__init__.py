"""C-style runtime routines: long arithmetic, ctype, strings, conversions, BCD, heap, search, formatting, screen text and a sound register editor."""

__version__ = "0.1.0"
__all__ = [
    "arith",
    "bcd",
    "convert",
    "ctype",
    "formatting",
    "gprint",
    "heap",
    "longdiv",
    "search",
    "sound",
    "strings",
]