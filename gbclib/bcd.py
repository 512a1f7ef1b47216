"""Eight-digit packed binary-coded decimal numbers.

A value is stored as four bytes, least significant pair of digits first,
each byte holding two decimal digits. Arithmetic wraps modulo 10**8, the
carry or borrow out of the top byte being dropped.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["BCD"]

_DIGITS = 8
_LIMIT = 10**_DIGITS
_SIZE = 4


@dataclass
class BCD:
    """A mutable eight-digit BCD counter."""

    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value < _LIMIT:
            raise ValueError(f"BCD value must be in 0..{_LIMIT - 1}")

    @classmethod
    def from_bytes(cls, data: bytes) -> BCD:
        """Decode four packed bytes, least significant first."""
        if len(data) != _SIZE:
            raise ValueError(f"BCD needs exactly {_SIZE} bytes")
        text = bytes(data)[::-1].hex()
        if not text.isdigit():
            raise ValueError("byte holds a nibble that is not a decimal digit")
        return cls(int(text))

    def to_bytes(self) -> bytes:
        """The four packed bytes, least significant first."""
        return bytes.fromhex(str(self))[::-1]

    def add(self, other: BCD) -> None:
        """Add ``other`` to this number in place."""
        self.value = (self.value + other.value) % _LIMIT

    def sub(self, other: BCD) -> None:
        """Subtract ``other`` from this number in place."""
        self.value = (self.value - other.value) % _LIMIT

    def to_text(self, tile_offset: int) -> bytes:
        """Eight tile indices, most significant digit first.

        Each is the digit plus ``tile_offset``, kept to one byte.
        """
        return bytes((int(d) + tile_offset) & 0xFF for d in str(self))

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"{self.value:0{_DIGITS}d}"