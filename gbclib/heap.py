"""A first-fit heap of byte hunks, each preceded by a header.

The heap is one region of memory split into consecutive hunks. Every hunk
has a header of ``header_size`` bytes followed by its data; a pointer
handed out by :meth:`Heap.malloc` is the address just past the header.
Free neighbours are only joined by a garbage collection, which runs when an
allocation finds no hunk large enough.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

__all__ = [
    "HEADER_SIZE",
    "HeapError",
    "DoubleFreeError",
    "UnknownBlockError",
    "Hunk",
    "Heap",
]

HEADER_SIZE = 6


class HeapError(Exception):
    """Base class for heap misuse."""


class DoubleFreeError(HeapError):
    """The block was already free."""


class UnknownBlockError(HeapError):
    """The pointer does not belong to any hunk of the heap."""


@dataclass(frozen=True)
class Hunk:
    """One region of the heap: header address, data size and whether it is in use."""

    address: int
    size: int
    used: bool


class Heap:
    """A heap of ``capacity`` data bytes starting at address ``base``."""

    def __init__(self, capacity: int, base: int = 0, header_size: int = HEADER_SIZE) -> None:
        if capacity < 0 or header_size < 0:
            raise ValueError("capacity and header size must not be negative")
        self.base = base
        self.header_size = header_size
        self._memory = bytearray(header_size + capacity)
        self._hunks = [Hunk(base, capacity, False)]

    def hunks(self) -> list[Hunk]:
        """The hunks in address order."""
        return list(self._hunks)

    def _find(self, ptr: int) -> int:
        address = ptr - self.header_size
        for index, hunk in enumerate(self._hunks):
            if hunk.address == address:
                return index
        raise UnknownBlockError(f"no hunk at pointer {ptr:#x}")

    def _split(self, index: int, size: int, available: int) -> None:
        hunk = self._hunks[index]
        rest = Hunk(
            hunk.address + self.header_size + size,
            available - self.header_size - size,
            False,
        )
        self._hunks[index] = Hunk(hunk.address, size, True)
        self._hunks.insert(index + 1, rest)

    def gc(self) -> None:
        """Join every run of adjacent free hunks into one."""
        merged: list[Hunk] = []
        for hunk in self._hunks:
            if merged and not hunk.used and not merged[-1].used:
                previous = merged[-1]
                merged[-1] = replace(previous, size=previous.size + hunk.size + self.header_size)
            else:
                merged.append(hunk)
        self._hunks = merged

    def malloc(self, size: int) -> int:
        """Allocate ``size`` bytes and return a pointer to them.

        The first free hunk with room for the data and a new header is split.
        If none is found the heap is collected and searched once more;
        MemoryError is raised if that fails too.
        """
        if size < 0:
            raise ValueError("size must not be negative")
        for _ in range(2):
            for index, hunk in enumerate(self._hunks):
                if not hunk.used and hunk.size >= size + self.header_size:
                    self._split(index, size, hunk.size)
                    return hunk.address + self.header_size
            self.gc()
        raise MemoryError(f"no hunk can hold {size} bytes")

    def calloc(self, nmem: int, size: int) -> int:
        """Allocate ``nmem * size`` bytes, all set to zero."""
        total = nmem * size
        ptr = self.malloc(total)
        start = ptr - self.base
        self._memory[start:start + total] = bytes(total)
        return ptr

    def free(self, ptr: int) -> None:
        """Release the block at ``ptr``.

        Raises DoubleFreeError if it is already free and UnknownBlockError
        if ``ptr`` is not the start of any block.
        """
        index = self._find(ptr)
        hunk = self._hunks[index]
        if not hunk.used:
            raise DoubleFreeError(f"block at {ptr:#x} is already free")
        self._hunks[index] = replace(hunk, used=False)

    def realloc(self, ptr: int | None, size: int) -> int | None:
        """Resize the block at ``ptr`` to ``size`` bytes.

        A size of zero frees the block and returns None; a ``ptr`` of None
        allocates. A block shrinks in place, grows into a free successor when
        that is large enough, and otherwise moves to a new block with its data
        copied. MemoryError is raised when no room is found.
        """
        if size < 0:
            raise ValueError("size must not be negative")
        if size == 0:
            if ptr is not None:
                self.free(ptr)
            return None
        if ptr is None:
            return self.malloc(size)

        index = self._find(ptr)
        hunk = self._hunks[index]
        if hunk.size == size:
            return ptr
        if hunk.size > size:
            if hunk.size > size + self.header_size:
                self._split(index, size, hunk.size)
            return ptr

        if index + 1 < len(self._hunks) and not self._hunks[index + 1].used:
            self.gc()
            index = self._find(ptr)
            following = self._hunks[index + 1]
            combined = hunk.size + following.size + self.header_size
            if combined >= size + self.header_size:
                del self._hunks[index + 1]
                self._split(index, size, combined)
                return ptr
            if combined >= size:
                del self._hunks[index + 1]
                self._hunks[index] = Hunk(hunk.address, combined, True)
                return ptr

        new_ptr = self.malloc(size)
        old = ptr - self.base
        new = new_ptr - self.base
        self._memory[new:new + hunk.size] = self._memory[old:old + hunk.size]
        self.free(ptr)
        return new_ptr

    def _span(self, ptr: int, count: int) -> slice:
        if count < 0:
            raise ValueError("count must not be negative")
        for hunk in self._hunks:
            start = hunk.address + self.header_size
            if hunk.used and start <= ptr and ptr + count <= start + hunk.size:
                return slice(ptr - self.base, ptr - self.base + count)
        raise UnknownBlockError(f"{count} bytes at {ptr:#x} are not inside a used block")

    def read(self, ptr: int, count: int) -> bytes:
        """``count`` bytes from inside a used block."""
        return bytes(self._memory[self._span(ptr, count)])

    def write(self, ptr: int, data: bytes) -> None:
        """Store ``data`` inside a used block."""
        self._memory[self._span(ptr, len(data))] = data