"""Binary search and in-place sorting with three-way comparison functions.

A comparison function returns a negative number, zero or a positive number
as its first argument orders before, equal to or after its second.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence, Sequence
from typing import Any, TypeVar

__all__ = ["bsearch", "qsort"]

T = TypeVar("T")


def bsearch(key: Any, items: Sequence[T], compare: Callable[[Any, T], int]) -> int | None:
    """Index of an item equal to ``key`` in the sorted ``items``, or None.

    ``compare`` is called as ``compare(key, item)``.
    """
    left, count = 0, len(items)
    while count:
        middle = left + count // 2
        c = compare(key, items[middle])
        if c < 0:
            count //= 2
        elif c > 0:
            left = middle + 1
            count = (count - 1) // 2
        else:
            return middle
    return None


def qsort(items: MutableSequence[T], compare: Callable[[T, T], int]) -> None:
    """Sort ``items`` in place.

    This is an insertion sort: it is stable and moves an item left past
    every neighbour that compares greater.
    """
    for i in range(1, len(items)):
        j = i
        while j > 0 and compare(items[j], items[j - 1]) < 0:
            items[j], items[j - 1] = items[j - 1], items[j]
            j -= 1