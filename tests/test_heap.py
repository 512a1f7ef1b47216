import pytest

from gbclib.heap import DoubleFreeError, Heap, HeapError, Hunk, UnknownBlockError


def _accounted(heap):
    hunks = heap.hunks()
    return sum(h.size for h in hunks) + heap.header_size * len(hunks)


def test_fresh_heap_is_one_free_hunk():
    heap = Heap(100, base=0xC000)
    assert heap.hunks() == [Hunk(0xC000, 100, False)]


def test_malloc_returns_pointer_past_header_and_splits():
    heap = Heap(100, base=0x100)
    ptr = heap.malloc(10)
    assert ptr == 0x100 + heap.header_size
    assert heap.hunks()[0] == Hunk(0x100, 10, True)
    assert not heap.hunks()[1].used
    assert _accounted(heap) == 100 + heap.header_size


def test_consecutive_allocations_are_adjacent():
    heap = Heap(100)
    first = heap.malloc(10)
    second = heap.malloc(5)
    assert second == first + 10 + heap.header_size
    assert _accounted(heap) == 100 + heap.header_size


def test_exhaustion_raises_memory_error():
    heap = Heap(20)
    with pytest.raises(MemoryError):
        heap.malloc(20)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Heap(50).malloc(-1)


def test_double_free_raises():
    heap = Heap(64)
    ptr = heap.malloc(8)
    heap.free(ptr)
    with pytest.raises(DoubleFreeError):
        heap.free(ptr)


def test_free_of_unknown_pointer_raises():
    heap = Heap(64)
    heap.malloc(8)
    with pytest.raises(UnknownBlockError):
        heap.free(3)
    assert issubclass(UnknownBlockError, HeapError)


def test_gc_joins_free_neighbours():
    heap = Heap(100, base=0x10)
    a = heap.malloc(10)
    b = heap.malloc(20)
    heap.free(a)
    heap.free(b)
    heap.gc()
    assert heap.hunks() == [Hunk(0x10, 100, False)]


def test_malloc_collects_when_fragmented():
    heap = Heap(100)
    a = heap.malloc(40)
    b = heap.malloc(40)
    heap.free(a)
    heap.free(b)
    big = heap.malloc(60)
    assert big == a
    assert _accounted(heap) == 100 + heap.header_size


def test_write_read_round_trip():
    heap = Heap(64)
    ptr = heap.malloc(6)
    heap.write(ptr, b"hello!")
    assert heap.read(ptr, 6) == b"hello!"
    assert heap.read(ptr + 1, 3) == b"ell"


def test_read_past_block_raises():
    heap = Heap(64)
    ptr = heap.malloc(4)
    with pytest.raises(UnknownBlockError):
        heap.read(ptr, 5)


def test_realloc_none_allocates():
    heap = Heap(64)
    ptr = heap.realloc(None, 8)
    assert heap.hunks()[0] == Hunk(ptr - heap.header_size, 8, True)


def test_realloc_zero_frees():
    heap = Heap(64)
    ptr = heap.malloc(8)
    assert heap.realloc(ptr, 0) is None
    with pytest.raises(DoubleFreeError):
        heap.free(ptr)


def test_realloc_shrink_keeps_pointer():
    heap = Heap(100)
    ptr = heap.malloc(40)
    heap.write(ptr, b"keep")
    assert heap.realloc(ptr, 10) == ptr
    assert heap.hunks()[0].size == 10
    assert heap.read(ptr, 4) == b"keep"
    assert _accounted(heap) == 100 + heap.header_size


def test_realloc_grows_into_free_successor():
    heap = Heap(100)
    ptr = heap.malloc(10)
    heap.write(ptr, b"data")
    assert heap.realloc(ptr, 30) == ptr
    assert heap.hunks()[0].size == 30
    assert heap.read(ptr, 4) == b"data"
    assert _accounted(heap) == 100 + heap.header_size


def test_realloc_moves_and_copies_when_blocked():
    heap = Heap(100)
    a = heap.malloc(4)
    heap.malloc(4)
    heap.write(a, b"abcd")
    moved = heap.realloc(a, 20)
    assert moved != a
    assert heap.read(moved, 4) == b"abcd"
    with pytest.raises(DoubleFreeError):
        heap.free(a)


def test_realloc_unknown_pointer_raises():
    heap = Heap(64)
    with pytest.raises(UnknownBlockError):
        heap.realloc(40, 8)