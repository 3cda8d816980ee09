import pytest

from hydrix.heap import HEADER_SIZE, Heap


@pytest.fixture
def heap():
    return Heap(0x10000)


def test_first_block_follows_header(heap):
    assert heap.allocate(8) == 0x10000 + HEADER_SIZE


def test_blocks_are_aligned_and_disjoint(heap):
    first = heap.allocate(1)
    second = heap.allocate(1)
    assert second - first == 2 * HEADER_SIZE
    assert (second - first) % HEADER_SIZE == 0


def test_freed_block_is_reused(heap):
    first = heap.allocate(32)
    heap.allocate(16)
    heap.free(first)
    assert heap.free_block_count() == 1
    assert heap.allocate(20) == first
    assert heap.free_block_count() == 0


def test_too_small_free_block_not_reused(heap):
    small = heap.allocate(16)
    heap.free(small)
    bigger = heap.allocate(64)
    assert bigger > small
    assert heap.free_block_count() == 1


def test_write_read_round_trip(heap):
    address = heap.allocate(10)
    heap.write(address, b"0123456789")
    assert heap.read(address, 10) == b"0123456789"


def test_reallocate_keeps_contents(heap):
    address = heap.allocate(16)
    heap.write(address, b"abcdefghijklmnop")
    moved = heap.reallocate(address, 64)
    assert moved != address
    assert heap.read(moved, 16) == b"abcdefghijklmnop"
    assert heap.free_block_count() == 1


def test_reallocate_in_place_when_large_enough(heap):
    address = heap.allocate(32)
    assert heap.reallocate(address, 20) == address


def test_reallocate_none_allocates(heap):
    assert heap.reallocate(None, 8) == heap.allocate(0) - 2 * HEADER_SIZE


def test_clean_allocate_zeroes(heap):
    address = heap.allocate(16)
    heap.write(address, b"\xff" * 16)
    heap.free(address)
    again = heap.clean_allocate(16)
    assert again == address
    assert heap.read(again, 16) == bytes(16)


def test_clean_releases_top_block(heap):
    heap.allocate(16)
    top = heap.allocate(16)
    heap.free(top)
    assert heap.used_block_count() == 2
    heap.clean()
    assert heap.used_block_count() == 1
    assert heap.free_block_count() == 0
    assert heap.allocate(16) == top


def test_clean_keeps_inner_free_block(heap):
    inner = heap.allocate(16)
    heap.allocate(16)
    heap.free(inner)
    heap.clean()
    assert heap.free_block_count() == 1
    assert heap.used_block_count() == 2


def test_free_none_is_ignored(heap):
    heap.free(None)
    assert heap.free_block_count() == 0


def test_errors(heap):
    address = heap.allocate(8)
    with pytest.raises(ValueError):
        heap.free(address + 1)
    heap.free(address)
    with pytest.raises(ValueError):
        heap.free(address)
    with pytest.raises(ValueError):
        heap.allocate(-1)
    with pytest.raises(IndexError):
        heap.read(address, 1000)