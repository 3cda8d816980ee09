import pytest

from hydrix.memory import (
    MemoryMapEntry,
    mem_compare,
    mem_copy,
    mem_move,
    mem_set,
    total_usable_memory,
)


def test_mem_copy_copies_prefix():
    dest = bytearray(b"xxxxxxxxxxxx")
    result = mem_copy(dest, b"hello world!", 5)
    assert result is dest
    assert dest == bytearray(b"helloxxxxxxx")


def test_mem_copy_too_long():
    with pytest.raises(ValueError):
        mem_copy(bytearray(2), b"abc", 3)


def test_mem_set_uses_low_byte():
    buffer = bytearray(10)
    mem_set(buffer, 0x1AB, 9)
    assert buffer == bytearray([0xAB] * 9 + [0])


def test_mem_move_forward_overlap():
    buffer = bytearray(b"abcdefghij")
    mem_move(buffer, 0, 2, 8)
    assert buffer == bytearray(b"cdefghijij")


def test_mem_move_backward_overlap():
    buffer = bytearray(b"abcdefghij")
    mem_move(buffer, 2, 0, 8)
    assert buffer == bytearray(b"ababcdefgh")


def test_mem_move_out_of_bounds():
    with pytest.raises(ValueError):
        mem_move(bytearray(4), 2, 0, 3)


def test_mem_compare_orders():
    assert mem_compare(b"abcdefghij", b"abcdefghij", 10) == 0
    assert mem_compare(b"abcdefghia", b"abcdefghiz", 10) == -1
    assert mem_compare(b"abcdefghiz", b"abcdefghia", 10) == 1
    assert mem_compare(b"abcX", b"abcY", 3) == 0


def test_mem_compare_too_long():
    with pytest.raises(ValueError):
        mem_compare(b"ab", b"abc", 3)


def test_total_usable_memory_counts_usable_only():
    entries = [
        MemoryMapEntry(0, 4096, 0),
        MemoryMapEntry(4096, 1000, 1),
        MemoryMapEntry(8192, 2048),
    ]
    assert total_usable_memory(entries) == 4096 + 2048
    assert total_usable_memory([]) == 0