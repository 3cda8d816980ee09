"""Byte buffer copy, fill, move and compare, and memory map totals."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

USABLE = 0


@dataclass(frozen=True)
class MemoryMapEntry:
    """A region of physical memory reported by the bootloader."""

    base: int
    length: int
    type: int = USABLE


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer of {len(buffer)} bytes")


def mem_copy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def mem_set(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes with the low byte of ``value``."""
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def mem_move(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes from offset ``src`` to offset ``dest``; ranges may overlap."""
    if n < 0 or dest < 0 or src < 0:
        raise ValueError("offsets and byte count must not be negative")
    if max(dest, src) + n > len(buffer):
        raise ValueError("move runs past the end of the buffer")
    buffer[dest:dest + n] = buffer[src:src + n]
    return buffer


def mem_compare(first: bytes, second: bytes, n: int) -> int:
    """-1, 0 or 1 as the first ``n`` bytes of ``first`` sort against ``second``."""
    _check_count(n, first, second)
    left = bytes(first[:n])
    right = bytes(second[:n])
    if left == right:
        return 0
    return -1 if left < right else 1


def total_usable_memory(entries: Iterable[MemoryMapEntry]) -> int:
    """Sum of the lengths of the usable entries."""
    return sum(entry.length for entry in entries if entry.type == USABLE)