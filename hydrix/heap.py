"""A bump allocator with a first-fit free list over a simulated address space."""

from __future__ import annotations

HEADER_SIZE = 16


def _align(size: int) -> int:
    return (size + HEADER_SIZE - 1) & ~(HEADER_SIZE - 1)


class Heap:
    """Blocks carved from ``base`` upwards, each behind a 16-byte header.

    Freed blocks go to the front of a free list and are reused by the first
    later request they are large enough for.
    """

    def __init__(self, base: int) -> None:
        if base < 0:
            raise ValueError("heap base must not be negative")
        self._base = base
        self._end = base
        self._memory = bytearray()
        self._sizes: dict[int, int] = {}
        self._free: list[int] = []

    def _header(self, address: int) -> int:
        header = address - HEADER_SIZE
        if header not in self._sizes:
            raise ValueError(f"{address:#x} is not an allocated block")
        return header

    def allocate(self, size: int) -> int:
        """Address of a block of at least ``size`` bytes."""
        if size < 0:
            raise ValueError("allocation size must not be negative")
        size = _align(size)
        for index, header in enumerate(self._free):
            if self._sizes[header] >= size:
                del self._free[index]
                return header + HEADER_SIZE
        header = self._end
        self._sizes[header] = size
        self._end += HEADER_SIZE + size
        self._memory.extend(bytes(HEADER_SIZE + size))
        return header + HEADER_SIZE

    def free(self, address: int | None) -> None:
        """Return a block to the free list; ``None`` is ignored."""
        if address is None:
            return
        header = self._header(address)
        if header in self._free:
            raise ValueError(f"{address:#x} is already free")
        self._free.insert(0, header)

    def reallocate(self, address: int | None, size: int) -> int:
        """A block of at least ``size`` bytes holding the old block's contents."""
        if address is None:
            return self.allocate(size)
        old_size = self._sizes[self._header(address)]
        if old_size >= size:
            return address
        new_address = self.allocate(size)
        self.write(new_address, self.read(address, old_size))
        self.free(address)
        return new_address

    def clean_allocate(self, size: int) -> int:
        """Allocate and zero the first ``size`` bytes."""
        address = self.allocate(size)
        self.write(address, bytes(size))
        return address

    def _offset(self, address: int, n: int) -> int:
        offset = address - self._base
        if n < 0 or offset < 0 or offset + n > len(self._memory):
            raise IndexError("access outside the heap")
        return offset

    def read(self, address: int, n: int) -> bytes:
        """The ``n`` bytes starting at ``address``."""
        offset = self._offset(address, n)
        return bytes(self._memory[offset:offset + n])

    def write(self, address: int, data: bytes) -> None:
        """Store ``data`` starting at ``address``."""
        offset = self._offset(address, len(data))
        self._memory[offset:offset + len(data)] = data

    def free_block_count(self) -> int:
        """Number of blocks on the free list."""
        return len(self._free)

    def used_block_count(self) -> int:
        """Number of blocks between the base and the end of the heap."""
        return len(self._sizes)

    def clean(self) -> None:
        """Give free blocks at the top of the heap back, in free-list order."""
        for header in list(self._free):
            if header + HEADER_SIZE + self._sizes[header] == self._end:
                self._free.remove(header)
                del self._sizes[header]
                self._end = header
                del self._memory[header - self._base:]