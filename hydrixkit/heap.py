"""A first-fit heap allocator that hands out addresses from a base upward.

Each block carries a 16-byte header before the address returned; sizes are
rounded up to a multiple of the header size. Freed blocks go to the front of
a free list and are reused whole by later allocations that fit.
"""

from __future__ import annotations

HEADER_SIZE = 16


def _align(size: int) -> int:
    return (size + HEADER_SIZE - 1) & ~(HEADER_SIZE - 1)


class Heap:
    """Bookkeeping of allocated and free blocks above ``base``."""

    def __init__(self, base: int = 0) -> None:
        if base < 0:
            raise ValueError("heap base must not be negative")
        self._base = base
        self._end = base
        self._blocks: dict[int, int] = {}
        self._free: list[int] = []

    @property
    def base(self) -> int:
        """First address of the heap."""
        return self._base

    @property
    def end(self) -> int:
        """Address just past the last block carved from the heap."""
        return self._end

    def _live_header(self, address: int) -> int:
        header = address - HEADER_SIZE
        if header not in self._blocks:
            raise ValueError(f"address {address:#x} was not allocated by this heap")
        if header in self._free:
            raise ValueError(f"address {address:#x} is already free")
        return header

    def size_of(self, address: int) -> int:
        """Capacity of the live block at ``address``."""
        return self._blocks[self._live_header(address)]

    def allocate(self, size: int) -> int:
        """Return the address of a block holding at least ``size`` bytes."""
        if size < 0:
            raise ValueError("allocation size must not be negative")
        size = _align(size)
        for index, header in enumerate(self._free):
            if self._blocks[header] >= size:
                del self._free[index]
                return header + HEADER_SIZE
        header = self._end
        self._blocks[header] = size
        self._end = header + HEADER_SIZE + size
        return header + HEADER_SIZE

    def free(self, address: int | None) -> None:
        """Put the block at ``address`` on the free list; None is ignored."""
        if address is None:
            return
        self._free.insert(0, self._live_header(address))

    def reallocate(self, address: int | None, size: int) -> int:
        """Keep the block if it is large enough, otherwise move to a new one."""
        if address is None:
            return self.allocate(size)
        header = self._live_header(address)
        if self._blocks[header] >= size:
            return address
        new_address = self.allocate(size)
        self.free(address)
        return new_address

    def free_list_count(self) -> int:
        """Number of blocks on the free list."""
        return len(self._free)

    def used_list_count(self) -> int:
        """Number of blocks carved from the heap, free or not."""
        return len(self._blocks)

    def clean(self) -> None:
        """Return free blocks at the top of the heap, in one free-list pass."""
        kept = []
        for header in self._free:
            if header + HEADER_SIZE + self._blocks[header] == self._end:
                del self._blocks[header]
                self._end = header
            else:
                kept.append(header)
        self._free = kept