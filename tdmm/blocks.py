"""Block headers and the helpers that size and order them."""

from __future__ import annotations

import bisect
from dataclasses import dataclass

HEADER_SIZE = 32
"""Bytes taken by the header in front of every block's payload."""

ALIGNMENT = 4
"""Payload sizes are rounded up to a multiple of this."""

PAGE_SIZE = 4096
"""Smallest amount the heap grows by."""


@dataclass(eq=False)
class Block:
    """A region of the simulated heap, header included."""

    address: int
    size: int
    free: bool = True
    mark: bool = False

    def end(self) -> int:
        """Address one past the last byte of the block."""
        return self.address + self.size


def align(size: int) -> int:
    """Round ``size`` up to a multiple of :data:`ALIGNMENT`."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return (size + ALIGNMENT - 1) & ~(ALIGNMENT - 1)


def align_for_extension(size: int) -> int:
    """Smallest power-of-two multiple of :data:`PAGE_SIZE` that holds ``size``."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    extent = PAGE_SIZE
    while extent < size:
        extent *= 2
    return extent


def insert_sorted(blocks: list[Block], block: Block) -> None:
    """Insert ``block`` into ``blocks``, keeping the list ordered by address."""
    bisect.insort_left(blocks, block, key=lambda b: b.address)