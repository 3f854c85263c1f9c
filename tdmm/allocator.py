"""A simulated heap allocator with several placement strategies."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import replace

from tdmm.blocks import (
    HEADER_SIZE,
    PAGE_SIZE,
    Block,
    align,
    align_for_extension,
    insert_sorted,
)

INITIAL_HEAP_SIZE = PAGE_SIZE * 4
"""Size of the region mapped when an allocator is created."""

HEAP_BASE = 0x10000000
"""Address of the first mapped region."""

SPLIT_FACTOR = 2.5
"""A block is split only when it is larger than this many times the request."""


class Strategy(enum.Enum):
    """How a free block is chosen for a request."""

    FIRST_FIT = 0
    BEST_FIT = 1
    WORST_FIT = 2
    BUDDY = 3


class Allocator:
    """Hands out addresses from a simulated heap made of mapped regions.

    Addresses returned by :meth:`malloc` point just past a block header, as
    a real allocator's would. Free blocks are kept in address order and are
    merged with contiguous neighbours when memory is released.
    """

    def __init__(self, strategy: Strategy = Strategy.FIRST_FIT) -> None:
        self.strategy = Strategy(strategy)
        self._free: list[Block] = []
        self._allocated: dict[int, Block] = {}
        self._next_region = HEAP_BASE
        self._free.append(self._map(INITIAL_HEAP_SIZE))

    def malloc(self, size: int) -> int | None:
        """Reserve ``size`` bytes and return the payload address.

        A request for zero bytes returns ``None``.
        """
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        if size == 0:
            return None

        need = align(size) + HEADER_SIZE
        block = self._find(need)
        if block is None:
            block = self._extend(need)
            if self.strategy is Strategy.BUDDY:
                block = self._buddy_fit(need)
        if self.strategy is not Strategy.BUDDY:
            block = self._split(block, need)

        self._free = [b for b in self._free if b is not block]
        block.free = False
        self._allocated[block.address] = block
        return block.address + HEADER_SIZE

    def free(self, address: int | None) -> None:
        """Release the block whose payload starts at ``address``.

        ``None`` and blocks that are already free are ignored.
        """
        if address is None:
            return
        header = address - HEADER_SIZE
        block = self._allocated.pop(header, None)
        if block is None:
            if any(b.address == header for b in self._free):
                return
            raise ValueError(f"address {address:#x} was not allocated")
        block.free = True
        block.mark = False
        insert_sorted(self._free, block)
        self._coalesce()

    def gcollect(self, roots: Iterable[int]) -> int:
        """Free every allocated block that no value in ``roots`` points into.

        A value keeps a block alive when it lies inside the block's payload.
        Returns the number of blocks released.
        """
        values = list(roots)
        blocks = sorted(self._allocated.values(), key=lambda b: b.address)
        for block in blocks:
            start = block.address + HEADER_SIZE
            block.mark = any(start <= value < block.end() for value in values)
        unreachable = [block for block in blocks if not block.mark]
        for block in unreachable:
            self.free(block.address + HEADER_SIZE)
        return len(unreachable)

    def free_blocks(self) -> list[Block]:
        """Copies of the free blocks, in address order."""
        return [replace(b) for b in self._free]

    def allocated_blocks(self) -> list[Block]:
        """Copies of the allocated blocks, in address order."""
        return [
            replace(b)
            for b in sorted(self._allocated.values(), key=lambda b: b.address)
        ]

    def _map(self, size: int) -> Block:
        block = Block(address=self._next_region, size=size)
        # Leave an unmapped page between regions so they never touch.
        self._next_region += size + PAGE_SIZE
        return block

    def _extend(self, size: int) -> Block:
        block = self._map(align_for_extension(size))
        insert_sorted(self._free, block)
        return block

    def _find(self, size: int) -> Block | None:
        finders = {
            Strategy.FIRST_FIT: self._first_fit,
            Strategy.BEST_FIT: self._best_fit,
            Strategy.WORST_FIT: self._worst_fit,
            Strategy.BUDDY: self._buddy_fit,
        }
        return finders[self.strategy](size)

    def _first_fit(self, size: int) -> Block | None:
        return next((b for b in self._free if b.free and b.size >= size), None)

    def _best_fit(self, size: int) -> Block | None:
        fitting = [b for b in self._free if b.free and b.size >= size]
        return min(fitting, key=lambda b: b.size - size, default=None)

    def _worst_fit(self, size: int) -> Block | None:
        # Only blocks with room to spare qualify.
        fitting = [b for b in self._free if b.free and b.size > size]
        return max(fitting, key=lambda b: b.size - size, default=None)

    def _buddy_fit(self, size: int) -> Block | None:
        block = self._best_fit(size)
        if block is None:
            return None
        while block.size >= size * 2:
            block = self._halve(block)
        return block

    def _halve(self, block: Block) -> Block:
        half = block.size // 2
        block.size = half
        buddy = Block(address=block.address + half, size=half)
        insert_sorted(self._free, buddy)
        return buddy

    def _split(self, block: Block, size: int) -> Block:
        if block.size <= size * SPLIT_FACTOR:
            return block
        remaining = block.size - size
        block.size = remaining
        return Block(address=block.address + remaining, size=size)

    def _coalesce(self) -> None:
        if not self._free:
            return
        merged = [self._free[0]]
        absorbed_last = False
        for block in self._free[1:]:
            last = merged[-1]
            # A block just absorbed is not compared again, so a run of three
            # contiguous blocks merges only its first pair in one pass.
            if not absorbed_last and last.free and block.free and last.end() == block.address:
                last.size += block.size
                absorbed_last = True
            else:
                merged.append(block)
                absorbed_last = False
        self._free = merged