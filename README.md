# tdmm

A small simulated heap allocator. It hands out addresses from a simulated
address space, keeps its free blocks in an address-ordered list, and
supports four placement strategies:

- `Strategy.FIRST_FIT` – the first free block that is large enough
- `Strategy.BEST_FIT` – the free block that leaves the least space over
- `Strategy.WORST_FIT` – the free block that leaves the most space over
  (only blocks strictly larger than the request are considered)
- `Strategy.BUDDY` – best fit, then halved while at least twice the request

Every block carries a 32-byte header; requested sizes are rounded up to a
multiple of 4 before the header is added. Outside buddy mode a block is
split only when it is more than 2.5 times the size needed; the allocated
part is taken from its top end.

Freed blocks go back to the free list and are merged with a contiguous
neighbour. A mark-and-sweep collector frees every allocated block that none
of a given set of root addresses points into.

## Installation

```
pip install .
```

## Using the allocator

```python
from tdmm.allocator import Allocator, Strategy

heap = Allocator(Strategy.BEST_FIT)

a = heap.malloc(30)
b = heap.malloc(100)
heap.free(a)

for block in heap.free_blocks():
    print(block)

# Free everything not reachable from the given addresses.
released = heap.gcollect([b])
```

- `malloc(size)` returns the payload address, just past the block header.
  `malloc(0)` returns `None`; a negative size raises `ValueError`.
- When no free block is large enough, the heap grows by a fresh region whose
  size is the smallest power-of-two multiple of 4096 that holds the request.
  A new allocator starts with one region of 16384 bytes.
- `free(address)` ignores `None` and addresses that are already free, and
  raises `ValueError` for an address that was never allocated.
- `gcollect(roots)` keeps a block when some root value lies inside its
  payload, frees the rest, and returns how many blocks it freed.
- `free_blocks()` and `allocated_blocks()` return copies of the blocks,
  in address order.

The helpers in `tdmm.blocks` (`Block`, `align`, `align_for_extension`,
`insert_sorted`) describe the blocks and how sizes are rounded.

## Command line

```
tdmm [--strategy {best-fit,buddy,first-fit,worst-fit}] [--count N] [--size BYTES]
```

runs a loop of allocations and prints `SUCCESS at <index>` after each one.
By default it makes 5000 first-fit allocations of 28 bytes.

## What it does not do

The heap is a model only: no real memory is mapped and no bytes are stored
at the addresses handed out. The collector does not scan a program's stack;
the caller passes the root addresses to `gcollect` explicitly.

## Running the tests

```
pip install .[test]
pytest
```