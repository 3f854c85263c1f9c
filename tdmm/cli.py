"""Command that exercises the allocator with a run of allocations."""

from __future__ import annotations

import argparse

from tdmm.allocator import Allocator, Strategy

_STRATEGIES = {
    "first-fit": Strategy.FIRST_FIT,
    "best-fit": Strategy.BEST_FIT,
    "worst-fit": Strategy.WORST_FIT,
    "buddy": Strategy.BUDDY,
}


def main(argv: list[str] | None = None) -> int:
    """Allocate ``--count`` blocks of ``--size`` bytes, reporting each one."""
    parser = argparse.ArgumentParser(
        prog="tdmm", description="Run repeated allocations on a simulated heap."
    )
    parser.add_argument("--strategy", choices=sorted(_STRATEGIES), default="first-fit")
    parser.add_argument("--count", type=int, default=5000)
    parser.add_argument("--size", type=int, default=28)
    args = parser.parse_args(argv)

    allocator = Allocator(_STRATEGIES[args.strategy])
    for index in range(args.count):
        allocator.malloc(args.size)
        print(f"SUCCESS at {index}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())