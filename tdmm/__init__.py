"""Simulated heap allocator with first, best, worst and buddy fit strategies and a mark-and-sweep collector."""

__version__ = "0.1.0"
__all__ = ["allocator", "blocks", "cli"]