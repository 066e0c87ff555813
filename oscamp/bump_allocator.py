"""A bump-pointer allocator over a simulated address range."""

from __future__ import annotations

import threading
from dataclasses import dataclass


@dataclass(frozen=True)
class Layout:
    """Size and alignment of a requested memory block."""

    size: int
    align: int = 1

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"size must not be negative: {self.size}")
        if self.align <= 0 or self.align & (self.align - 1):
            raise ValueError(f"align must be a power of two: {self.align}")


def align_up(addr: int, align: int) -> int:
    """Round ``addr`` up to the next multiple of the power of two ``align``."""
    return (addr + align - 1) & ~(align - 1)


class BumpAllocator:
    """Hands out addresses from ``heap_start`` upward; individual frees are ignored."""

    def __init__(self, heap_start: int, heap_end: int) -> None:
        if heap_end < heap_start:
            raise ValueError("heap_end must not be below heap_start")
        self.heap_start = heap_start
        self.heap_end = heap_end
        self._next = heap_start
        self._lock = threading.Lock()

    def alloc(self, layout: Layout) -> int:
        """Return the address of a fresh block for ``layout``.

        Raises MemoryError when the block would not fit in the heap.
        """
        with self._lock:
            start = align_up(self._next, layout.align)
            end = start + layout.size
            if end > self.heap_end:
                raise MemoryError(
                    f"cannot allocate {layout.size} bytes (align {layout.align})"
                )
            self._next = end
            return start

    def dealloc(self, ptr: int, layout: Layout) -> None:
        """Do nothing: a bump allocator only reclaims memory on reset."""

    def reset(self) -> None:
        """Release every allocation at once."""
        with self._lock:
            self._next = self.heap_start