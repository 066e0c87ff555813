"""A first-fit free-list allocator that falls back to bump allocation."""

from __future__ import annotations

import threading
from dataclasses import dataclass

from oscamp.bump_allocator import Layout, align_up

# A freed block must be able to hold its own header: a size and a next pointer.
_HEADER_SIZE = 16
_HEADER_ALIGN = 8


@dataclass
class _FreeBlock:
    addr: int
    size: int


class FreeListAllocator:
    """Reuses freed blocks first-fit; otherwise allocates from the untouched region."""

    def __init__(self, heap_start: int, heap_end: int) -> None:
        if heap_end < heap_start:
            raise ValueError("heap_end must not be below heap_start")
        self.heap_start = heap_start
        self.heap_end = heap_end
        self._bump_next = heap_start
        # Head of the list is index 0.
        self._free_list: list[_FreeBlock] = []
        self._lock = threading.Lock()

    def alloc(self, layout: Layout) -> int:
        """Return the address of a block for ``layout``.

        Raises MemoryError when no freed block fits and the heap is exhausted.
        """
        size = max(layout.size, _HEADER_SIZE)
        align = max(layout.align, _HEADER_ALIGN)
        with self._lock:
            for index, block in enumerate(self._free_list):
                if block.addr % align == 0 and block.size >= size:
                    del self._free_list[index]
                    return block.addr

            start = align_up(self._bump_next, align)
            end = start + size
            if end > self.heap_end:
                raise MemoryError(f"cannot allocate {layout.size} bytes (align {layout.align})")
            self._bump_next = end
            return start

    def dealloc(self, ptr: int, layout: Layout) -> None:
        """Put the block at ``ptr`` at the head of the free list."""
        size = max(layout.size, _HEADER_SIZE)
        with self._lock:
            self._free_list.insert(0, _FreeBlock(ptr, size))