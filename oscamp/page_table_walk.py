"""A single-level page table translating 32-bit virtual addresses."""

from __future__ import annotations

from dataclasses import dataclass

PAGE_SIZE = 4096
PAGE_OFFSET_BITS = 12

PTE_VALID = 1 << 0
PTE_READ = 1 << 1
PTE_WRITE = 1 << 2

_OFFSET_MASK = (1 << PAGE_OFFSET_BITS) - 1


class PageFault(Exception):
    """The virtual page is not mapped, or its entry is not valid."""

    def __init__(self, va: int) -> None:
        super().__init__(f"page fault at {va:#x}")
        self.va = va


class PermissionDenied(PermissionError):
    """A write was attempted to a page without write permission."""

    def __init__(self, va: int) -> None:
        super().__init__(f"write to read-only page at {va:#x}")
        self.va = va


@dataclass(frozen=True)
class PageTableEntry:
    """A mapping to physical page ``ppn`` with permission ``flags``."""

    ppn: int
    flags: int


def va_to_vpn(va: int) -> int:
    """Return the virtual page number of ``va``."""
    return va >> PAGE_OFFSET_BITS


def va_to_offset(va: int) -> int:
    """Return the offset of ``va`` within its page."""
    return va & _OFFSET_MASK


def make_pa(ppn: int, offset: int) -> int:
    """Combine a physical page number and a page offset into a physical address."""
    return (ppn << PAGE_OFFSET_BITS) | offset


class SingleLevelPageTable:
    """Flat table of up to ``max_pages`` virtual pages."""

    def __init__(self, max_pages: int) -> None:
        self._entries: list[PageTableEntry | None] = [None] * max_pages

    def _check_vpn(self, vpn: int) -> None:
        if not 0 <= vpn < len(self._entries):
            raise IndexError(f"vpn {vpn} outside table of {len(self._entries)} pages")

    def map(self, vpn: int, ppn: int, flags: int) -> None:
        """Map virtual page ``vpn`` to physical page ``ppn`` with ``flags``."""
        self._check_vpn(vpn)
        self._entries[vpn] = PageTableEntry(ppn, flags)

    def unmap(self, vpn: int) -> None:
        """Remove the mapping of virtual page ``vpn``."""
        self._check_vpn(vpn)
        self._entries[vpn] = None

    def lookup(self, vpn: int) -> PageTableEntry | None:
        """Return the entry for ``vpn``, or None if it is unmapped."""
        self._check_vpn(vpn)
        return self._entries[vpn]

    def translate(self, va: int, is_write: bool = False) -> int:
        """Translate ``va`` to a physical address.

        Raises PageFault for unmapped or invalid pages and PermissionDenied for
        writes to pages without write permission.
        """
        vpn = va_to_vpn(va)
        entry = self._entries[vpn] if 0 <= vpn < len(self._entries) else None
        if entry is None or not entry.flags & PTE_VALID:
            raise PageFault(va)
        if is_write and not entry.flags & PTE_WRITE:
            raise PermissionDenied(va)
        return make_pa(entry.ppn, va_to_offset(va))