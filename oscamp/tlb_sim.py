"""A FIFO translation lookaside buffer and an MMU that refills it from a page table."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TlbEntry:
    """One cached translation."""

    valid: bool = False
    asid: int = 0
    vpn: int = 0
    ppn: int = 0
    flags: int = 0

    def matches(self, vpn: int, asid: int) -> bool:
        """Whether this entry is valid and caches ``vpn`` for ``asid``."""
        return self.valid and self.vpn == vpn and self.asid == asid


@dataclass
class TlbStats:
    """Hit and miss counters."""

    hits: int = 0
    misses: int = 0

    def hit_rate(self) -> float:
        """Fraction of lookups that hit; 0.0 before any lookup."""
        total = self.hits + self.misses
        return self.hits / total if total else 0.0


class Tlb:
    """Fixed-size TLB that replaces entries in first-in, first-out order."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1: {capacity}")
        self.capacity = capacity
        self._entries = [TlbEntry() for _ in range(capacity)]
        self._fifo_ptr = 0
        self.stats = TlbStats()

    def _find(self, vpn: int, asid: int) -> TlbEntry | None:
        return next((e for e in self._entries if e.matches(vpn, asid)), None)

    def lookup(self, vpn: int, asid: int) -> int | None:
        """Return the cached ppn for ``(vpn, asid)`` or None, counting the hit or miss."""
        entry = self._find(vpn, asid)
        if entry is None:
            self.stats.misses += 1
            return None
        self.stats.hits += 1
        return entry.ppn

    def insert(self, vpn: int, ppn: int, asid: int, flags: int) -> None:
        """Cache a translation, updating an existing one or replacing the oldest slot."""
        entry = self._find(vpn, asid)
        if entry is not None:
            entry.ppn = ppn
            entry.flags = flags
            return
        self._entries[self._fifo_ptr] = TlbEntry(True, asid, vpn, ppn, flags)
        self._fifo_ptr = (self._fifo_ptr + 1) % self.capacity

    def flush_all(self) -> None:
        """Invalidate every entry."""
        for entry in self._entries:
            entry.valid = False

    def flush_by_vpn(self, vpn: int) -> None:
        """Invalidate entries for ``vpn`` in every address space."""
        for entry in self._entries:
            if entry.vpn == vpn:
                entry.valid = False

    def flush_by_asid(self, asid: int) -> None:
        """Invalidate every entry of address space ``asid``."""
        for entry in self._entries:
            if entry.asid == asid:
                entry.valid = False

    def valid_count(self) -> int:
        """Return the number of valid entries."""
        return sum(entry.valid for entry in self._entries)


@dataclass(frozen=True)
class PageMapping:
    """A page-table mapping from ``vpn`` to ``ppn``."""

    vpn: int
    ppn: int
    flags: int


@dataclass
class Mmu:
    """Looks translations up in the TLB first and falls back to the page table."""

    tlb_capacity: int
    current_asid: int = 0
    tlb: Tlb = field(init=False)
    _page_table: list[tuple[int, PageMapping]] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        self.tlb = Tlb(self.tlb_capacity)

    def add_mapping(self, asid: int, vpn: int, ppn: int, flags: int) -> None:
        """Add a mapping to the page table of address space ``asid``."""
        self._page_table.append((asid, PageMapping(vpn, ppn, flags)))

    def switch_asid(self, new_asid: int) -> None:
        """Make ``new_asid`` the current address space."""
        self.current_asid = new_asid

    def translate(self, vpn: int) -> int | None:
        """Return the ppn for ``vpn`` in the current address space, or None on a page fault."""
        ppn = self.tlb.lookup(vpn, self.current_asid)
        if ppn is not None:
            return ppn
        mapping = next(
            (m for asid, m in self._page_table if asid == self.current_asid and m.vpn == vpn),
            None,
        )
        if mapping is None:
            return None
        self.tlb.insert(vpn, mapping.ppn, self.current_asid, mapping.flags)
        return mapping.ppn