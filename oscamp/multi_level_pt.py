"""A simulated RISC-V SV39 three-level page table with 2 MiB superpages."""

from __future__ import annotations

from dataclasses import dataclass, field

from oscamp.pte_flags import PTE_R, PTE_V, PTE_W, PTE_X, extract_ppn, is_leaf, is_valid, make_pte

__all__ = [
    "PAGE_SIZE",
    "PT_ENTRIES",
    "PTE_R",
    "PTE_V",
    "PTE_W",
    "PTE_X",
    "PageFault",
    "PageTableNode",
    "Sv39PageTable",
]

PAGE_SIZE = 4096
PT_ENTRIES = 512

_PAGE_SHIFT = 12
_VPN_BITS = 9
_VPN_MASK = (1 << _VPN_BITS) - 1
_SUPERPAGE_SIZE = PAGE_SIZE * PT_ENTRIES


class PageFault(Exception):
    """The virtual address has no valid mapping."""

    def __init__(self, va: int) -> None:
        super().__init__(f"page fault at {va:#x}")
        self.va = va


@dataclass
class PageTableNode:
    """One page-table page: 512 entries, all zero when fresh."""

    entries: list[int] = field(default_factory=lambda: [0] * PT_ENTRIES)


class Sv39PageTable:
    """Three-level table whose pages live in a simulated physical memory."""

    def __init__(self) -> None:
        self.root_ppn = 0x80000
        self._next_ppn = self.root_ppn + 1
        self._nodes: dict[int, PageTableNode] = {self.root_ppn: PageTableNode()}

    def _alloc_node(self) -> int:
        ppn = self._next_ppn
        self._next_ppn += 1
        self._nodes[ppn] = PageTableNode()
        return ppn

    @staticmethod
    def extract_vpn(va: int, level: int) -> int:
        """Return the 9-bit VPN index of ``va`` for ``level`` (2, 1 or 0)."""
        if level not in (0, 1, 2):
            raise ValueError(f"level must be 0, 1 or 2: {level}")
        return (va >> (_PAGE_SHIFT + level * _VPN_BITS)) & _VPN_MASK

    def _walk_to(self, va: int, leaf_level: int) -> PageTableNode:
        """Descend from the root to the node holding ``va``'s entry at ``leaf_level``."""
        node = self._nodes[self.root_ppn]
        for level in range(2, leaf_level, -1):
            index = self.extract_vpn(va, level)
            pte = node.entries[index]
            if not is_valid(pte):
                pte = make_pte(self._alloc_node(), PTE_V)
                node.entries[index] = pte
            elif is_leaf(pte):
                raise ValueError(f"{va:#x} already lies inside a larger leaf mapping")
            node = self._nodes[extract_ppn(pte)]
        return node

    def map_page(self, va: int, pa: int, flags: int) -> None:
        """Map the 4 KiB page holding ``va`` to the page holding ``pa``."""
        node = self._walk_to(va, 0)
        node.entries[self.extract_vpn(va, 0)] = make_pte(pa >> _PAGE_SHIFT, flags)

    def map_superpage(self, va: int, pa: int, flags: int) -> None:
        """Map a 2 MiB region with a leaf entry at level 1.

        Raises ValueError unless both addresses are 2 MiB aligned.
        """
        if va % _SUPERPAGE_SIZE:
            raise ValueError("va must be 2MB-aligned")
        if pa % _SUPERPAGE_SIZE:
            raise ValueError("pa must be 2MB-aligned")
        node = self._walk_to(va, 1)
        node.entries[self.extract_vpn(va, 1)] = make_pte(pa >> _PAGE_SHIFT, flags)

    def translate(self, va: int) -> int:
        """Walk the table and return the physical address for ``va``.

        Raises PageFault when any level has no valid entry.
        """
        node = self._nodes[self.root_ppn]
        for level in (2, 1, 0):
            pte = node.entries[self.extract_vpn(va, level)]
            if not is_valid(pte):
                raise PageFault(va)
            if is_leaf(pte):
                offset_mask = (1 << (_PAGE_SHIFT + level * _VPN_BITS)) - 1
                return (extract_ppn(pte) << _PAGE_SHIFT) + (va & offset_mask)
            if level == 0:
                raise PageFault(va)
            next_node = self._nodes.get(extract_ppn(pte))
            if next_node is None:
                raise PageFault(va)
            node = next_node
        raise PageFault(va)