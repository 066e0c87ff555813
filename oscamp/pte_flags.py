"""Building and inspecting RISC-V SV39 page table entries."""

from __future__ import annotations

PTE_V = 1 << 0  # valid
PTE_R = 1 << 1  # readable
PTE_W = 1 << 2  # writable
PTE_X = 1 << 3  # executable
PTE_U = 1 << 4  # user accessible
PTE_G = 1 << 5  # global
PTE_A = 1 << 6  # accessed
PTE_D = 1 << 7  # dirty

_PPN_SHIFT = 10
_PPN_MASK = (1 << 44) - 1
_FLAGS_MASK = 0xFF


def make_pte(ppn: int, flags: int) -> int:
    """Build an entry with ``ppn`` in bits 53..10 and ``flags`` in the low bits."""
    return (ppn << _PPN_SHIFT) | flags


def extract_ppn(pte: int) -> int:
    """Return the 44-bit physical page number of ``pte``."""
    return (pte >> _PPN_SHIFT) & _PPN_MASK


def extract_flags(pte: int) -> int:
    """Return the low 8 flag bits of ``pte``."""
    return pte & _FLAGS_MASK


def is_valid(pte: int) -> bool:
    """Whether the V bit is set."""
    return bool(pte & PTE_V)


def is_leaf(pte: int) -> bool:
    """Whether any of R, W or X is set, so the entry maps a page rather than a table."""
    return bool(pte & (PTE_R | PTE_W | PTE_X))


def check_permission(pte: int, read: bool, write: bool, execute: bool) -> bool:
    """Whether ``pte`` is valid and grants every requested kind of access."""
    if not is_valid(pte):
        return False
    required = (PTE_R if read else 0) | (PTE_W if write else 0) | (PTE_X if execute else 0)
    return pte & required == required