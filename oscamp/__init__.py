"""Models of threads, locks, allocators, async tasks, page tables and a TLB."""

__version__ = "0.1.0"