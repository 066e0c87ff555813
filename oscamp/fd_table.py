"""A file-descriptor table mapping small integers to open file objects."""

from __future__ import annotations

from abc import ABC, abstractmethod


class File(ABC):
    """Anything a descriptor can refer to: regular files, pipes, sockets."""

    @abstractmethod
    def read(self, buf: bytearray) -> int:
        """Fill ``buf`` with data and return the number of bytes read."""

    @abstractmethod
    def write(self, buf: bytes) -> int:
        """Write ``buf`` and return the number of bytes written."""


class FdTable:
    """Sparse table of open files; the lowest free descriptor is reused first."""

    def __init__(self) -> None:
        self._slots: list[File | None] = []

    def alloc(self, file: File) -> int:
        """Store ``file`` under the smallest free descriptor and return it."""
        fd = next((i for i, slot in enumerate(self._slots) if slot is None), None)
        if fd is None:
            self._slots.append(file)
            return len(self._slots) - 1
        self._slots[fd] = file
        return fd

    def get(self, fd: int) -> File | None:
        """Return the file for ``fd``, or None if it is not open."""
        if 0 <= fd < len(self._slots):
            return self._slots[fd]
        return None

    def close(self, fd: int) -> bool:
        """Close ``fd``; return False if it was not open."""
        if self.get(fd) is None:
            return False
        self._slots[fd] = None
        return True

    def count(self) -> int:
        """Return how many descriptors are currently open."""
        return sum(slot is not None for slot in self._slots)