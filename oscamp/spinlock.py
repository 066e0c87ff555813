"""A basic spin lock that busy-waits until it can take the lock."""

from __future__ import annotations

import threading
import time
from typing import Generic, TypeVar

T = TypeVar("T")


class SpinLock(Generic[T]):
    """Guards ``data``; callers pair every ``lock`` with an ``unlock``."""

    def __init__(self, data: T) -> None:
        self.data = data
        self._flag = threading.Lock()

    @property
    def locked(self) -> bool:
        """Whether the lock is currently held."""
        return self._flag.locked()

    def lock(self) -> T:
        """Spin until the lock is taken, then return the protected data."""
        while not self._flag.acquire(blocking=False):
            time.sleep(0)  # give other threads a chance, like a CPU spin hint
        return self.data

    def unlock(self) -> None:
        """Release the lock.

        Raises RuntimeError if the lock is not held.
        """
        try:
            self._flag.release()
        except RuntimeError:
            raise RuntimeError("unlock of an unlocked SpinLock") from None

    def try_lock(self) -> T | None:
        """Take the lock if it is free and return the data; return None if it is busy."""
        if self._flag.acquire(blocking=False):
            return self.data
        return None