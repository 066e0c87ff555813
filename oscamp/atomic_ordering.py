"""Publishing a value to another thread, and one-time initialisation."""

from __future__ import annotations

import threading


class FlagChannel:
    """One-slot channel: the producer stores a value, then raises a ready flag."""

    def __init__(self) -> None:
        self._data = 0
        self._ready = threading.Event()

    def produce(self, value: int) -> None:
        """Store ``value`` and signal that it is ready."""
        self._data = value
        self._ready.set()

    def consume(self) -> int:
        """Wait until a value has been produced and return it."""
        self._ready.wait()
        return self._data

    def reset(self) -> None:
        """Clear the ready flag and the stored value."""
        self._ready.clear()
        self._data = 0


class OnceCell:
    """Cell that accepts exactly one value."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._initialized = False
        self._value = 0

    def init(self, val: int) -> bool:
        """Store ``val`` if the cell is empty; return whether this call stored it."""
        with self._lock:
            if self._initialized:
                return False
            self._value = val
            self._initialized = True
            return True

    def get(self) -> int | None:
        """Return the stored value, or None if the cell is still empty."""
        with self._lock:
            return self._value if self._initialized else None