"""A thread-safe 64-bit counter with compare-and-swap."""

from __future__ import annotations

import threading

_U64_MASK = (1 << 64) - 1


class AtomicCounter:
    """Unsigned 64-bit counter whose operations are each indivisible."""

    def __init__(self, init: int = 0) -> None:
        if not 0 <= init <= _U64_MASK:
            raise ValueError(f"initial value out of range for u64: {init}")
        self._value = init
        self._lock = threading.Lock()

    def _fetch_update(self, new_value: int) -> int:
        previous = self._value
        self._value = new_value & _U64_MASK
        return previous

    def increment(self) -> int:
        """Add 1, wrapping at 2**64; return the value before the change."""
        with self._lock:
            return self._fetch_update(self._value + 1)

    def decrement(self) -> int:
        """Subtract 1, wrapping below 0; return the value before the change."""
        with self._lock:
            return self._fetch_update(self._value - 1)

    def get(self) -> int:
        """Return the current value."""
        with self._lock:
            return self._value

    def compare_and_swap(self, expected: int, new_val: int) -> int:
        """Set the value to ``new_val`` if it equals ``expected``.

        Returns the value that was found; the swap happened exactly when that
        value equals ``expected``.
        """
        if not 0 <= new_val <= _U64_MASK:
            raise ValueError(f"new value out of range for u64: {new_val}")
        with self._lock:
            current = self._value
            if current == expected:
                self._value = new_val
            return current

    def fetch_multiply(self, multiplier: int) -> int:
        """Multiply the value by ``multiplier`` with a CAS retry loop; return the old value.

        Raises OverflowError if the product does not fit in 64 bits.
        """
        while True:
            current = self.get()
            product = current * multiplier
            if not 0 <= product <= _U64_MASK:
                raise OverflowError(f"{current} * {multiplier} does not fit in u64")
            if self.compare_and_swap(current, product) == current:
                return current