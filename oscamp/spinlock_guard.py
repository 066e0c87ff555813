"""A spin lock whose guard releases the lock when its block ends."""

from __future__ import annotations

from types import TracebackType
from typing import Generic, TypeVar

from oscamp.spinlock import SpinLock as _RawSpinLock

T = TypeVar("T")


class SpinLock(Generic[T]):
    """Spin lock that hands out a guard; the guard releases the lock."""

    def __init__(self, data: T) -> None:
        self._raw = _RawSpinLock(data)

    def lock(self) -> SpinGuard[T]:
        """Spin until the lock is taken and return a guard holding it."""
        self._raw.lock()
        return SpinGuard(self._raw)


class SpinGuard(Generic[T]):
    """Access to the protected value while the lock is held."""

    def __init__(self, raw: _RawSpinLock[T]) -> None:
        self._raw = raw
        self._held = True

    def _check_held(self) -> None:
        if not self._held:
            raise RuntimeError("guard has already released its lock")

    @property
    def value(self) -> T:
        """The protected value."""
        self._check_held()
        return self._raw.data

    @value.setter
    def value(self, new_value: T) -> None:
        self._check_held()
        self._raw.data = new_value

    def release(self) -> None:
        """Release the lock; later calls do nothing."""
        if self._held:
            self._held = False
            self._raw.unlock()

    def __enter__(self) -> SpinGuard[T]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()