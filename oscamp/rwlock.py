"""A writer-priority read-write lock."""

from __future__ import annotations

import threading
from types import TracebackType
from typing import Generic, TypeVar

T = TypeVar("T")

MAX_READERS = (1 << 30) - 1


class RwLock(Generic[T]):
    """Many readers or one writer; a waiting writer keeps new readers out."""

    def __init__(self, data: T) -> None:
        self._data = data
        self._cond = threading.Condition()
        self._readers = 0
        self._writer_holding = False
        self._writers_waiting = 0

    def read(self) -> RwLockReadGuard[T]:
        """Block until no writer holds or waits for the lock; return a read guard."""
        with self._cond:
            self._cond.wait_for(
                lambda: not self._writer_holding
                and not self._writers_waiting
                and self._readers < MAX_READERS
            )
            self._readers += 1
        return RwLockReadGuard(self)

    def write(self) -> RwLockWriteGuard[T]:
        """Block until there are no readers and no other writer; return a write guard."""
        with self._cond:
            self._writers_waiting += 1
            try:
                self._cond.wait_for(
                    lambda: not self._readers and not self._writer_holding
                )
            finally:
                self._writers_waiting -= 1
            self._writer_holding = True
        return RwLockWriteGuard(self)

    def _release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if not self._readers:
                self._cond.notify_all()

    def _release_write(self) -> None:
        with self._cond:
            self._writer_holding = False
            self._cond.notify_all()


class _Guard(Generic[T]):
    def __init__(self, lock: RwLock[T]) -> None:
        self._lock = lock
        self._held = True

    def _check_held(self) -> None:
        if not self._held:
            raise RuntimeError("guard has already released its lock")

    def _unlock(self) -> None:
        raise NotImplementedError

    def release(self) -> None:
        """Release the lock; later calls do nothing."""
        if self._held:
            self._held = False
            self._unlock()

    def __enter__(self):  # type: ignore[no-untyped-def]
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()


class RwLockReadGuard(_Guard[T]):
    """Shared access to the protected value."""

    @property
    def value(self) -> T:
        """The protected value."""
        self._check_held()
        return self._lock._data

    def _unlock(self) -> None:
        self._lock._release_read()

    def release(self) -> None:
        """Release the read lock; later calls do nothing."""
        super().release()

    def __enter__(self) -> RwLockReadGuard[T]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()


class RwLockWriteGuard(_Guard[T]):
    """Exclusive access to the protected value."""

    @property
    def value(self) -> T:
        """The protected value."""
        self._check_held()
        return self._lock._data

    @value.setter
    def value(self, new_value: T) -> None:
        self._check_held()
        self._lock._data = new_value

    def _unlock(self) -> None:
        self._lock._release_write()

    def release(self) -> None:
        """Release the write lock; later calls do nothing."""
        super().release()

    def __enter__(self) -> RwLockWriteGuard[T]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()