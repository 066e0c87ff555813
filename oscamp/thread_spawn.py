"""Thread creation, joining, thread-local state and panic handling."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ThreadPanicked(Exception):
    """Raised when joining a thread whose body raised an exception."""


class _JoinHandle(Generic[T]):
    """A started thread whose return value or failure is collected on join."""

    def __init__(self, func: Callable[..., T], *args: Any, name: str | None = None) -> None:
        self._result: T | None = None
        self._error: BaseException | None = None
        self._thread = threading.Thread(target=self._run, args=(func, args), name=name)
        self._thread.start()

    def _run(self, func: Callable[..., T], args: tuple[Any, ...]) -> None:
        try:
            self._result = func(*args)
        except BaseException as exc:  # the thread "panicked"
            self._error = exc

    def join(self) -> T:
        self._thread.join()
        if self._error is not None:
            raise ThreadPanicked(str(self._error)) from self._error
        return self._result  # type: ignore[return-value]


def double_in_thread(numbers: Iterable[int]) -> list[int]:
    """Double every number in a separate thread and return the new list."""
    values = list(numbers)
    return _JoinHandle(lambda: [n * 2 for n in values]).join()


def parallel_sum(a: Iterable[int], b: Iterable[int]) -> tuple[int, int]:
    """Sum two sequences, each in its own thread."""
    first = _JoinHandle(sum, list(a))
    second = _JoinHandle(sum, list(b))
    return first.join(), second.join()


def named_sleeper(value: int, ms: int) -> int:
    """Run a thread named ``sleeper`` that sleeps ``ms`` milliseconds, then returns ``value``."""

    def body() -> int:
        time.sleep(ms / 1000)
        return value

    return _JoinHandle(body, name="sleeper").join()


_thread_state = threading.local()


def increment_thread_local() -> int:
    """Increase the calling thread's own counter and return its new value."""
    _thread_state.count = getattr(_thread_state, "count", 0) + 1
    return _thread_state.count


def scoped_slice_sum(a: Iterable[int], b: Iterable[int]) -> tuple[int, int]:
    """Sum two sequences in two threads that only read them; both finish before returning."""
    handles = [_JoinHandle(sum, a), _JoinHandle(sum, b)]
    sum_a, sum_b = (handle.join() for handle in handles)
    return sum_a, sum_b


def handle_panic(value: int, should_panic: bool) -> int:
    """Return ``value`` from a thread, or raise ThreadPanicked if the thread fails."""

    def body() -> int:
        if should_panic:
            raise RuntimeError("oops")
        return value

    return _JoinHandle(body).join()