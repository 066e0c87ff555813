"""Hand-written awaitables that step a small state machine on each resumption."""

from __future__ import annotations

from collections.abc import Generator


class CountDown:
    """Awaitable that yields once per remaining count, then returns ``"liftoff!"``."""

    def __init__(self, count: int) -> None:
        self.count = count

    def __await__(self) -> Generator[None, None, str]:
        while self.count > 0:
            self.count -= 1
            yield
        return "liftoff!"


class YieldOnce:
    """Awaitable that is pending on its first step and done on the second."""

    def __init__(self) -> None:
        self.yielded = False

    def __await__(self) -> Generator[None, None, None]:
        if not self.yielded:
            self.yielded = True
            yield