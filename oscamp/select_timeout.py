"""Racing awaitables against each other and against a deadline."""

from __future__ import annotations

import asyncio
import contextlib
from collections.abc import Awaitable
from typing import TypeVar

T = TypeVar("T")


async def _cancel_all(tasks: set[asyncio.Future[object]]) -> None:
    for task in tasks:
        task.cancel()
    for task in tasks:
        with contextlib.suppress(asyncio.CancelledError, Exception):
            await task


async def with_timeout(awaitable: Awaitable[T], timeout_ms: int) -> T | None:
    """Return the awaitable's result, or None if it takes longer than ``timeout_ms``."""
    task = asyncio.ensure_future(awaitable)
    done, _ = await asyncio.wait({task}, timeout=timeout_ms / 1000)
    if not done:
        await _cancel_all({task})
        return None
    return task.result()


async def race(f1: Awaitable[T], f2: Awaitable[T]) -> T:
    """Return the result of whichever awaitable finishes first; cancel the other."""
    tasks = [asyncio.ensure_future(f1), asyncio.ensure_future(f2)]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
    await _cancel_all(pending)
    winner = next(task for task in tasks if task in done)
    return winner.result()