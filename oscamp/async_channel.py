"""Producer/consumer pipelines over asyncio queues."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable

_CLOSED = object()


async def _consume(channel: asyncio.Queue[object], n_senders: int) -> list[str]:
    """Receive messages until every sender has closed its end."""
    received: list[str] = []
    open_senders = n_senders
    while open_senders:
        message = await channel.get()
        if message is _CLOSED:
            open_senders -= 1
        else:
            received.append(message)  # type: ignore[arg-type]
    return received


async def producer_consumer(items: Iterable[str]) -> list[str]:
    """Pass every item from a producer task to a consumer task; return them in order."""
    values = list(items)
    channel: asyncio.Queue[object] = asyncio.Queue(maxsize=max(len(values), 1))

    async def producer() -> None:
        for item in values:
            await channel.put(item)
        await channel.put(_CLOSED)

    producer_task = asyncio.create_task(producer())
    consumer_task = asyncio.create_task(_consume(channel, 1))
    await producer_task
    return await consumer_task


async def fan_in(n_producers: int) -> list[str]:
    """Collect ``"producer {id}: message"`` from each of ``n_producers`` tasks, sorted."""
    channel: asyncio.Queue[object] = asyncio.Queue()

    async def producer(producer_id: int) -> None:
        await channel.put(f"producer {producer_id}: message")
        await channel.put(_CLOSED)

    producers = [asyncio.create_task(producer(i)) for i in range(n_producers)]
    messages = await _consume(channel, n_producers)
    await asyncio.gather(*producers)
    return sorted(messages)