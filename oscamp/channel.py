"""Message passing between threads over a queue."""

from __future__ import annotations

import queue
import threading
from collections.abc import Iterable

_CLOSED = object()


def simple_send_recv(items: Iterable[str]) -> list[str]:
    """Send every item from a producer thread and receive them all, in order."""
    values = list(items)
    channel: queue.Queue[object] = queue.Queue()

    def producer() -> None:
        for item in values:
            channel.put(item)
        channel.put(_CLOSED)

    threading.Thread(target=producer).start()
    return list(iter(channel.get, _CLOSED))  # type: ignore[arg-type]


def multi_producer(n_producers: int) -> list[str]:
    """Receive one ``"msg from {id}"`` from each of ``n_producers`` threads, sorted."""
    channel: queue.Queue[object] = queue.Queue()

    def producer(producer_id: int) -> None:
        channel.put(f"msg from {producer_id}")
        channel.put(_CLOSED)

    for producer_id in range(n_producers):
        threading.Thread(target=producer, args=(producer_id,)).start()

    messages: list[str] = []
    open_senders = n_producers
    while open_senders:
        message = channel.get()
        if message is _CLOSED:
            open_senders -= 1
        else:
            messages.append(message)  # type: ignore[arg-type]
    return sorted(messages)