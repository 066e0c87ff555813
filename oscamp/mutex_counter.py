"""Shared state guarded by a lock across several threads."""

from __future__ import annotations

import threading


def concurrent_counter(n_threads: int, count_per_thread: int) -> int:
    """Have ``n_threads`` threads each add 1 to a shared counter ``count_per_thread`` times."""
    counter = 0
    lock = threading.Lock()

    def worker() -> None:
        nonlocal counter
        for _ in range(count_per_thread):
            with lock:
                counter += 1

    threads = [threading.Thread(target=worker) for _ in range(n_threads)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    with lock:
        return counter


def concurrent_collect(n_threads: int) -> list[int]:
    """Have each thread push its id into a shared list; return the ids sorted."""
    collected: list[int] = []
    lock = threading.Lock()

    def worker(thread_id: int) -> None:
        with lock:
            collected.append(thread_id)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(n_threads)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    with lock:
        return sorted(collected)