import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from oscamp.rwlock import RwLock


def _run_all(targets):
    threads = [threading.Thread(target=t) for t in targets]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def test_multiple_readers():
    lock = RwLock(0)
    with ThreadPoolExecutor(max_workers=10) as executor:
        futures = [executor.submit(lock.read) for _ in range(10)]
        guards = [future.result(timeout=5) for future in futures]
    assert [guard.value for guard in guards] == [0] * 10
    for guard in guards:
        guard.release()


def test_readers_share_lock():
    lock = RwLock("shared")
    first = lock.read()
    second = lock.read()
    assert (first.value, second.value) == ("shared", "shared")
    first.release()
    second.release()


def test_writer_excludes_readers():
    lock = RwLock(0)

    def writer():
        with lock.write() as guard:
            guard.value = 42

    _run_all([writer])
    with lock.read() as guard:
        assert guard.value == 42


def test_concurrent_reads_after_write():
    lock = RwLock([])
    with lock.write() as guard:
        guard.value.append(1)
        guard.value.append(2)

    with ThreadPoolExecutor(max_workers=5) as executor:
        futures = [executor.submit(lock.read) for _ in range(5)]
        guards = [future.result(timeout=5) for future in futures]
    assert [list(guard.value) for guard in guards] == [[1, 2]] * 5
    for guard in guards:
        guard.release()


def test_concurrent_writes_serialized():
    lock = RwLock(0)

    def writer():
        for _ in range(100):
            with lock.write() as guard:
                guard.value += 1

    _run_all([writer] * 10)
    with lock.read() as guard:
        assert guard.value == 1000


def test_waiting_writer_goes_before_new_readers():
    lock = RwLock(0)
    held = lock.read()

    with ThreadPoolExecutor(max_workers=2) as executor:
        writer_future = executor.submit(lock.write)
        time.sleep(0.1)
        reader_future = executor.submit(lock.read)
        time.sleep(0.1)
        assert not writer_future.done()
        assert not reader_future.done()

        held.release()
        writer_guard = writer_future.result(timeout=5)
        writer_guard.value = 1
        time.sleep(0.05)
        assert not reader_future.done()
        writer_guard.release()

        reader_guard = reader_future.result(timeout=5)
    assert reader_guard.value == 1
    reader_guard.release()


def test_guard_after_release_raises():
    lock = RwLock(5)
    guard = lock.write()
    assert guard.value == 5
    guard.release()
    with pytest.raises(RuntimeError):
        _ = guard.value
    reader = lock.read()
    assert reader.value == 5
    reader.release()
    with pytest.raises(RuntimeError):
        _ = reader.value