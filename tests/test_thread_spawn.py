import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from oscamp.thread_spawn import (
    ThreadPanicked,
    double_in_thread,
    handle_panic,
    increment_thread_local,
    named_sleeper,
    parallel_sum,
    scoped_slice_sum,
)


def test_double_basic():
    assert double_in_thread([1, 2, 3, 4, 5]) == [2, 4, 6, 8, 10]


def test_double_empty():
    assert double_in_thread([]) == []


def test_double_negative():
    assert double_in_thread([-1, 0, 1]) == [-2, 0, 2]


def test_parallel_sum():
    assert parallel_sum([1, 2, 3], [10, 20, 30]) == (6, 60)


def test_parallel_sum_empty():
    assert parallel_sum([], []) == (0, 0)


def test_named_sleeper():
    start = time.monotonic()
    assert named_sleeper(42, 10) == 42
    assert time.monotonic() - start >= 0.009


def test_thread_local():
    with ThreadPoolExecutor(max_workers=1) as first, ThreadPoolExecutor(
        max_workers=1
    ) as second:
        first_pair = first.submit(
            lambda: (increment_thread_local(), increment_thread_local())
        )
        second_pair = second.submit(
            lambda: (increment_thread_local(), increment_thread_local())
        )
        results = [first_pair.result(timeout=5), second_pair.result(timeout=5)]
    assert results == [(1, 2), (1, 2)]


def test_scoped_slice_sum():
    a = [1, 2, 3]
    b = [10, 20, 30]
    assert scoped_slice_sum(a, b) == (6, 60)
    assert a == [1, 2, 3]
    assert b == [10, 20, 30]


def test_handle_panic_ok():
    assert handle_panic(100, False) == 100


def test_handle_panic_error():
    with pytest.raises(ThreadPanicked):
        handle_panic(100, True)