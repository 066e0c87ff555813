import time

import pytest

from oscamp.async_tasks import concurrent_squares, parallel_sleep_tasks


@pytest.mark.asyncio
async def test_squares_basic():
    assert await concurrent_squares(5) == [0, 1, 4, 9, 16]


@pytest.mark.asyncio
async def test_squares_zero():
    assert await concurrent_squares(0) == []


@pytest.mark.asyncio
async def test_squares_one():
    assert await concurrent_squares(1) == [0]


@pytest.mark.asyncio
async def test_parallel_sleep():
    start = time.monotonic()
    result = await parallel_sleep_tasks(5, 100)
    elapsed = time.monotonic() - start
    assert result == [0, 1, 2, 3, 4]
    assert elapsed < 0.4, f"tasks should run concurrently, took {elapsed:.3f}s"


@pytest.mark.asyncio
async def test_parallel_sleep_zero_tasks():
    assert await parallel_sleep_tasks(0, 10) == []