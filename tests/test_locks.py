import asyncio

import pytest

from cinema.core.locks import KeyedLock


pytestmark = pytest.mark.anyio("asyncio")


async def test_same_key_is_serialized():
    locks = KeyedLock()
    active = 0
    peak = 0

    async def worker():
        nonlocal active, peak
        async with locks.hold(("alice", "EMAIL")):
            active += 1
            peak = max(peak, active)
            await asyncio.sleep(0.01)
            active -= 1

    await asyncio.gather(*[worker() for _ in range(5)])
    assert peak == 1


async def test_distinct_keys_run_concurrently():
    locks = KeyedLock()
    inside = asyncio.Event()
    release = asyncio.Event()

    async def holder():
        async with locks.hold(1):
            inside.set()
            await release.wait()

    task = asyncio.create_task(holder())
    await inside.wait()

    # Would deadlock if key 2 waited on key 1
    async with locks.hold(2):
        assert len(locks) == 2

    release.set()
    await task


async def test_entries_are_dropped_when_released():
    locks = KeyedLock()
    async with locks.hold("k"):
        assert len(locks) == 1
    assert len(locks) == 0


async def test_lock_released_on_error():
    locks = KeyedLock()
    with pytest.raises(RuntimeError):
        async with locks.hold("k"):
            raise RuntimeError("boom")

    async with locks.hold("k"):
        pass
    assert len(locks) == 0
