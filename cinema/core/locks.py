"""Per-key asyncio locks for check-then-write sequences"""

import asyncio
from collections import defaultdict
from contextlib import asynccontextmanager
from typing import Hashable, Dict


class KeyedLock:
    """Serializes coroutines that share a key; different keys never block each other.

    Entries are dropped once nobody holds or waits on them, so the map stays
    proportional to the number of keys currently in use.
    """

    def __init__(self):
        self._locks: Dict[Hashable, asyncio.Lock] = {}
        self._waiters: Dict[Hashable, int] = defaultdict(int)

    @asynccontextmanager
    async def hold(self, key: Hashable):
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._waiters[key] += 1
        try:
            async with lock:
                yield
        finally:
            self._waiters[key] -= 1
            if self._waiters[key] == 0:
                del self._waiters[key]
                self._locks.pop(key, None)

    def __len__(self) -> int:
        return len(self._locks)


# Process-wide lock tables shared by every request
verification_locks = KeyedLock()
purchase_locks = KeyedLock()
