"""Per-key async locks for read-modify-write sequences."""

import asyncio
import weakref
from collections.abc import Hashable
from dataclasses import dataclass, field


@dataclass
class KeyedLocks:
    """Hands out one asyncio lock per key, created on first use.

    Locks are held weakly, so a key's entry goes away once no coroutine
    holds or waits on its lock.
    """

    _locks: weakref.WeakValueDictionary[Hashable, asyncio.Lock] = field(
        default_factory=weakref.WeakValueDictionary
    )

    def lock(self, key: Hashable) -> asyncio.Lock:
        """Return the lock guarding ``key``."""
        existing = self._locks.get(key)
        if existing is None:
            existing = asyncio.Lock()
            self._locks[key] = existing
        return existing

    def __len__(self) -> int:
        return len(self._locks)
