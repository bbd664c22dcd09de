"""
cachable — Cache

A named cache wrapping one store with a default TTL.

Expiration is lazy: an entry past its TTL is deleted from the store when it
is read, and no background sweep ever runs.
"""

import asyncio
import logging
import time
from collections.abc import Callable, Hashable
from typing import Any

from .backends.memory import MemoryStore
from .entry import Entry
from .interface import StoreInterface

logger = logging.getLogger(__name__)


class Cache:
    """
    Named key/value cache with per-entry TTL.

    Features:
    - Default TTL in seconds (0 = never expires), mutable after creation
    - Per-entry TTL override on set()
    - Expired entries are removed on read
    - Operations on one cache are serialized by an asyncio.Lock
    """

    def __init__(
        self,
        name: str,
        store: StoreInterface | None = None,
        default_ttl: float = 0,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize a cache.

        Args:
            name: Name that identifies this cache
            store: Backing store (a fresh MemoryStore if omitted)
            default_ttl: Default TTL in seconds for entries without an override
            clock: Callable returning the current time in seconds
        """
        self.name = name
        self.default_ttl = default_ttl
        self._store = store if store is not None else MemoryStore()
        self._clock = clock

        # Stats
        self._hits = 0
        self._misses = 0
        self._expirations = 0
        self._sets = 0
        self._removes = 0

        self._lock = asyncio.Lock()

    @property
    def store(self) -> StoreInterface:
        return self._store

    async def get(self, key: Hashable) -> Any | None:
        """
        Get an item from the cache.

        Returns:
            The cached data, or None if the key is missing or its TTL has passed
        """
        async with self._lock:
            entry = await self._store.read(key)

            if entry is None:
                self._misses += 1
                return None

            if entry.is_expired(self._clock(), self.default_ttl):
                await self._store.delete(key)
                self._expirations += 1
                self._misses += 1
                logger.debug(
                    "Expired entry removed from cache '%s'",
                    self.name,
                    extra={"cache_name": self.name, "key": repr(key)},
                )
                return None

            self._hits += 1
            return entry.data

    async def set(self, key: Hashable, data: Any, ttl: float | None = None) -> None:
        """
        Set an item in the cache, replacing any existing entry.

        Args:
            key: The key that references the item
            data: The data to store
            ttl: Seconds this entry stays valid; None defers to the cache's
                default TTL at read time
        """
        entry = Entry(data=data, created_at=self._clock(), ttl=ttl)
        async with self._lock:
            await self._store.write(key, entry)
            self._sets += 1

    async def remove(self, key: Hashable) -> None:
        """Remove an item from the cache. Removing a missing key is a no-op."""
        async with self._lock:
            await self._store.delete(key)
            self._removes += 1

    async def get_stats(self) -> dict[str, Any]:
        """Get cache statistics."""
        async with self._lock:
            total_requests = self._hits + self._misses
            hit_rate = (self._hits / total_requests * 100) if total_requests > 0 else 0.0

            return {
                "name": self.name,
                "backend": self._store.backend,
                "default_ttl": self.default_ttl,
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(hit_rate, 2),
                "expirations": self._expirations,
                "sets": self._sets,
                "removes": self._removes,
            }

    def __repr__(self) -> str:
        return f"Cache(name={self.name!r}, backend={self._store.backend!r}, default_ttl={self.default_ttl!r})"
