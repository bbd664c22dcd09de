"""
cachable — Memory Store Tests

Tests the read/write/delete primitives of the in-memory store.
"""

import pytest

from cachable.cache.backends.memory import MemoryStore
from cachable.cache.entry import Entry


class TestMemoryStore:
    """Test suite for MemoryStore."""

    @pytest.fixture
    def store(self) -> MemoryStore:
        """Create a fresh memory store for each test."""
        return MemoryStore()

    async def test_initially_empty(self, store: MemoryStore) -> None:
        assert len(store) == 0
        assert await store.read("key1") is None

    async def test_write_and_read(self, store: MemoryStore) -> None:
        entry = Entry(data="value1", created_at=1.0, ttl=5)
        await store.write("key1", entry)

        assert await store.read("key1") is entry
        assert len(store) == 1

    async def test_write_replaces_entry(self, store: MemoryStore) -> None:
        first = Entry(data="old", created_at=1.0)
        second = Entry(data="new", created_at=2.0)

        await store.write("key1", first)
        await store.write("key1", second)

        assert await store.read("key1") is second
        assert len(store) == 1

    async def test_delete(self, store: MemoryStore) -> None:
        await store.write("key1", Entry(data="value1", created_at=1.0))
        await store.delete("key1")

        assert await store.read("key1") is None
        assert "key1" not in store

    async def test_delete_missing_key(self, store: MemoryStore) -> None:
        await store.delete("missing")
        assert len(store) == 0

    async def test_reserved_names_are_ordinary_keys(self, store: MemoryStore) -> None:
        for key in ("__proto__", "__dict__", "get", "_entries"):
            assert await store.read(key) is None

        await store.write("__proto__", Entry(data="proto", created_at=1.0))
        assert (await store.read("__proto__")).data == "proto"  # type: ignore[union-attr]

    async def test_stores_are_isolated(self) -> None:
        store1 = MemoryStore()
        store2 = MemoryStore()

        await store1.write("key1", Entry(data="value1", created_at=1.0))

        assert await store2.read("key1") is None
