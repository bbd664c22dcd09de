"""
cachable — Memory Store

In-process store backed by a plain dict. Keys are stored as given: a dict has
no inherited attributes, so caller keys cannot collide with store internals.
Operations never suspend.
"""

import logging
from collections.abc import Hashable

from ..entry import Entry
from ..interface import StoreInterface

logger = logging.getLogger(__name__)


class MemoryStore(StoreInterface):
    """In-memory store. Unbounded; all state is lost when the process exits."""

    backend = "memory"

    def __init__(self) -> None:
        self._entries: dict[Hashable, Entry] = {}

    async def read(self, key: Hashable) -> Entry | None:
        return self._entries.get(key)

    async def write(self, key: Hashable, entry: Entry) -> None:
        self._entries[key] = entry

    async def delete(self, key: Hashable) -> None:
        if self._entries.pop(key, None) is not None:
            logger.debug("Deleted key from memory store", extra={"key": repr(key)})

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
