"""
cachable — Store Interface

Defines the abstract interface that all backing stores must implement.
"""

from abc import ABC, abstractmethod
from collections.abc import Hashable

from .entry import Entry


class StoreInterface(ABC):
    """
    Abstract base class for backing stores.

    A store is a plain key/value container owned by exactly one Cache.
    It holds no expiration policy; TTL evaluation belongs to the Cache.
    Stores that talk to a remote backend raise StoreUnavailableError when
    the backend fails.
    """

    backend: str = "abstract"

    @abstractmethod
    async def read(self, key: Hashable) -> Entry | None:
        """
        Fetch the entry stored under a key.

        Args:
            key: Cache key

        Returns:
            The stored Entry, or None if the key is absent
        """
        pass

    @abstractmethod
    async def write(self, key: Hashable, entry: Entry) -> None:
        """
        Store an entry, replacing any entry already under the key.

        Args:
            key: Cache key
            entry: Entry to store
        """
        pass

    @abstractmethod
    async def delete(self, key: Hashable) -> None:
        """
        Remove the entry under a key. Deleting a missing key is a no-op.

        Args:
            key: Cache key
        """
        pass
