"""
cachable — Cache Entry

The unit a store holds for each key.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Entry:
    """
    One cached value.

    Entries are immutable: writing a key replaces its Entry. ``ttl`` holds only
    the per-entry override; ``None`` defers to the owning cache's default TTL,
    resolved each time the entry is read.
    """

    data: Any
    created_at: float
    ttl: float | None = None

    def effective_ttl(self, default_ttl: float) -> float:
        """Resolve the TTL in seconds against a cache default (0 = never expires)."""
        return self.ttl or default_ttl

    def is_expired(self, now: float, default_ttl: float) -> bool:
        """True once the entry's age is strictly greater than its effective TTL."""
        ttl = self.effective_ttl(default_ttl)
        if not ttl:
            return False
        return now - self.created_at > ttl
