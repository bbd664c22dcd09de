"""
cachable — Cache Module

Named TTL caches over pluggable stores.

- registry.py: named-instance registry and the process-wide get_cache()
- cache.py: TTL policy and the get/set/remove contract
- interface.py: abstract store interface all backends implement
- backends/: store implementations (memory always, redis lazily)

Usage:
    from cachable.cache import get_cache

    cache = get_cache("sessions", ttl=60)
    await cache.set("key", "value")
    value = await cache.get("key")
"""

from .cache import Cache
from .entry import Entry
from .interface import StoreInterface
from .registry import CacheRegistry, get_cache, get_default_registry, reset_default_registry

__all__ = [
    # Registry
    "CacheRegistry",
    "get_cache",
    "get_default_registry",
    "reset_default_registry",
    # Cache
    "Cache",
    "Entry",
    # Interface
    "StoreInterface",
]
