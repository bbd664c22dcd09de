"""
cachable — Named TTL Cache

Named, time-bounded key/value caches for memoization inside larger
applications. Caches are shared by name through a registry and expose an
async get/set/remove interface so the in-memory store can be swapped for
Redis without changing call sites.

Usage:
    from cachable import get_cache

    cache = get_cache("sessions", ttl=60)
    await cache.set("u1", {"id": 1})
    user = await cache.get("u1")
"""

from .cache import Cache, CacheRegistry, Entry, StoreInterface, get_cache, reset_default_registry
from .errors import CachableError, CacheError, CacheOperationError, ConfigurationError, StoreUnavailableError

__version__ = "1.0.0"

__all__ = [
    "get_cache",
    "reset_default_registry",
    "CacheRegistry",
    "Cache",
    "Entry",
    "StoreInterface",
    # Errors
    "CachableError",
    "CacheError",
    "CacheOperationError",
    "ConfigurationError",
    "StoreUnavailableError",
]
