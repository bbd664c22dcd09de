"""
cachable — Cache Registry

Holds named cache instances so independent call sites can share one cache.

Key points:
- At most one Cache per name per registry; the first lookup creates it
- Options passed on later lookups are ignored (first caller wins)
- The backing store for new caches comes from the registry's CacheConfig
  (memory by default, redis when configured)
- A process-wide default registry backs the module-level get_cache()

Examples:
    from cachable import get_cache

    sessions = get_cache("sessions", ttl=60)
    await sessions.set("u1", {"id": 1})

    # Or own the registry explicitly (e.g., in tests)
    registry = CacheRegistry(CacheConfig(ttl_seconds=300))
    cache = registry.get_cache("users")
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from ..config import CacheBackend, CacheConfig, get_config
from ..errors import ConfigurationError
from .backends.memory import MemoryStore
from .cache import Cache
from .interface import StoreInterface

logger = logging.getLogger(__name__)


class CacheRegistry:
    """Owns named Cache instances and creates them on first lookup."""

    def __init__(
        self,
        config: CacheConfig | None = None,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize an empty registry.

        Args:
            config: Configuration for caches this registry creates
            clock: Time source handed to every cache created here
        """
        self.config = config if config is not None else CacheConfig()
        self._clock = clock
        self._caches: dict[str, Cache] = {}

    def get_cache(self, name: str = "default", ttl: float | None = None) -> Cache:
        """
        Get the cache registered under a name, creating it if needed.

        Args:
            name: Name that identifies the cache
            ttl: Default TTL in seconds, honored only when the cache is created
                (falls back to the configured ttl_seconds)

        Returns:
            The Cache instance for this name

        Raises:
            ValueError: If ttl is negative
            ConfigurationError: If the configured backend cannot be built
        """
        if ttl is not None and ttl < 0:
            raise ValueError(f"ttl must be >= 0 (0 = no expiry), got {ttl}")

        cache = self._caches.get(name)
        if cache is not None:
            if ttl is not None and ttl != cache.default_ttl:
                logger.debug(
                    "Ignoring ttl=%s for existing cache '%s'",
                    ttl,
                    name,
                    extra={"cache_name": name, "default_ttl": cache.default_ttl},
                )
            return cache

        default_ttl = ttl if ttl is not None else self.config.ttl_seconds
        store = self._create_store(name)
        cache = Cache(name, store=store, default_ttl=default_ttl, clock=self._clock)
        self._caches[name] = cache

        logger.info(
            "Created cache '%s' with backend: %s",
            name,
            store.backend,
            extra={"cache_name": name, "backend": store.backend, "default_ttl": default_ttl},
        )
        return cache

    def _create_store(self, name: str) -> StoreInterface:
        if self.config.backend == CacheBackend.MEMORY:
            return MemoryStore()
        if self.config.backend == CacheBackend.REDIS:
            return self._create_redis_store(name)
        raise ConfigurationError(
            f"Unknown cache backend: {self.config.backend}",
            details={"backend": str(self.config.backend), "supported": ["memory", "redis"]},
        )

    def _create_redis_store(self, name: str) -> StoreInterface:
        """Construct a redis store with a lazy import."""
        if not self.config.redis_url:
            raise ConfigurationError(
                "REDIS_URL must be set when CACHE_BACKEND=redis",
                details={"env": "REDIS_URL", "backend": "redis"},
            )

        # Lazy import to avoid loading redis when the memory backend is used
        try:
            from .backends.redis import RedisStore
        except ImportError as e:
            logger.error(
                "Redis backend selected but redis client is not installed",
                extra={"package": "redis>=5.0.1", "error": str(e)},
            )
            raise ConfigurationError(
                "Redis backend selected but redis client is unavailable. Install with: pip install 'redis>=5.0.1'",
                details={"package": "redis>=5.0.1", "error": str(e), "backend": "redis"},
            ) from e

        return RedisStore(
            redis_url=self.config.redis_url,
            namespace=f"{self.config.namespace}:{name}",
            max_connections=self.config.redis_max_connections,
            socket_timeout=self.config.redis_socket_timeout,
        )

    def list_caches(self) -> list[str]:
        """List all registered cache names."""
        return list(self._caches.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._caches

    def __len__(self) -> int:
        return len(self._caches)


_default_registry: CacheRegistry | None = None


def get_default_registry() -> CacheRegistry:
    """Get the process-wide registry, building it from global config on first use."""
    global _default_registry

    if _default_registry is None:
        _default_registry = CacheRegistry(get_config().cache)
        logger.debug("Initialized default cache registry")

    return _default_registry


def get_cache(name: str = "default", ttl: float | None = None) -> Cache:
    """
    Get a cache instance by name from the process-wide registry.

    Args:
        name: Cache instance name
        ttl: Default TTL in seconds, honored only at first creation

    Returns:
        Cache instance shared by every caller using this name
    """
    return get_default_registry().get_cache(name, ttl=ttl)


def reset_default_registry() -> None:
    """
    Drop the process-wide registry and every cache it holds.

    Warning: Only use this in testing contexts.
    """
    global _default_registry

    count = len(_default_registry) if _default_registry is not None else 0
    _default_registry = None
    logger.debug("Reset default cache registry, dropped %d cache(s)", count)
