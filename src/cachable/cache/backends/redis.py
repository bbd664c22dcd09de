"""
cachable — Redis Store

Asynchronous Redis store with:
- JSON serialization of entries (data, created_at, ttl)
- Namespace prefixing so several caches can share one Redis database
- No native Redis expiry: entries are expired lazily by the owning Cache

Requires: redis>=5.0.1 with asyncio support

Example:
    store = RedisStore(redis_url="redis://localhost:6379/0", namespace="cachable:sessions")
    cache = Cache("sessions", store=store, default_ttl=60)
"""

from __future__ import annotations

import json
import logging
from collections.abc import Hashable
from typing import Any

from ...errors import CacheOperationError, StoreUnavailableError
from ..entry import Entry
from ..interface import StoreInterface

logger = logging.getLogger(__name__)

try:
    # redis-py asyncio client (v4+)
    from redis.asyncio import Redis
    from redis.exceptions import RedisError
except ImportError as e:  # pragma: no cover
    raise ImportError(
        "Redis async client is required but not installed. "
        "Install with: pip install 'redis>=5.0.1' or add 'redis' to your dependencies."
    ) from e


class RedisStore(StoreInterface):
    """
    Redis-backed store.

    Notes:
    - Keys are converted with str() and prefixed with the namespace.
    - Values are stored as UTF-8 JSON strings, so cached data must be
      JSON-serializable.
    - Client failures surface as StoreUnavailableError; nothing is retried.
    """

    backend = "redis"

    def __init__(
        self,
        redis_url: str,
        namespace: str = "cachable",
        max_connections: int = 10,
        socket_timeout: float = 5.0,
    ) -> None:
        """
        Initialize Redis store.

        Args:
            redis_url: Connection URL, e.g., redis://localhost:6379/0 or rediss:// for TLS
            namespace: Prefix for all keys
            max_connections: Connection pool size
            socket_timeout: Socket timeout in seconds
        """
        if not redis_url:
            raise ValueError("redis_url is required")

        self.namespace = namespace.strip() or "cachable"

        # Lazy connection; connects on first command
        self._client = Redis.from_url(  # type: ignore[call-overload]
            url=redis_url,
            decode_responses=True,
            max_connections=max_connections,
            socket_timeout=socket_timeout,
        )

    # ------------ Helpers ------------

    def _make_key(self, key: Hashable) -> str:
        """Create namespaced key."""
        return f"{self.namespace}:{key}"

    @staticmethod
    def _to_json(entry: Entry) -> str:
        """Serialize an entry to a JSON string."""
        return json.dumps(
            {"data": entry.data, "created_at": entry.created_at, "ttl": entry.ttl},
            ensure_ascii=False,
            separators=(",", ":"),
        )

    @staticmethod
    def _from_json(raw: str | bytes) -> Entry:
        """Deserialize a JSON string into an entry."""
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        payload: dict[str, Any] = json.loads(raw)
        return Entry(data=payload["data"], created_at=float(payload["created_at"]), ttl=payload.get("ttl"))

    def _unavailable(self, operation: str, key: Hashable, error: Exception) -> StoreUnavailableError:
        logger.error(
            "Redis %s failed for key '%s': %s",
            operation,
            key,
            error,
            extra={"key": str(key), "namespace": self.namespace, "error": str(error)},
            exc_info=True,
        )
        return StoreUnavailableError(
            self.backend,
            details={"operation": operation, "key": str(key), "namespace": self.namespace, "error": str(error)},
        )

    # ------------ Store interface ------------

    async def read(self, key: Hashable) -> Entry | None:
        try:
            raw = await self._client.get(self._make_key(key))
        except (RedisError, OSError) as e:
            raise self._unavailable("read", key, e) from e

        if raw is None:
            return None

        try:
            return self._from_json(raw)
        except (ValueError, KeyError, TypeError, UnicodeDecodeError) as e:
            raise CacheOperationError(
                f"Undecodable entry stored under key '{key}'",
                details={"key": str(key), "namespace": self.namespace, "error": str(e)},
            ) from e

    async def write(self, key: Hashable, entry: Entry) -> None:
        try:
            payload = self._to_json(entry)
        except (TypeError, ValueError) as e:
            raise CacheOperationError(
                f"Value for key '{key}' is not JSON-serializable",
                details={"key": str(key), "value_type": type(entry.data).__name__, "error": str(e)},
            ) from e

        try:
            await self._client.set(name=self._make_key(key), value=payload)
        except (RedisError, OSError) as e:
            raise self._unavailable("write", key, e) from e

    async def delete(self, key: Hashable) -> None:
        try:
            await self._client.delete(self._make_key(key))
        except (RedisError, OSError) as e:
            raise self._unavailable("delete", key, e) from e

    async def close(self) -> None:
        """Close the Redis client and release its connection pool."""
        try:
            await self._client.aclose()
            logger.info("Closed Redis store for namespace '%s'", self.namespace)
        finally:
            await self._client.connection_pool.disconnect()
