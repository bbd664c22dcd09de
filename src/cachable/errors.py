"""
cachable — Core Error Types

Defines the exception hierarchy for the cache runtime.
All exceptions inherit from CachableError for consistent error handling.

A missing or expired key is never an error: cache reads return None.
"""

from typing import Any


class CachableError(Exception):
    """Base exception for all cachable errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for structured logging."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(CachableError):
    """Raised when configuration is invalid or a backend cannot be built."""

    pass


class CacheError(CachableError):
    """Base exception for cache-related errors."""

    pass


class StoreUnavailableError(CacheError):
    """Raised when a backing store cannot be reached."""

    def __init__(self, backend: str, details: dict[str, Any] | None = None):
        message = f"Cache store unavailable: {backend}"
        super().__init__(message, {"backend": backend, **(details or {})})
        self.backend = backend


class CacheOperationError(CacheError):
    """Raised when a store returns data it cannot decode or accept."""

    pass
