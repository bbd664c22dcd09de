"""
cachable — Configuration Module

Provides typed configuration loading and validation.
"""

from .loader import get_config, load_config, reload_config
from .schemas import CachableConfig, CacheBackend, CacheConfig, LogLevel

__all__ = [
    # Loader functions
    "load_config",
    "get_config",
    "reload_config",
    # Models
    "CachableConfig",
    "CacheConfig",
    # Enums
    "CacheBackend",
    "LogLevel",
]
