"""
cachable — Test Configuration and Shared Fixtures

Provides pytest configuration and shared fixtures for unit and integration tests.
"""

from collections.abc import Generator
from typing import Any

import pytest

from cachable.cache.registry import CacheRegistry, reset_default_registry
from cachable.config import CacheConfig, loader


class VirtualClock:
    """Manually advanced time source for TTL tests."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> VirtualClock:
    """A virtual clock starting at a fixed epoch."""
    return VirtualClock()


@pytest.fixture
def registry(clock: VirtualClock) -> CacheRegistry:
    """A fresh memory-backed registry driven by the virtual clock."""
    return CacheRegistry(CacheConfig(), clock=clock)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> None:
    """Clear cache-related environment variables and run from an empty directory."""
    for var in (
        "LOG_LEVEL",
        "CACHE_BACKEND",
        "CACHE_TTL_SECONDS",
        "CACHE_NAMESPACE",
        "REDIS_URL",
        "REDIS_MAX_CONNECTIONS",
        "REDIS_SOCKET_TIMEOUT",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sample_cache_data() -> dict[str, Any]:
    """Sample data for cache testing."""
    return {
        "simple_string": "hello",
        "simple_int": 42,
        "simple_float": 3.14,
        "simple_bool": True,
        "complex_dict": {"nested": {"key": "value", "list": [1, 2, 3]}},
        "complex_list": [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}],
    }


@pytest.fixture(autouse=True)
def reset_global_state() -> Generator[None, None, None]:
    """Reset the default registry and loaded config after each test to prevent state leakage."""
    yield
    reset_default_registry()
    loader._config_instance = None
