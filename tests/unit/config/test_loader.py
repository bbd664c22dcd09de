"""
cachable — Configuration Tests

Tests environment and .env loading plus schema validation.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from cachable.config import CacheBackend, CacheConfig, LogLevel, get_config, load_config, reload_config
from cachable.errors import ConfigurationError

pytestmark = pytest.mark.usefixtures("clean_env")


class TestLoadConfig:
    """Test suite for load_config()."""

    def test_defaults(self) -> None:
        config = load_config()

        assert config.log_level == LogLevel.INFO
        assert config.cache.backend == CacheBackend.MEMORY
        assert config.cache.ttl_seconds == 0
        assert config.cache.namespace == "cachable"
        assert config.cache.redis_url is None

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("CACHE_TTL_SECONDS", "2.5")
        monkeypatch.setenv("CACHE_NAMESPACE", "app")

        config = load_config()

        assert config.log_level == LogLevel.DEBUG
        assert config.cache.ttl_seconds == 2.5
        assert config.cache.namespace == "app"

    def test_redis_auto_detected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REDIS_URL", "redis://localhost:6379/0")

        config = load_config()

        assert config.cache.backend == CacheBackend.REDIS
        assert config.cache.redis_url == "redis://localhost:6379/0"

    def test_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / "custom.env"
        env_file.write_text("CACHE_TTL_SECONDS=15\nCACHE_NAMESPACE=from_file\n")
        # Registered with monkeypatch so values written by dotenv are restored
        monkeypatch.setenv("CACHE_TTL_SECONDS", "0")
        monkeypatch.setenv("CACHE_NAMESPACE", "cachable")

        config = load_config(env_file=str(env_file))

        assert config.cache.ttl_seconds == 15
        assert config.cache.namespace == "from_file"

    def test_singleton_and_reload(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_config()
        assert get_config() is first

        monkeypatch.setenv("CACHE_TTL_SECONDS", "7")
        assert get_config().cache.ttl_seconds == 0

        reloaded = reload_config()
        assert reloaded is not first
        assert reloaded.cache.ttl_seconds == 7

    def test_negative_ttl_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CACHE_TTL_SECONDS", "-1")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config()

        assert "validation_errors" in exc_info.value.details

    def test_non_numeric_ttl_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CACHE_TTL_SECONDS", "soon")

        with pytest.raises(ConfigurationError):
            load_config()

    def test_unknown_backend_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CACHE_BACKEND", "memcached")

        with pytest.raises(ConfigurationError):
            load_config()


class TestCacheConfig:
    """Test suite for the CacheConfig schema."""

    def test_redis_requires_url(self) -> None:
        with pytest.raises(ValidationError):
            CacheConfig(backend=CacheBackend.REDIS)

    def test_redis_with_url(self) -> None:
        config = CacheConfig(backend=CacheBackend.REDIS, redis_url="redis://localhost:6379/0")
        assert config.redis_url == "redis://localhost:6379/0"
