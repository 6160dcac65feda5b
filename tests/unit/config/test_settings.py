"""Tests for config/settings.py."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cachex.config.settings import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CACHEX_REDIS_URL", raising=False)
        monkeypatch.delenv("CACHEX_REDIS_PROTOCOL", raising=False)
        monkeypatch.delenv("CACHEX_REDIS_SOCKET_TIMEOUT", raising=False)

        settings = Settings(_env_file=None)

        assert settings.redis_url == "redis://localhost:6379/0"
        assert settings.redis_protocol == 3
        assert settings.redis_socket_timeout is None

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("CACHEX_REDIS_URL", "redis://cache:6380/2")
        monkeypatch.setenv("CACHEX_REDIS_PROTOCOL", "2")
        monkeypatch.setenv("CACHEX_REDIS_SOCKET_TIMEOUT", "1.5")

        settings = Settings(_env_file=None)

        assert settings.redis_url == "redis://cache:6380/2"
        assert settings.redis_protocol == 2
        assert settings.redis_socket_timeout == 1.5

    def test_invalid_protocol(self, monkeypatch):
        monkeypatch.setenv("CACHEX_REDIS_PROTOCOL", "4")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_non_positive_timeout(self, monkeypatch):
        monkeypatch.setenv("CACHEX_REDIS_SOCKET_TIMEOUT", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
