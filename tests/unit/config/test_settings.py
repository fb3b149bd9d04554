"""Tests for mitt.config.settings."""

import pytest

from mitt.config import Settings, get_settings


@pytest.mark.unit
class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("MITT_LOG_LEVEL", "MITT_LOG_FORMAT", "MITT_TRACE_DISPATCH"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.log_level == "WARNING"
        assert settings.log_format == "console"
        assert settings.trace_dispatch is False

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("MITT_LOG_LEVEL", "debug")
        monkeypatch.setenv("MITT_LOG_FORMAT", "json")
        monkeypatch.setenv("MITT_TRACE_DISPATCH", "1")

        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"
        assert settings.trace_dispatch is True

    def test_ignores_unprefixed_environment(self, monkeypatch):
        monkeypatch.delenv("MITT_LOG_LEVEL", raising=False)
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        assert Settings(_env_file=None).log_level == "WARNING"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_normalizes_level_and_format(self):
        settings = Settings(_env_file=None, log_level=" info ", log_format="JSON")

        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
