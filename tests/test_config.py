"""Tests for settings and logging configuration."""

import logging

from farmbooks.config.logging import configure_logging
from farmbooks.config.settings import DEFAULT_GEMINI_MODEL, Settings


def test_settings_defaults(monkeypatch):
    """Test settings defaults."""
    for name in (
        "FARMBOOKS_DB_PATH",
        "FARMBOOKS_LOG_LEVEL",
        "FARMBOOKS_LOG_FORMAT",
        "FARMBOOKS_GEMINI_MODEL",
        "GEMINI_API_KEY",
        "GOOGLE_API_KEY",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.db_path is None
    assert settings.log_level == "WARNING"
    assert settings.log_format == "console"
    assert settings.gemini_api_key is None
    assert settings.gemini_model == DEFAULT_GEMINI_MODEL


def test_settings_from_env(monkeypatch):
    """Test settings from env."""
    monkeypatch.setenv("FARMBOOKS_DB_PATH", "/tmp/farm.db")
    monkeypatch.setenv("FARMBOOKS_LOG_LEVEL", "debug")
    monkeypatch.setenv("FARMBOOKS_LOG_FORMAT", "JSON")
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("GOOGLE_API_KEY", "key-123")

    settings = Settings.from_env()

    assert settings.db_path == "/tmp/farm.db"
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "json"
    assert settings.gemini_api_key == "key-123"


def test_configure_logging_sets_level():
    """Test configure logging sets level."""
    configure_logging(level="INFO", format="json")
    assert logging.getLogger().level == logging.INFO

    configure_logging(level="WARNING")
    assert logging.getLogger().level == logging.WARNING
