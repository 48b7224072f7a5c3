"""
Unit Tests for Settings and Logging
===================================

Tests for environment-driven configuration and structlog setup.
"""

import pytest
import structlog
from pydantic import ValidationError

from catalog_engine.config.settings import Settings, get_settings
from catalog_engine.utils.logger import configure_logging, get_logger


class TestSettings:
    """Tests for Settings model."""

    def test_defaults(self, monkeypatch) -> None:
        for name in ("CATALOG_PATH", "LOG_LEVEL", "ENVIRONMENT", "FEATURED_KEYWORD"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.catalog_path == "data/products.json"
        assert settings.log_level == "INFO"
        assert settings.featured_keyword == "nsf"
        assert settings.featured_limit == 2
        assert settings.is_development
        assert not settings.is_production

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("featured_limit", "4")
        settings = Settings(_env_file=None)
        assert settings.is_production
        assert settings.featured_limit == 4

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="VERBOSE")

    def test_rejects_negative_featured_limit(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, featured_limit=-1)

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


class TestLogging:
    """Tests for configure_logging and get_logger."""

    def test_configure_console(self) -> None:
        configure_logging(log_level="DEBUG", json_output=False)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_configure_json(self) -> None:
        configure_logging(json_output=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_get_logger_emits(self) -> None:
        configure_logging(json_output=False)
        logger = get_logger("catalog_engine.test")
        logger.info("test_event", key="value")


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()
