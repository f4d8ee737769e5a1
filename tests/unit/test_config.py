"""Tests for hexcube settings and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from hexcube.config import Settings, configure_logging, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("HEXCUBE_LOG_LEVEL", raising=False)
        assert Settings().log_level == "WARNING"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HEXCUBE_LOG_LEVEL", "DEBUG")
        assert Settings().log_level == "DEBUG"

    def test_level_is_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HEXCUBE_LOG_LEVEL", "info")
        assert Settings().log_level == "INFO"

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(log_level="verbose")

    def test_unknown_level_from_env_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HEXCUBE_LOG_LEVEL", "verbose")
        with pytest.raises(ValidationError):
            Settings()

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


class TestConfigureLogging:
    def test_applies_level(self) -> None:
        logger = configure_logging(Settings(log_level="debug"))
        try:
            assert logger.name == "hexcube"
            assert logger.level == logging.DEBUG
            assert logging.getLogger("hexcube.coordinate").getEffectiveLevel() == logging.DEBUG
        finally:
            logger.setLevel(logging.NOTSET)
