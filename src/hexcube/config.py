"""Lightweight configuration for hexcube."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Minimal library settings."""

    model_config = SettingsConfigDict(
        env_prefix="HEXCUBE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    log_level: LogLevel = Field(
        default="WARNING", description="Level applied to the hexcube logger"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Apply the configured log level to the package logger and return it."""

    settings = settings or get_settings()
    logger = logging.getLogger("hexcube")
    logger.setLevel(settings.log_level)
    return logger
