"""
Centralized Configuration for backtest events
Uses Pydantic Settings with .env loading.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ValidationSettings(BaseSettings):
    """Event validation policy settings."""
    model_config = SettingsConfigDict(env_prefix="EVENTS_", extra="ignore")

    allow_negative_qty: bool = False  # True when direction does not carry the sign
    allow_crossed_quotes: bool = False  # True to accept ticks with bid > ask


class LoggingSettings(BaseSettings):
    """Logging settings."""
    model_config = SettingsConfigDict(extra="ignore")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        alias="LOG_FORMAT",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the level name."""
        level = str(v).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


class EventSettings(BaseSettings):
    """Root settings for the event core."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    validation: ValidationSettings = Field(default_factory=ValidationSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache()
def get_settings() -> EventSettings:
    """Get cached settings instance."""
    return EventSettings()


def reload_settings() -> EventSettings:
    """Force reload settings (clears cache)."""
    get_settings.cache_clear()
    return get_settings()


def configure_logging(settings: Optional[EventSettings] = None) -> int:
    """
    Configure root logging from settings.

    Args:
        settings: Settings to use; defaults to the cached settings

    Returns:
        The numeric log level that was applied
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.logging.log_level)
    logging.basicConfig(level=level, format=settings.logging.log_format)
    return level
