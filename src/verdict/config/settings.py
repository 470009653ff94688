"""Environment-based configuration using pydantic-settings.

Example:
    >>> from verdict.config import get_settings
    >>> get_settings().memo.cleanup_interval
    60.0

    # Or with environment variables:
    # VERDICT_MEMO_CLEANUP_INTERVAL=5
    # VERDICT_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveFloat, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict


class MemoizationSettings(BaseSettings):
    """Defaults for the memoization engine."""

    model_config = SettingsConfigDict(
        env_prefix="VERDICT_MEMO_",
        extra="ignore",
    )

    cleanup_interval: PositiveFloat = Field(
        default=60.0,
        description="Minimum seconds between sweeps of expired entries",
    )
    default_max_cache_size: PositiveInt | None = Field(
        default=None,
        description="Max entries for MemoizationFactory.create when none is passed",
    )
    default_expiration: PositiveFloat | None = Field(
        default=None,
        description="Entry lifetime in seconds for MemoizationFactory.create when none is passed",
    )


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="VERDICT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "text"] = "text"


class VerdictSettings(BaseSettings):
    """Root settings, loaded from VERDICT_* environment variables and .env."""

    model_config = SettingsConfigDict(
        env_prefix="VERDICT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug logging")
    memo: MemoizationSettings = Field(default_factory=MemoizationSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> VerdictSettings:
    """Get the process-wide settings instance (cached)."""
    return VerdictSettings()


def clear_settings_cache() -> None:
    """Drop cached settings so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
