"""Configuration via pydantic-settings (VERDICT_* environment variables)."""

from .settings import (
    LoggingSettings,
    MemoizationSettings,
    VerdictSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "VerdictSettings",
    "MemoizationSettings",
    "LoggingSettings",
    "get_settings",
    "clear_settings_cache",
]
