"""Configuration management using pydantic-settings."""

from .settings import (
    CodecSettings,
    LoggingSettings,
    RailkitSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "CodecSettings",
    "LoggingSettings",
    "RailkitSettings",
    "clear_settings_cache",
    "get_settings",
]
