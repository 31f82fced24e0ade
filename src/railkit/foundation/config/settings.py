"""Environment-based configuration using pydantic-settings.

Example:
    >>> from railkit.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'INFO'
    >>> settings.codec.format
    'json'

    # Or with environment variables:
    # RAILKIT_LOG_LEVEL=DEBUG
    # RAILKIT_CODEC_FORMAT=msgpack
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RAILKIT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"
    colors: bool | None = Field(default=None, description="Force ANSI colors on/off; None auto-detects a TTY")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class CodecSettings(BaseSettings):
    """Result transport codec defaults."""

    model_config = SettingsConfigDict(
        env_prefix="RAILKIT_CODEC_",
        extra="ignore",
    )

    format: Literal["json", "msgpack"] = "json"
    sort_keys: bool = Field(default=False, description="Emit JSON object keys in sorted order")


class RailkitSettings(BaseSettings):
    """Root settings for railkit.

    Example environment variables:
        RAILKIT_DEBUG=true
        RAILKIT_LOG_LEVEL=DEBUG
        RAILKIT_LOG_FORMAT=json
        RAILKIT_CODEC_FORMAT=msgpack
    """

    model_config = SettingsConfigDict(
        env_prefix="RAILKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    codec: CodecSettings = Field(default_factory=CodecSettings)


@lru_cache(maxsize=1)
def get_settings() -> RailkitSettings:
    """Get the global settings instance (cached)."""
    return RailkitSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() rereads the environment."""
    get_settings.cache_clear()
