"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from railkit import RailkitSettings, clear_settings_cache, get_settings


def test_defaults() -> None:
    settings = get_settings()

    assert settings.debug is False
    assert settings.logging.level == "INFO"
    assert settings.logging.format == "console"
    assert settings.logging.colors is None
    assert settings.codec.format == "json"
    assert settings.codec.sort_keys is False


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RAILKIT_DEBUG", "true")
    monkeypatch.setenv("RAILKIT_LOG_LEVEL", "debug")
    monkeypatch.setenv("RAILKIT_LOG_FORMAT", "json")
    monkeypatch.setenv("RAILKIT_CODEC_FORMAT", "msgpack")
    clear_settings_cache()

    settings = get_settings()

    assert settings.debug is True
    assert settings.logging.level == "DEBUG"
    assert settings.logging.format == "json"
    assert settings.codec.format == "msgpack"


def test_invalid_env_value_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RAILKIT_CODEC_FORMAT", "xml")

    with pytest.raises(ValidationError):
        RailkitSettings()
