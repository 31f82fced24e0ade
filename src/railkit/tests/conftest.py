"""Shared fixtures: isolated settings and captured logging."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from railkit.foundation.config import clear_settings_cache
from railkit.observability import CaptureRenderer, configure_logging


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop RAILKIT_* variables and silence logging for every test."""
    for key in list(os.environ):
        if key.startswith("RAILKIT_"):
            monkeypatch.delenv(key)
    clear_settings_cache()
    configure_logging(format="none")
    yield
    clear_settings_cache()


@pytest.fixture
def captured() -> CaptureRenderer:
    """Route all log output at DEBUG and above into memory."""
    renderer = CaptureRenderer()
    configure_logging(level="DEBUG", renderer=renderer)
    return renderer
