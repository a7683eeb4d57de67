# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

import pytest

_SETTINGS_ENV = (
    "DEBUG",
    "CRONTIME_DEBUG",
    "CRONTIME_LOOKAHEAD_YEARS",
    "CRONTIME_LOG_LEVEL",
    "CRONTIME_LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def _clean_settings_env(monkeypatch):
    """Keep the host environment from leaking into Settings."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
