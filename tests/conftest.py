"""Shared fixtures for unit tests."""

from __future__ import annotations

import secrets

import pytest

from sparkevents.api.config import ApiConfig

_ENV_VARS = (
    "SPARKEVENTS_API_KEY",
    "SPARKEVENTS_BASE_URL",
    "SPARKEVENTS_API_VERSION",
    "SPARKEVENTS_TIMEOUT_S",
)


@pytest.fixture
def api_key() -> str:
    """Return a throwaway API key."""
    return secrets.token_hex(8)


@pytest.fixture
def api_config(api_key: str) -> ApiConfig:
    """Return configuration pointing at a test host."""
    return ApiConfig(base_url="https://api.example.test", api_key=api_key)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove client environment variables for the duration of a test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
