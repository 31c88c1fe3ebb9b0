from __future__ import annotations

import pytest

from gemini_rest import ApiVersion, GeminiClient, ParameterError
from gemini_rest.config.env import (
    API_KEY_ENV_VARS,
    is_placeholder,
    read_env_settings,
    resolve_api_key,
)


def test_env_names_are_stable():
    assert API_KEY_ENV_VARS == ("GEMINI_API_KEY", "GOOGLE_API_KEY")


def test_resolve_api_key_prefers_canonical(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "alias-key")
    assert resolve_api_key() == ("alias-key", "GOOGLE_API_KEY")
    monkeypatch.setenv("GEMINI_API_KEY", "canonical-key")
    assert resolve_api_key() == ("canonical-key", "GEMINI_API_KEY")


def test_resolve_api_key_skips_blank_values(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "   ")
    assert resolve_api_key() == (None, None)


def test_read_env_settings_collects_overrides(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "k")
    monkeypatch.setenv("GEMINI_API_HOST", "https://proxy.example.net")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-pro-vision")
    monkeypatch.setenv("GEMINI_API_VERSION", "v1")
    monkeypatch.setenv("GEMINI_TIMEOUT_SECONDS", "45")
    assert read_env_settings() == {
        "api_key": "k",
        "api_host": "https://proxy.example.net",
        "model": "gemini-pro-vision",
        "version": "v1",
        "timeout": 45,
    }


def test_read_env_settings_ignores_bad_timeout(monkeypatch):
    monkeypatch.setenv("GEMINI_TIMEOUT_SECONDS", "soon")
    assert read_env_settings() == {}


def test_from_env_builds_client(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "env-key")
    monkeypatch.setenv("GEMINI_API_VERSION", "v1")
    with GeminiClient.from_env(model="gemini-pro-vision", api_host=None) as client:
        cfg = client.config
    assert cfg.api_key == "env-key"
    assert cfg.version is ApiVersion.V1
    assert cfg.model == "gemini-pro-vision"
    assert cfg.timeout == 30


def test_from_env_without_key_fails():
    with pytest.raises(ParameterError) as exc_info:
        GeminiClient.from_env()
    assert exc_info.value.message == "Invalid Google token"


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, False),
        ("AIzaRealLookingKey", False),
        ("your_api_key_here", True),
        ("  CHANGEME ", True),
        ("placeholder", True),
    ],
)
def test_is_placeholder(value, expected):
    assert is_placeholder(value) is expected
