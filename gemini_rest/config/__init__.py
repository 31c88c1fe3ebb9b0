"""Configuration layer for the Gemini client.

Sources, in increasing precedence:
    1. Built-in defaults (``gemini_rest.config.defaults``)
    2. Environment variables (``gemini_rest.config.env``), used by
       ``GeminiClient.from_env`` only
    3. Explicit keyword arguments passed to the client

``resolve_config`` turns the merged values into an immutable
:class:`ClientConfig`.
"""
from __future__ import annotations

from .defaults import (
    GEMINI_DEFAULT_HOST,
    GEMINI_DEFAULT_MODEL,
    GEMINI_DEFAULT_TIME_UNIT,
    GEMINI_DEFAULT_TIMEOUT,
    GEMINI_DEFAULT_VERSION,
    GEMINI_PROVIDER_NAME,
)
from .env import is_placeholder, read_env_settings, resolve_api_key
from .settings import INVALID_TOKEN_MESSAGE, ClientConfig, resolve_config, validate_host

__all__ = [
    "GEMINI_DEFAULT_HOST",
    "GEMINI_DEFAULT_MODEL",
    "GEMINI_DEFAULT_TIME_UNIT",
    "GEMINI_DEFAULT_TIMEOUT",
    "GEMINI_DEFAULT_VERSION",
    "GEMINI_PROVIDER_NAME",
    "ClientConfig",
    "INVALID_TOKEN_MESSAGE",
    "resolve_config",
    "validate_host",
    "is_placeholder",
    "read_env_settings",
    "resolve_api_key",
]
