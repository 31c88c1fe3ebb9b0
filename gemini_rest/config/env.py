"""gemini_rest.config.env
======================

Environment variable mapping for client construction.

Purpose
-------
- Single source of truth for the environment variable names read by
  :meth:`gemini_rest.GeminiClient.from_env`.
- Small helpers to resolve the API key (canonical name first, then aliases)
  and to collect the optional overrides.

Failure Modes
-------------
- Helpers never raise on unset variables; missing values are simply absent
  from the returned mapping and the caller's validation decides what to do.
- A non-integer ``GEMINI_TIMEOUT_SECONDS`` is ignored.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Optional, Tuple

# Canonical first; GOOGLE_API_KEY is accepted as an alias.
API_KEY_ENV_VARS: Tuple[str, ...] = ("GEMINI_API_KEY", "GOOGLE_API_KEY")
API_HOST_ENV = "GEMINI_API_HOST"
MODEL_ENV = "GEMINI_MODEL"
VERSION_ENV = "GEMINI_API_VERSION"
TIMEOUT_ENV = "GEMINI_TIMEOUT_SECONDS"


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'your_api_key' or
    'example'. The check is case-insensitive and ignores surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return any(marker in v for marker in ("placeholder", "changeme", "your_api_key", "example"))


def resolve_api_key() -> Tuple[Optional[str], Optional[str]]:
    """Resolve the API key from the process environment.

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        ``(value, env_var_used)`` for the first non-empty candidate, or
        ``(None, None)`` when nothing is set.
    """
    for name in API_KEY_ENV_VARS:
        if val := os.environ.get(name, "").strip():
            return val, name
    return None, None


def read_env_settings() -> Dict[str, Any]:
    """Collect client keyword arguments from the environment.

    Only variables that are set (and non-empty) appear in the result, keyed by
    the :class:`~gemini_rest.config.settings.ClientConfig` field name.
    """
    settings: Dict[str, Any] = {}
    api_key, _ = resolve_api_key()
    if api_key:
        settings["api_key"] = api_key
    for field_name, env_name in (("api_host", API_HOST_ENV), ("model", MODEL_ENV), ("version", VERSION_ENV)):
        if val := os.environ.get(env_name, "").strip():
            settings[field_name] = val
    raw_timeout = os.environ.get(TIMEOUT_ENV, "").strip()
    if raw_timeout:
        try:
            settings["timeout"] = int(raw_timeout)
        except ValueError:
            pass
    return settings


__all__ = [
    "API_KEY_ENV_VARS",
    "API_HOST_ENV",
    "MODEL_ENV",
    "VERSION_ENV",
    "TIMEOUT_ENV",
    "is_placeholder",
    "resolve_api_key",
    "read_env_settings",
]
