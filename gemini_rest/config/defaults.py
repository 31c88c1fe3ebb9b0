"""gemini_rest.config.defaults
===========================

Central place for the small, stable default values used when building a
client. Only plain constants live here: this module imports nothing from the
rest of the package so that any layer may depend on it.
"""

from __future__ import annotations

# Base URL of the public generative-language endpoint.
GEMINI_DEFAULT_HOST = "https://generativelanguage.googleapis.com"

# Model and API version inserted into the request path when none is given.
GEMINI_DEFAULT_MODEL = "gemini-pro"
GEMINI_DEFAULT_VERSION = "v1beta"

# Timeout applied to connect/read/write/pool phases, in GEMINI_DEFAULT_TIME_UNIT.
GEMINI_DEFAULT_TIMEOUT = 30
GEMINI_DEFAULT_TIME_UNIT = "seconds"

# Provider key used in log context and error payloads.
GEMINI_PROVIDER_NAME = "gemini"
