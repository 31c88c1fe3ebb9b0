"""Base shared constants for the Gemini client.

Central location to avoid scattering magic strings.

# pragma: allowlist secret
"""
from __future__ import annotations

# Media type of request bodies.
JSON_MEDIA_TYPE = "application/json"

# Media type of server-sent event streams.
EVENT_STREAM_MEDIA_TYPE = "text/event-stream"

# Prefix of the RequestError raised when a stream cannot be registered.
EVENT_SOURCE_ERROR_PREFIX = "Failed to create event source"

__all__ = ["JSON_MEDIA_TYPE", "EVENT_STREAM_MEDIA_TYPE", "EVENT_SOURCE_ERROR_PREFIX"]
