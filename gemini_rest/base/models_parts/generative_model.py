"""Well-known Gemini model names.

Any model name string is accepted by the client; this enumeration only
collects the names the SDK documents.
"""
from __future__ import annotations

from enum import Enum


class GenerativeModel(str, Enum):
    """Model identifiers inserted into the ``models/{model}`` path segment."""

    GEMINI_PRO = "gemini-pro"
    GEMINI_PRO_VISION = "gemini-pro-vision"


__all__ = ["GenerativeModel"]
