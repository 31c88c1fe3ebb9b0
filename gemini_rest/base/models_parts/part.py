"""A single part of a content turn (text or inline binary data)."""
from __future__ import annotations

from typing import Any, Dict, Optional

from .wire_model import WireModel


class Part(WireModel):
    """Content part.

    Attributes:
        text: Text segment.
        inline_data: Inline blob as ``{"mimeType": ..., "data": <base64>}``.
    """

    text: Optional[str] = None
    inline_data: Optional[Dict[str, Any]] = None


__all__ = ["Part"]
