"""Per-category safety blocking threshold sent with a request."""
from __future__ import annotations

from .wire_model import WireModel


class SafetySetting(WireModel):
    """Blocking threshold for one harm category.

    Example: ``SafetySetting(category="HARM_CATEGORY_HARASSMENT",
    threshold="BLOCK_ONLY_HIGH")``.
    """

    category: str
    threshold: str


__all__ = ["SafetySetting"]
