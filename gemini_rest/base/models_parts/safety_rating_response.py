"""Safety rating attached to a candidate or to the prompt feedback."""
from __future__ import annotations

from typing import Optional

from .wire_model import WireModel


class SafetyRatingResponse(WireModel):
    """Harm category and the probability the content falls into it."""

    category: Optional[str] = None
    probability: Optional[str] = None


__all__ = ["SafetyRatingResponse"]
