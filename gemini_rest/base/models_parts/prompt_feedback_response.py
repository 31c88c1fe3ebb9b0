"""Feedback about the prompt itself (blocking reason and ratings)."""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .safety_rating_response import SafetyRatingResponse
from .wire_model import WireModel


class PromptFeedbackResponse(WireModel):
    block_reason: Optional[str] = None
    safety_ratings: List[SafetyRatingResponse] = Field(default_factory=list)


__all__ = ["PromptFeedbackResponse"]
