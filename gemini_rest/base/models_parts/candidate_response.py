"""One generated candidate inside a chat response."""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .content import Content
from .safety_rating_response import SafetyRatingResponse
from .wire_model import WireModel


class CandidateResponse(WireModel):
    """Generated candidate with its finish reason and safety ratings."""

    content: Optional[Content] = None
    finish_reason: Optional[str] = None
    index: Optional[int] = None
    safety_ratings: List[SafetyRatingResponse] = Field(default_factory=list)

    @property
    def text(self) -> str:
        """Concatenated text of all parts (empty when there is no content)."""
        if self.content is None:
            return ""
        return "".join(p.text for p in self.content.parts if p.text)


__all__ = ["CandidateResponse"]
