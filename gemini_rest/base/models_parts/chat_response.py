"""Parsed response of ``generateContent`` (and of each streamed chunk)."""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .candidate_response import CandidateResponse
from .prompt_feedback_response import PromptFeedbackResponse
from .usage_metadata_response import UsageMetadataResponse
from .wire_model import WireModel


class ChatResponse(WireModel):
    """Chat completion response.

    Unknown keys sent by the API are dropped during parsing.
    """

    candidates: List[CandidateResponse] = Field(default_factory=list)
    prompt_feedback: Optional[PromptFeedbackResponse] = None
    usage_metadata: Optional[UsageMetadataResponse] = None

    @property
    def text(self) -> str:
        """Text of the first candidate, or an empty string when none exists."""
        if not self.candidates:
            return ""
        return self.candidates[0].text


__all__ = ["ChatResponse"]
