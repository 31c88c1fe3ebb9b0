"""Token accounting returned with a response."""
from __future__ import annotations

from typing import Optional

from .wire_model import WireModel


class UsageMetadataResponse(WireModel):
    prompt_token_count: Optional[int] = None
    candidates_token_count: Optional[int] = None
    total_token_count: Optional[int] = None


__all__ = ["UsageMetadataResponse"]
