"""Sampling and output controls for a generation request."""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .wire_model import WireModel


class GenerationConfig(WireModel):
    """Generation parameters (all optional; server defaults apply when unset)."""

    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    top_p: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    top_k: Optional[int] = Field(default=None, gt=0)
    candidate_count: Optional[int] = Field(default=None, gt=0)
    max_output_tokens: Optional[int] = Field(default=None, gt=0)
    stop_sequences: Optional[List[str]] = None
    response_mime_type: Optional[str] = None


__all__ = ["GenerationConfig"]
