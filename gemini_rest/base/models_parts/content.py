"""A content turn: a role plus an ordered list of parts."""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .part import Part
from .wire_model import WireModel


class Content(WireModel):
    """Conversation turn sent to or returned by the model.

    Attributes:
        role: ``"user"`` or ``"model"``; omitted for single-turn requests.
        parts: Ordered parts of the turn.
    """

    role: Optional[str] = None
    parts: List[Part] = Field(default_factory=list)


__all__ = ["Content"]
