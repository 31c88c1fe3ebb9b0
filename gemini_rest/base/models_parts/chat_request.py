"""Request body for ``models/{model}:generateContent``.

The object is forwarded as the JSON body without further translation: what
the caller sets is what the API receives (camelCase keys, ``None`` fields
omitted).
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from .content import Content
from .generation_config import GenerationConfig
from .part import Part
from .safety_setting import SafetySetting
from .wire_model import WireModel


class ChatRequest(WireModel):
    """Chat completion request.

    Attributes:
        contents: Conversation turns, oldest first.
        generation_config: Optional sampling controls.
        safety_settings: Optional per-category blocking thresholds.
        system_instruction: Optional system prompt (``v1beta`` only).
        tools: Optional tool declarations, passed through untouched.
    """

    contents: List[Content] = Field(default_factory=list)
    generation_config: Optional[GenerationConfig] = None
    safety_settings: Optional[List[SafetySetting]] = None
    system_instruction: Optional[Content] = None
    tools: Optional[List[Dict[str, Any]]] = None

    @classmethod
    def from_text(cls, text: str, *, role: str = "user", **kwargs: Any) -> "ChatRequest":
        """Build a single-turn request holding one text part."""
        return cls(contents=[Content(role=role, parts=[Part(text=text)])], **kwargs)


__all__ = ["ChatRequest"]
