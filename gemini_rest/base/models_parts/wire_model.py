"""Shared Pydantic base for every Gemini wire model.

Python attributes are snake_case while the REST API speaks camelCase; the
alias generator bridges the two and ``populate_by_name`` lets callers use
either spelling. Unrecognized keys are ignored so that fields added to the
API later never break parsing.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base model configured for camelCase JSON with unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


__all__ = ["WireModel"]
