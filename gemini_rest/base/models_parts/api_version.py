"""Gemini REST API version identifiers."""
from __future__ import annotations

from enum import Enum


class ApiVersion(str, Enum):
    """Path segment selecting the REST API version."""

    V1BETA = "v1beta"
    V1 = "v1"


__all__ = ["ApiVersion"]
