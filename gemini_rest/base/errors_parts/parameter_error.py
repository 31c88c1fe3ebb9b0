"""
Parameter error raised while building a client.

Raised synchronously from configuration resolution when a mandatory value is
missing or a supplied value cannot be used. Construction never completes when
this error is raised.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from .error_code import ErrorCode
from .provider_error import ProviderError


@dataclass
class ParameterError(ProviderError):
    """Invalid or missing client configuration (for example an empty API key)."""

    code: ErrorCode = field(default=ErrorCode.VALIDATION)
    message: str = "Invalid parameter"


__all__ = ["ParameterError"]
