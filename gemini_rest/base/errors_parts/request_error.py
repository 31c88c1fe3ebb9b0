"""
Request error raised while preparing an outgoing call.

Used when the streaming request cannot be assembled (for example the body is
not serializable). The underlying cause is kept in ``raw`` and chained with
``raise ... from``.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from .error_code import ErrorCode
from .provider_error import ProviderError


@dataclass
class RequestError(ProviderError):
    """Failure to build or register an outgoing request."""

    code: ErrorCode = field(default=ErrorCode.INTERNAL)
    message: str = "Failed to prepare request"


__all__ = ["RequestError"]
