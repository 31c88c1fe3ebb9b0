"""Unified client error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``gemini_rest.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.parameter_error import ParameterError
from .errors_parts.request_error import RequestError
from .errors_parts.classification import classify_exception

__all__ = [
    "ErrorCode",
    "ProviderError",
    "ParameterError",
    "RequestError",
    "classify_exception",
]
