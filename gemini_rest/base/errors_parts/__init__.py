"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `gemini_rest.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .parameter_error import ParameterError
from .request_error import RequestError
from .classification import classify_exception

__all__ = [
    "ErrorCode",
    "ProviderError",
    "ParameterError",
    "RequestError",
    "classify_exception",
]
