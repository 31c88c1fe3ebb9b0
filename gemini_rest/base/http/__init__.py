"""HTTP plumbing: default client construction and the request interceptor."""

from .client import build_default_client, install_interceptor
from .interceptor import (
    API_KEY_PARAM,
    EVENT_STREAM_MEDIA_TYPE,
    GeminiInterceptor,
    intercept_request,
)

__all__ = [
    "build_default_client",
    "install_interceptor",
    "GeminiInterceptor",
    "intercept_request",
    "API_KEY_PARAM",
    "EVENT_STREAM_MEDIA_TYPE",
]
