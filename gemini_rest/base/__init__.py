"""
Gemini client base package

Exports the provider-agnostic building blocks used by the Gemini facade:
- Errors: normalized taxonomy and classification
- Models (DTOs): camelCase wire models with unknown keys ignored
- HTTP: default client construction and the request interceptor
- Routing: static provider → URL template table
- Streaming: event sources and listeners
"""

from .errors import ErrorCode, ParameterError, ProviderError, RequestError, classify_exception
from .http import GeminiInterceptor, build_default_client, install_interceptor, intercept_request
from .models import (
    ApiVersion,
    CandidateResponse,
    ChatRequest,
    ChatResponse,
    Content,
    GenerationConfig,
    GenerativeModel,
    Part,
    PromptFeedbackResponse,
    SafetyRatingResponse,
    SafetySetting,
    UsageMetadataResponse,
)
from .routing import ProviderModel, UrlModel, get_url
from .streaming import (
    CallbackListener,
    EventSource,
    EventSourceFactory,
    QueueListener,
    ServerSentEvent,
    StreamListener,
)
from .timeouts import TimeUnit, build_http_timeout

__all__ = [
    # Errors
    "ErrorCode",
    "ProviderError",
    "ParameterError",
    "RequestError",
    "classify_exception",
    # HTTP
    "GeminiInterceptor",
    "intercept_request",
    "build_default_client",
    "install_interceptor",
    # Models
    "ApiVersion",
    "GenerativeModel",
    "Part",
    "Content",
    "GenerationConfig",
    "SafetySetting",
    "ChatRequest",
    "SafetyRatingResponse",
    "CandidateResponse",
    "PromptFeedbackResponse",
    "UsageMetadataResponse",
    "ChatResponse",
    # Routing
    "ProviderModel",
    "UrlModel",
    "get_url",
    # Streaming
    "EventSource",
    "EventSourceFactory",
    "StreamListener",
    "CallbackListener",
    "QueueListener",
    "ServerSentEvent",
    # Timeouts
    "TimeUnit",
    "build_http_timeout",
]
