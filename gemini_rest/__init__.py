"""gemini_rest package

Thin client for the Google Gemini generative-language REST API.

Public API (re-exported):
    - Version: ``__version__``
    - Client: :class:`GeminiClient`, :class:`ClientConfig`, :func:`resolve_config`
    - Exceptions: :class:`ProviderError`, :class:`ParameterError`,
      :class:`RequestError`, :class:`ErrorCode`
    - Models: :class:`ChatRequest`, :class:`ChatResponse` and friends
    - Enums: :class:`ApiVersion`, :class:`GenerativeModel`, :class:`TimeUnit`
    - Streaming: :class:`StreamListener`, :class:`CallbackListener`,
      :class:`QueueListener`, :class:`EventSource`

Example::

    from gemini_rest import ChatRequest, GeminiClient

    with GeminiClient(api_key="...") as client:
        reply = client.create_chat_completions(ChatRequest.from_text("Hello"))
        print(reply.text)
"""

from .base.errors import ErrorCode, ParameterError, ProviderError, RequestError
from .base.logging import configure_logger
from .base.models import (
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
from .base.streaming import (
    CallbackListener,
    EventSource,
    QueueListener,
    ServerSentEvent,
    StreamListener,
)
from .base.timeouts import TimeUnit
from .config import ClientConfig, resolve_config
from .gemini import GeminiClient

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Client
    "GeminiClient",
    "ClientConfig",
    "resolve_config",
    "configure_logger",
    # Exceptions
    "ErrorCode",
    "ProviderError",
    "ParameterError",
    "RequestError",
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
    "TimeUnit",
    # Streaming
    "StreamListener",
    "CallbackListener",
    "QueueListener",
    "EventSource",
    "ServerSentEvent",
]
