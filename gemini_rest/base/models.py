"""Wire models (requests, responses, enums) for the Gemini REST API.

Re-exports the one-class-per-file implementations under
``gemini_rest.base.models_parts`` to keep a stable import path.
"""

from .models_parts.wire_model import WireModel
from .models_parts.api_version import ApiVersion
from .models_parts.generative_model import GenerativeModel
from .models_parts.part import Part
from .models_parts.content import Content
from .models_parts.generation_config import GenerationConfig
from .models_parts.safety_setting import SafetySetting
from .models_parts.chat_request import ChatRequest
from .models_parts.safety_rating_response import SafetyRatingResponse
from .models_parts.candidate_response import CandidateResponse
from .models_parts.prompt_feedback_response import PromptFeedbackResponse
from .models_parts.usage_metadata_response import UsageMetadataResponse
from .models_parts.chat_response import ChatResponse

__all__ = [
    "WireModel",
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
]
