"""Models parts package: one wire model per module.

Prefer importing from `gemini_rest.base.models` for the stable surface.
"""

from .wire_model import WireModel
from .api_version import ApiVersion
from .generative_model import GenerativeModel
from .part import Part
from .content import Content
from .generation_config import GenerationConfig
from .safety_setting import SafetySetting
from .chat_request import ChatRequest
from .safety_rating_response import SafetyRatingResponse
from .candidate_response import CandidateResponse
from .prompt_feedback_response import PromptFeedbackResponse
from .usage_metadata_response import UsageMetadataResponse
from .chat_response import ChatResponse

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
