"""Gemini facade: blocking and streaming chat completions."""

from .api import GeminiApi
from .client import GeminiClient, Sink

__all__ = ["GeminiClient", "GeminiApi", "Sink"]
