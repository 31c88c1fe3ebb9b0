"""Shared testing utilities for the gemini_rest test suite.

Exports:
    - CHAT_PAYLOAD: a realistic ``generateContent`` reply, including keys the
      wire models do not declare.
    - sse_body(*chunks): encode JSON chunks as a ``text/event-stream`` body.
    - RecordingTransport: ``httpx.MockTransport`` that records requests.
"""
from __future__ import annotations

import json
from typing import Callable, List

import httpx

CHAT_PAYLOAD = {
    "candidates": [
        {
            "content": {"parts": [{"text": "Hello there"}], "role": "model"},
            "finishReason": "STOP",
            "index": 0,
            "safetyRatings": [
                {"category": "HARM_CATEGORY_HARASSMENT", "probability": "NEGLIGIBLE", "blocked": False},
                {"category": "HARM_CATEGORY_HATE_SPEECH", "probability": "LOW"},
            ],
            "citationMetadata": {"citationSources": []},
        }
    ],
    "promptFeedback": {
        "safetyRatings": [{"category": "HARM_CATEGORY_DANGEROUS_CONTENT", "probability": "NEGLIGIBLE"}]
    },
    "usageMetadata": {"promptTokenCount": 4, "candidatesTokenCount": 3, "totalTokenCount": 7},
    "modelVersion": "gemini-pro-001",
}


def sse_body(*chunks: dict) -> bytes:
    """Encode ``chunks`` as an SSE body the way the API streams them."""
    return "".join(f"data: {json.dumps(c)}\r\n\r\n" for c in chunks).encode("utf-8")


def text_chunk(text: str) -> dict:
    """Minimal streamed chunk carrying one text part."""
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}, "index": 0}]}


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


__all__ = ["CHAT_PAYLOAD", "sse_body", "text_chunk", "RecordingTransport"]
