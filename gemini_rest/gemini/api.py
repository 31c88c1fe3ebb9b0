"""Typed blocking calls against the Gemini REST API.

Each method sends one request on the shared ``httpx.Client`` and parses the
body into a wire model. Failures are not wrapped: ``httpx.HTTPError``
subclasses (including ``HTTPStatusError`` for non-2xx replies) and
``pydantic.ValidationError`` reach the caller unchanged.
"""
from __future__ import annotations

import httpx

from ..base.constants import JSON_MEDIA_TYPE
from ..base.models import ChatResponse
from ..base.serialization import RequestBody, dumps, parse


class GeminiApi:
    """Blocking endpoint bindings relative to ``api_host``."""

    def __init__(self, client: httpx.Client, api_host: str) -> None:
        self._client = client
        self._api_host = api_host

    def url_for(self, path: str) -> str:
        return f"{self._api_host}/{path}"

    def fetch_chat_completions(self, path: str, body: RequestBody) -> ChatResponse:
        """POST ``body`` to ``path`` and parse the reply as a :class:`ChatResponse`."""
        response = self._client.post(
            self.url_for(path),
            content=dumps(body).encode("utf-8"),
            headers={"Content-Type": JSON_MEDIA_TYPE},
        )
        response.raise_for_status()
        return parse(ChatResponse, response.content)


__all__ = ["GeminiApi"]
