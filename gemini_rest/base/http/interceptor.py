"""Outgoing request rewriting for the Gemini REST API.

``intercept_request`` is a pure function: it receives the request the client
is about to send plus the resolved :class:`ClientConfig` and returns a new
request that satisfies the provider's conventions:

- ``{version}`` and ``{model}`` placeholders in the path are filled in;
- the API key is added as the ``key`` query parameter;
- in streaming mode (a listener was configured, or the request already
  accepts ``text/event-stream``) the action becomes ``:streamGenerateContent``,
  the ``alt=sse`` query parameter is added and ``Accept`` asks for an event
  stream.

``GeminiInterceptor`` adapts the function to ``httpx.Auth`` so that the
client applies it to every request it sends, event-source requests included.
No retries and no response inspection happen here.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Generator

import httpx

from ..constants import EVENT_STREAM_MEDIA_TYPE
from ..routing import MODEL_PLACEHOLDER, VERSION_PLACEHOLDER

if TYPE_CHECKING:
    from ...config.settings import ClientConfig

API_KEY_PARAM = "key"
GENERATE_ACTION = ":generateContent"
STREAM_GENERATE_ACTION = ":streamGenerateContent"


def is_stream_request(request: httpx.Request, config: "ClientConfig") -> bool:
    """True when the client is in streaming mode or the request asks for an event stream."""
    return config.streaming or request.headers.get("Accept") == EVENT_STREAM_MEDIA_TYPE


def intercept_request(request: httpx.Request, config: "ClientConfig") -> httpx.Request:
    """Return a copy of ``request`` rewritten for ``config``.

    The body stream and extensions (timeouts) are carried over unchanged.
    """
    path = request.url.path.replace(VERSION_PLACEHOLDER, config.version.value).replace(
        MODEL_PLACEHOLDER, config.model
    )
    headers = httpx.Headers(request.headers)
    url = request.url
    if is_stream_request(request, config):
        path = path.replace(GENERATE_ACTION, STREAM_GENERATE_ACTION)
        url = url.copy_set_param("alt", "sse")
        headers["Accept"] = EVENT_STREAM_MEDIA_TYPE
    url = url.copy_with(path=path).copy_set_param(API_KEY_PARAM, config.api_key)
    return httpx.Request(
        request.method,
        url,
        headers=headers,
        stream=request.stream,
        extensions=request.extensions,
    )


class GeminiInterceptor(httpx.Auth):
    """``httpx.Auth`` flow that sends the intercepted request instead of the original."""

    def __init__(self, config: "ClientConfig") -> None:
        self._config = config

    @property
    def config(self) -> "ClientConfig":
        return self._config

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        yield intercept_request(request, self._config)


__all__ = [
    "API_KEY_PARAM",
    "GENERATE_ACTION",
    "STREAM_GENERATE_ACTION",
    "EVENT_STREAM_MEDIA_TYPE",
    "is_stream_request",
    "intercept_request",
    "GeminiInterceptor",
]
