"""GeminiClient facade.

Builds the client once (configuration defaults, validation, HTTP transport
and interceptor) and exposes chat completions in two modes:

- blocking: ``create_chat_completions`` returns a parsed ``ChatResponse``;
- streaming: when a listener was given at construction time the same call
  registers an event source and returns ``None`` immediately, with events
  pushed to the listener on a background thread.

``stream_chat_completions`` streams to a sink supplied per call.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Optional, Union

import httpx

from ..base.constants import EVENT_SOURCE_ERROR_PREFIX, EVENT_STREAM_MEDIA_TYPE, JSON_MEDIA_TYPE
from ..base.errors import RequestError, classify_exception
from ..base.http import build_default_client, install_interceptor
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import ApiVersion, ChatResponse, GenerativeModel
from ..base.routing import ProviderModel, UrlModel, get_url
from ..base.serialization import RequestBody, dumps
from ..base.streaming import CallbackListener, EventSource, EventSourceFactory, StreamListener
from ..base.timeouts import TimeUnit
from ..config import ClientConfig, is_placeholder, read_env_settings, resolve_config
from .api import GeminiApi

Sink = Union[StreamListener, Callable[..., Any]]


class GeminiClient:
    """Client for the Gemini ``generateContent`` endpoints.

    Args:
        api_key: Required API key; empty or ``None`` raises ``ParameterError``.
        api_host: Base URL (default ``https://generativelanguage.googleapis.com``).
        timeout: Timeout value (default ``30``) in ``unit``.
        unit: :class:`TimeUnit` (default seconds).
        version: :class:`ApiVersion` (default ``v1beta``).
        model: Model name or :class:`GenerativeModel` (default ``gemini-pro``).
        listener: A :class:`StreamListener` or a function receiving each
            ``ServerSentEvent``; when given, ``create_chat_completions`` streams
            to it.
        client: Optional ``httpx.Client``; when omitted one is built from the
            resolved timeout and closed by :meth:`close`.

    The interceptor is installed on the HTTP client during construction, so
    a caller-supplied client has its ``auth`` replaced.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        api_host: Optional[str] = None,
        timeout: Optional[int] = None,
        unit: Union[TimeUnit, str, None] = None,
        version: Union[ApiVersion, str, None] = None,
        model: Union[GenerativeModel, str, None] = None,
        listener: Optional[Sink] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._config = resolve_config(
            api_key,
            api_host=api_host,
            timeout=timeout,
            unit=unit,
            version=version,
            model=model,
            listener=listener,
        )
        self._provider = ProviderModel.GOOGLE_GEMINI
        self._logger = get_logger("gemini")
        self._ctx = LogContext(
            provider=self._provider.value,
            model=self._config.model,
            version=self._config.version.value,
        )
        self._owns_client = client is None
        if client is None:
            normalized_log_event(
                self._logger,
                "client.default_http_client",
                self._ctx,
                phase="build",
                timeout_seconds=self._config.timeout_seconds,
                level=logging.DEBUG,
            )
            client = build_default_client(self._config)
        self._client = install_interceptor(client, self._config)
        self._api = GeminiApi(self._client, self._config.api_host)
        self._event_sources = EventSourceFactory(self._client, ctx=self._ctx)

    @classmethod
    def from_env(cls, **overrides: Any) -> "GeminiClient":
        """Build a client from ``GEMINI_*`` environment variables.

        Keyword arguments override the environment; ``None`` overrides are
        ignored. See :mod:`gemini_rest.config.env` for the variable names.
        """
        settings = read_env_settings()
        settings.update({k: v for k, v in overrides.items() if v is not None})
        if is_placeholder(settings.get("api_key")):
            normalized_log_event(
                get_logger("gemini"),
                "config.placeholder_key",
                LogContext(provider=ProviderModel.GOOGLE_GEMINI.value),
                phase="build",
                level=logging.WARNING,
            )
        return cls(**settings)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def http_client(self) -> httpx.Client:
        return self._client

    def create_chat_completions(self, request: RequestBody) -> Optional[ChatResponse]:
        """Create a chat completion.

        Without a listener this blocks until the HTTP exchange completes and
        returns the parsed response; transport, status and parsing errors
        propagate unchanged. With a listener it registers an event source and
        returns ``None``.

        Raises:
            RequestError: when the streaming request cannot be prepared
                or the listener has been closed.
        """
        path = get_url(self._provider, UrlModel.FETCH_CHAT_COMPLETIONS)
        if self._config.listener is not None:
            self._create_event_source(path, request, self._config.listener)
            return None
        return self._fetch(path, request)

    def stream_chat_completions(self, request: RequestBody, sink: Sink) -> EventSource:
        """Stream a chat completion to ``sink`` and return the running event source.

        ``sink`` is a :class:`StreamListener` or a function receiving each
        ``ServerSentEvent``. Close the listener (or cancel the returned source)
        to stop the stream. A failure is passed to the listener's ``on_failure`` and kept on the
        returned source's ``error`` once :meth:`EventSource.join` returns.

        Raises:
            RequestError: when the streaming request cannot be prepared
                or the listener has been closed.
        """
        listener = sink if isinstance(sink, StreamListener) else CallbackListener(sink)
        path = get_url(self._provider, UrlModel.FETCH_CHAT_COMPLETIONS)
        return self._create_event_source(path, request, listener)

    def _fetch(self, path: str, request: RequestBody) -> ChatResponse:
        normalized_log_event(self._logger, "chat.start", self._ctx, phase="start")
        t0 = time.perf_counter()
        try:
            response = self._api.fetch_chat_completions(path, request)
        except Exception as e:
            normalized_log_event(
                self._logger,
                "chat.error",
                self._ctx,
                phase="finalize",
                error_code=classify_exception(e).value,
                error_type=type(e).__name__,
                level=logging.ERROR,
            )
            raise
        normalized_log_event(
            self._logger,
            "chat.end",
            self._ctx,
            phase="finalize",
            emitted=bool(response.candidates),
            latency_ms=(time.perf_counter() - t0) * 1000.0,
        )
        return response

    def _create_event_source(self, path: str, body: RequestBody, listener: StreamListener) -> EventSource:
        if listener.closed:
            raise RequestError(
                message=f"{EVENT_SOURCE_ERROR_PREFIX}: listener is closed",
                provider=self._provider.value,
                model=self._config.model,
            )
        try:
            http_request = self._client.build_request(
                "POST",
                self._api.url_for(path),
                content=dumps(body).encode("utf-8"),
                headers={"Content-Type": JSON_MEDIA_TYPE, "Accept": EVENT_STREAM_MEDIA_TYPE},
            )
            source = self._event_sources.new_event_source(http_request, listener)
        except Exception as e:
            raise RequestError(
                message=f"{EVENT_SOURCE_ERROR_PREFIX}: {e}",
                provider=self._provider.value,
                model=self._config.model,
                raw=e,
            ) from e
        normalized_log_event(self._logger, "stream.register", self._ctx, phase="start")
        return source

    def close(self) -> None:
        """Close the HTTP client when this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "GeminiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"GeminiClient({self._config!r})"


__all__ = ["GeminiClient", "Sink"]
