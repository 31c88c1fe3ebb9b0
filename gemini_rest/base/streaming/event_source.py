"""Event sources: one background stream per registered request.

Purpose:
    Hand a prepared ``httpx.Request`` to a background thread that sends it,
    decodes the ``text/event-stream`` body with ``httpx-sse`` and pushes each
    event to a :class:`StreamListener`. Registration returns immediately.

External dependencies:
    - ``httpx`` sends the request (``stream=True``) on the shared client, so
      the client's interceptor and timeouts apply.
    - ``httpx-sse`` owns the SSE wire format.

Cancellation:
    ``EventSource.cancel()`` or closing the listener stops delivery after the
    current event; the listener then receives ``on_closed``. Closing the
    shared ``httpx.Client`` also ends every stream (reported as a failure).

Failure semantics:
    Any exception raised while sending, reading or decoding (non-2xx status,
    wrong content type, transport error, or an exception from a listener
    hook) is reported once through ``on_failure`` and kept on
    ``EventSource.error``.
"""
from __future__ import annotations

import itertools
import logging
import threading
from typing import Optional

import httpx
from httpx_sse import EventSource as SSEDecoder, SSEError

from ..constants import EVENT_STREAM_MEDIA_TYPE
from ..errors import classify_exception
from ..logging import LogContext, get_logger, normalized_log_event
from .listener import StreamListener

_logger = get_logger("streaming")
_thread_ids = itertools.count(1)


class EventSource:
    """A single streamed request bound to a listener.

    Instances are created by :meth:`EventSourceFactory.new_event_source`;
    the stream starts as soon as the instance is returned.
    """

    def __init__(
        self,
        client: httpx.Client,
        request: httpx.Request,
        listener: StreamListener,
        *,
        ctx: Optional[LogContext] = None,
    ) -> None:
        self._client = client
        self._request = request
        self._listener = listener
        self._ctx = ctx
        self._cancel = threading.Event()
        self._response: Optional[httpx.Response] = None
        self._events = 0
        self._error: Optional[BaseException] = None
        self._thread = threading.Thread(
            target=self._run,
            name=f"gemini-sse-{next(_thread_ids)}",
            daemon=True,
        )

    @property
    def request(self) -> httpx.Request:
        return self._request

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set() or self._listener.closed

    @property
    def events_received(self) -> int:
        return self._events

    @property
    def error(self) -> Optional[BaseException]:
        """The failure that ended the stream, or ``None``.

        Set before ``on_failure`` is called and readable after :meth:`join`.
        """
        return self._error

    def start(self) -> "EventSource":
        self._thread.start()
        return self

    def cancel(self) -> None:
        """Stop the stream; the listener receives ``on_closed``."""
        self._cancel.set()
        response = self._response
        if response is not None:
            response.close()

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for the stream thread; return True when it has finished."""
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def _run(self) -> None:
        failure: Optional[BaseException] = None
        try:
            self._response = self._client.send(self._request, stream=True)
            # cancel() may have run before the response existed.
            if not self.cancelled:
                self._stream(self._response)
        except Exception as exc:
            # Reads interrupted by cancel() surface as transport errors.
            if not self.cancelled:
                failure = exc
        finally:
            if self._response is not None:
                self._response.close()

        if failure is not None:
            self._error = failure
            normalized_log_event(
                _logger,
                "stream.error",
                self._ctx,
                phase="finalize",
                error_code=classify_exception(failure).value,
                emitted=self._events > 0,
                error_type=type(failure).__name__,
                level=logging.ERROR,
            )
            self._listener.on_failure(self, failure, self._response)
            return
        normalized_log_event(
            _logger,
            "stream.closed",
            self._ctx,
            phase="finalize",
            emitted=self._events > 0,
            events=self._events,
            cancelled=self.cancelled,
        )
        self._listener.on_closed(self)

    def _stream(self, response: httpx.Response) -> None:
        if response.is_error:
            response.read()
            response.raise_for_status()
        content_type = response.headers.get("content-type", "")
        if EVENT_STREAM_MEDIA_TYPE not in content_type:
            raise SSEError(
                f"Expected response header Content-Type to contain {EVENT_STREAM_MEDIA_TYPE!r}, got {content_type!r}"
            )
        normalized_log_event(
            _logger,
            "stream.open",
            self._ctx,
            phase="open",
            status=response.status_code,
        )
        self._listener.on_open(self, response)
        for sse in SSEDecoder(response).iter_sse():
            if self.cancelled:
                break
            self._events += 1
            self._listener.on_event(self, sse.id or None, sse.event, sse.data)
            if self.cancelled:
                break


class EventSourceFactory:
    """Creates event sources that stream over a shared ``httpx.Client``."""

    def __init__(self, client: httpx.Client, *, ctx: Optional[LogContext] = None) -> None:
        self._client = client
        self._ctx = ctx

    def new_event_source(self, request: httpx.Request, listener: StreamListener) -> EventSource:
        """Start streaming ``request`` to ``listener`` and return immediately."""
        return EventSource(self._client, request, listener, ctx=self._ctx).start()


__all__ = ["EventSource", "EventSourceFactory"]
