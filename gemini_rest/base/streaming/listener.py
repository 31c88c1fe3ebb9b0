"""Listeners receiving server-sent events from an :class:`EventSource`.

Hooks run on the event-source thread, never on the caller's thread. For one
event source the order is always ``on_open``, zero or more ``on_event``, then
exactly one of ``on_closed`` or ``on_failure`` (``on_open`` is skipped when
the response is not a 2xx ``text/event-stream`` reply, or the source was
cancelled before it arrived).

Closing a listener (``close()``) is the cancellation primitive: the event
source stops after the event being delivered and reports ``on_closed``.
"""
from __future__ import annotations

import queue
import threading
from typing import TYPE_CHECKING, Any, Callable, Iterator, Optional, Union

import httpx
from httpx_sse import ServerSentEvent

if TYPE_CHECKING:
    from .event_source import EventSource


class StreamListener:
    """Base listener with no-op hooks.

    Subclass and override the hooks you need. Each hook receives the
    :class:`EventSource` that produced it so a listener can cancel early.
    """

    def __init__(self) -> None:
        self._closed = threading.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def close(self) -> None:
        """Ask every event source feeding this listener to stop."""
        self._closed.set()

    def on_open(self, source: "EventSource", response: httpx.Response) -> None:
        """Called once the server accepted the stream (2xx, event-stream body)."""

    def on_event(
        self,
        source: "EventSource",
        event_id: Optional[str],
        event_type: str,
        data: str,
    ) -> None:
        """Called for each server-sent event, in arrival order."""

    def on_closed(self, source: "EventSource") -> None:
        """Called once when the stream ends normally or is cancelled."""

    def on_failure(
        self,
        source: "EventSource",
        error: BaseException,
        response: Optional[httpx.Response],
    ) -> None:
        """Called once when the stream fails; ``response`` is set if one arrived."""


class CallbackListener(StreamListener):
    """Listener forwarding each event to a plain function.

    Failures are forwarded to ``on_error`` when given. Either way the failure
    is logged and kept on ``EventSource.error``, readable after ``join()``.
    """

    def __init__(
        self,
        on_event: Callable[[ServerSentEvent], Any],
        on_error: Optional[Callable[[BaseException], Any]] = None,
    ) -> None:
        super().__init__()
        self._callback = on_event
        self._on_error = on_error

    def on_event(self, source, event_id, event_type, data):  # noqa: D401 - hook override
        self._callback(ServerSentEvent(event=event_type, data=data, id=event_id or ""))

    def on_failure(self, source, error, response):
        if self._on_error is not None:
            self._on_error(error)


class _StreamEnd:
    """Sentinel marking the end of a queued stream."""

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return "STREAM_END"


STREAM_END = _StreamEnd()

QueueItem = Union[ServerSentEvent, BaseException, _StreamEnd]


class QueueListener(StreamListener):
    """Listener pushing events into a ``queue.Queue`` (a channel).

    Each event is queued as a :class:`ServerSentEvent`; a failure queues the
    exception; the stream always finishes with :data:`STREAM_END`. Consume
    with :meth:`iter_events` or read ``queue`` directly.
    """

    def __init__(self, maxsize: int = 0) -> None:
        super().__init__()
        self.queue: "queue.Queue[QueueItem]" = queue.Queue(maxsize=maxsize)

    def on_event(self, source, event_id, event_type, data):
        self.queue.put(ServerSentEvent(event=event_type, data=data, id=event_id or ""))

    def on_closed(self, source):
        self.queue.put(STREAM_END)

    def on_failure(self, source, error, response):
        self.queue.put(error)
        self.queue.put(STREAM_END)

    def iter_events(self, timeout: Optional[float] = None) -> Iterator[ServerSentEvent]:
        """Yield queued events until the stream ends.

        Raises:
            queue.Empty: when no item arrives within ``timeout`` seconds.
            BaseException: the stream failure, re-raised on the consumer side.
        """
        while True:
            item = self.queue.get(timeout=timeout)
            if item is STREAM_END:
                return
            if isinstance(item, BaseException):
                raise item
            yield item


__all__ = [
    "StreamListener",
    "CallbackListener",
    "QueueListener",
    "STREAM_END",
]
