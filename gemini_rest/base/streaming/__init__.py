"""Streaming package: event sources and the listeners they feed.

Exposes the server-sent-events plumbing under a single namespace.
"""

from httpx_sse import ServerSentEvent

from .event_source import EventSource, EventSourceFactory
from .listener import STREAM_END, CallbackListener, QueueListener, StreamListener

__all__ = [
    "EventSource",
    "EventSourceFactory",
    "StreamListener",
    "CallbackListener",
    "QueueListener",
    "STREAM_END",
    "ServerSentEvent",
]
