"""HTTP client construction for the Gemini client.

Purpose:
    Build the ``httpx.Client`` used for every call and wire the request
    interceptor onto it. The SDK never implements transport, TLS or pooling
    itself; everything below the interceptor belongs to ``httpx``.

Timeout strategy:
    A default client gets one bound (the resolved timeout converted to
    seconds) for the connect, read, write and pool phases. A caller-supplied
    client keeps its own timeouts.

Lifecycle:
    The facade closes a client it created; a caller-supplied client stays
    open and remains the caller's responsibility.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from ..timeouts import build_http_timeout
from .interceptor import GeminiInterceptor

if TYPE_CHECKING:
    from ...config.settings import ClientConfig


def build_default_client(config: "ClientConfig") -> httpx.Client:
    """Return a new ``httpx.Client`` using the timeout from ``config``."""
    return httpx.Client(timeout=build_http_timeout(config.timeout, config.unit))


def install_interceptor(client: httpx.Client, config: "ClientConfig") -> httpx.Client:
    """Attach a :class:`GeminiInterceptor` for ``config`` to ``client``.

    The interceptor replaces any auth previously configured on the client.
    Returns the same client for chaining.
    """
    client.auth = GeminiInterceptor(config)
    return client


__all__ = ["build_default_client", "install_interceptor"]
