"""Client configuration: default resolution and validation.

``resolve_config`` is the only way a :class:`ClientConfig` is produced by the
client. It fills every optional field with its documented default, checks the
mandatory API key and the host, and returns an immutable config. Any failure
raises :class:`~gemini_rest.base.errors.ParameterError` before a client (or an
HTTP transport) is created.

Resolution rules
----------------
- ``api_key``: required; ``None`` or empty → ``ParameterError("Invalid Google token")``.
- ``api_host``: ``None``/empty → ``GEMINI_DEFAULT_HOST``; must be an absolute
  http(s) URL; a trailing ``/`` is stripped.
- ``timeout``: ``None`` → ``30``; must be positive.
- ``unit``: ``None`` → ``TimeUnit.SECONDS``; strings are coerced.
- ``version``: ``None``/empty → ``ApiVersion.V1BETA``; strings are coerced.
- ``model``: ``None``/empty → ``"gemini-pro"``; enum members are unwrapped.
- ``listener``: optional ``StreamListener`` or function receiving each
  ``ServerSentEvent`` (wrapped in a ``CallbackListener``); its presence
  switches the client to streaming mode.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

import httpx

from ..base.errors import ParameterError
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import ApiVersion, GenerativeModel
from ..base.streaming import CallbackListener, StreamListener
from ..base.timeouts import TimeUnit
from .defaults import (
    GEMINI_DEFAULT_HOST,
    GEMINI_DEFAULT_MODEL,
    GEMINI_DEFAULT_TIME_UNIT,
    GEMINI_DEFAULT_TIMEOUT,
    GEMINI_DEFAULT_VERSION,
    GEMINI_PROVIDER_NAME,
)


_logger = get_logger("config")

INVALID_TOKEN_MESSAGE = "Invalid Google token"


@dataclass(frozen=True)
class ClientConfig:
    """Resolved, immutable client configuration.

    Attributes:
        api_key: API key sent as the ``key`` query parameter.
        api_host: Base URL without a trailing slash.
        timeout: Timeout value expressed in ``unit``.
        unit: Unit of ``timeout``.
        version: API version path segment.
        model: Model name path segment.
        listener: Stream listener; ``None`` selects blocking mode.
    """

    api_key: str
    api_host: str = GEMINI_DEFAULT_HOST
    timeout: int = GEMINI_DEFAULT_TIMEOUT
    unit: TimeUnit = TimeUnit(GEMINI_DEFAULT_TIME_UNIT)
    version: ApiVersion = ApiVersion(GEMINI_DEFAULT_VERSION)
    model: str = GEMINI_DEFAULT_MODEL
    listener: Optional[StreamListener] = None

    @property
    def streaming(self) -> bool:
        """True when a listener was supplied."""
        return self.listener is not None

    @property
    def timeout_seconds(self) -> float:
        return self.unit.to_seconds(self.timeout)

    def __repr__(self) -> str:
        # Never print the key itself.
        return (
            f"ClientConfig(api_key='***', api_host={self.api_host!r}, timeout={self.timeout!r}, "
            f"unit={self.unit.value!r}, version={self.version.value!r}, model={self.model!r}, "
            f"streaming={self.streaming!r})"
        )


def _fail(message: str, *, field: str, model: Optional[str] = None) -> ParameterError:
    normalized_log_event(
        _logger,
        "config.invalid",
        LogContext(provider=GEMINI_PROVIDER_NAME, model=model),
        phase="build",
        error_code="validation",
        field=field,
        error=message,
        level=logging.ERROR,
    )
    return ParameterError(message=message, provider=GEMINI_PROVIDER_NAME, model=model)


def _resolve_listener(
    listener: Union[StreamListener, Callable[..., Any], None], *, model: Optional[str]
) -> Optional[StreamListener]:
    if listener is None or isinstance(listener, StreamListener):
        return listener
    if callable(listener):
        return CallbackListener(listener)
    raise _fail(f"Invalid listener: {type(listener).__name__}", field="listener", model=model)


def validate_host(api_host: Optional[str], default: str = GEMINI_DEFAULT_HOST) -> str:
    """Return a normalized host, falling back to ``default`` when empty.

    Raises:
        ParameterError: when the host is not an absolute http(s) URL.
    """
    host = (api_host or "").strip() or default
    try:
        url = httpx.URL(host)
    except httpx.InvalidURL:
        raise _fail(f"Invalid host: {host}", field="api_host") from None
    if url.scheme not in ("http", "https") or not url.host:
        raise _fail(f"Invalid host: {host}", field="api_host")
    return host.rstrip("/")


def resolve_config(
    api_key: Optional[str],
    *,
    api_host: Optional[str] = None,
    timeout: Optional[int] = None,
    unit: Union[TimeUnit, str, None] = None,
    version: Union[ApiVersion, str, None] = None,
    model: Union[GenerativeModel, str, None] = None,
    listener: Union[StreamListener, Callable[..., Any], None] = None,
) -> ClientConfig:
    """Resolve defaults and validate, returning an immutable :class:`ClientConfig`.

    Raises:
        ParameterError: on a missing API key, invalid host, non-positive
            timeout, unknown unit/version name, or a listener
            that is neither a ``StreamListener`` nor callable.
    """
    resolved_model = model.value if isinstance(model, GenerativeModel) else (model or GEMINI_DEFAULT_MODEL)
    if not api_key:
        raise _fail(INVALID_TOKEN_MESSAGE, field="api_key", model=resolved_model)

    host = validate_host(api_host)

    resolved_timeout = GEMINI_DEFAULT_TIMEOUT if timeout is None else timeout
    if isinstance(resolved_timeout, bool) or not isinstance(resolved_timeout, int) or resolved_timeout <= 0:
        raise _fail(f"Invalid timeout: {timeout!r}", field="timeout", model=resolved_model)

    try:
        resolved_unit = TimeUnit(unit) if unit else TimeUnit(GEMINI_DEFAULT_TIME_UNIT)
        resolved_version = ApiVersion(version) if version else ApiVersion(GEMINI_DEFAULT_VERSION)
    except ValueError as exc:
        raise _fail(str(exc), field="unit/version", model=resolved_model) from exc

    resolved_listener = _resolve_listener(listener, model=resolved_model)

    return ClientConfig(
        api_key=api_key,
        api_host=host,
        timeout=resolved_timeout,
        unit=resolved_unit,
        version=resolved_version,
        model=resolved_model,
        listener=resolved_listener,
    )


__all__ = ["ClientConfig", "INVALID_TOKEN_MESSAGE", "resolve_config", "validate_host"]
