"""Static provider → URL template table.

Templates are relative to the configured API host and may contain the
``{version}`` and ``{model}`` placeholders; the request interceptor fills them
in just before the request is sent.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

from ..errors import ErrorCode, ProviderError


class ProviderModel(str, Enum):
    """Providers with a URL table entry."""

    GOOGLE_GEMINI = "gemini"


class UrlModel(str, Enum):
    """Logical operations that resolve to a path template."""

    FETCH_CHAT_COMPLETIONS = "fetch_chat_completions"


VERSION_PLACEHOLDER = "{version}"
MODEL_PLACEHOLDER = "{model}"

_URLS: Dict[Tuple[ProviderModel, UrlModel], str] = {
    (ProviderModel.GOOGLE_GEMINI, UrlModel.FETCH_CHAT_COMPLETIONS): (
        f"{VERSION_PLACEHOLDER}/models/{MODEL_PLACEHOLDER}:generateContent"
    ),
}


def get_url(provider: ProviderModel, url: UrlModel) -> str:
    """Return the path template for ``url`` under ``provider``.

    Raises:
        ProviderError: with ``ErrorCode.NOT_FOUND`` when the pair has no entry.
    """
    try:
        return _URLS[(provider, url)]
    except KeyError:
        raise ProviderError(
            code=ErrorCode.NOT_FOUND,
            message=f"no URL template for {url.value}",
            provider=provider.value,
        ) from None


__all__ = [
    "ProviderModel",
    "UrlModel",
    "VERSION_PLACEHOLDER",
    "MODEL_PLACEHOLDER",
    "get_url",
]
