"""Single JSON serializer shared by the blocking and streaming paths.

Outbound bodies are dumped with camelCase aliases and ``None`` fields
omitted; inbound payloads are parsed with unknown keys ignored (configured on
:class:`~gemini_rest.base.models_parts.WireModel`). Both paths of the client
go through these helpers so a request looks identical on the wire whichever
mode sends it.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Type, TypeVar, Union

from pydantic import BaseModel

M = TypeVar("M", bound=BaseModel)

RequestBody = Union[BaseModel, Mapping[str, Any]]


def to_payload(body: RequestBody) -> Dict[str, Any]:
    """Return the JSON-compatible dict sent as the request body.

    Pydantic models are dumped by alias without ``None`` fields; mappings are
    forwarded verbatim (a shallow copy).

    Raises:
        TypeError: when ``body`` is neither a model nor a mapping.
    """
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(body, Mapping):
        return dict(body)
    raise TypeError(f"unsupported request body type: {type(body).__name__}")


def dumps(body: RequestBody) -> str:
    """Serialize ``body`` to a compact JSON string.

    Raises:
        TypeError: for unsupported body types or non-JSON values in a mapping.
        ValueError: for circular references or out-of-range floats.
    """
    return json.dumps(to_payload(body), ensure_ascii=False, separators=(",", ":"), allow_nan=False)


def parse(model: Type[M], data: Union[str, bytes, Mapping[str, Any]]) -> M:
    """Parse ``data`` (JSON text or decoded mapping) into ``model``.

    Raises:
        pydantic.ValidationError: when a documented field has the wrong shape.
    """
    if isinstance(data, (str, bytes)):
        return model.model_validate_json(data)
    return model.model_validate(data)


__all__ = ["RequestBody", "to_payload", "dumps", "parse"]
