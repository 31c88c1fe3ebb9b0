from __future__ import annotations

import types

import httpx

from gemini_rest.base.errors import (
    ErrorCode,
    ParameterError,
    ProviderError,
    RequestError,
    classify_exception,
)


def test_classify_provider_error_passthrough():
    e = ProviderError(code=ErrorCode.AUTH, message="nope", provider="x")
    assert classify_exception(e) is ErrorCode.AUTH
    assert classify_exception(ParameterError(message="bad")) is ErrorCode.VALIDATION
    assert classify_exception(RequestError(message="bad")) is ErrorCode.INTERNAL


def test_classify_http_status_mapping():
    # Direct attr
    e1 = types.SimpleNamespace(status_code=404)
    assert classify_exception(e1) is ErrorCode.NOT_FOUND
    # response.status_code
    e2 = types.SimpleNamespace(response=types.SimpleNamespace(status_code=503))
    assert classify_exception(e2) is ErrorCode.UNAVAILABLE


def test_classify_httpx_status_error():
    request = httpx.Request("POST", "https://gemini.example.com/v1beta/models/gemini-pro:generateContent")
    response = httpx.Response(429, request=request)
    err = httpx.HTTPStatusError("Too Many Requests", request=request, response=response)
    assert classify_exception(err) is ErrorCode.RATE_LIMIT


def test_classify_httpx_transport_failures():
    request = httpx.Request("GET", "https://gemini.example.com")
    assert classify_exception(httpx.ReadTimeout("slow", request=request)) is ErrorCode.TIMEOUT
    assert classify_exception(httpx.ConnectError("refused", request=request)) is ErrorCode.TRANSIENT
    assert classify_exception(httpx.RemoteProtocolError("peer closed")) is ErrorCode.TRANSIENT


def test_classify_heuristics():
    assert classify_exception(Exception("rate limit exceeded")) is ErrorCode.RATE_LIMIT
    assert classify_exception(Exception("timed out waiting")) is ErrorCode.TIMEOUT
    assert classify_exception(Exception("malformed payload")) is ErrorCode.VALIDATION
    assert classify_exception(Exception("random")) is ErrorCode.UNKNOWN


def test_provider_error_str_is_compact():
    e = ParameterError(message="Invalid Google token", model="gemini-pro")
    assert str(e) == "gemini:gemini-pro validation: Invalid Google token"
