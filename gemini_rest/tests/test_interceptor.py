"""Unit tests for outgoing request interception.

The interceptor must place the API key, version and model in the expected
positions for every configuration, and switch the action to the streaming
variant when a listener is configured or the request accepts an event stream.
"""
from __future__ import annotations

import httpx
import pytest

from gemini_rest import ApiVersion, StreamListener, resolve_config
from gemini_rest.base.http import GeminiInterceptor, build_default_client, install_interceptor, intercept_request
from gemini_rest.base.routing import ProviderModel, UrlModel, get_url
from gemini_rest.tests.utils import RecordingTransport

HOST = "https://generativelanguage.googleapis.com"


def _template_request(**kwargs) -> httpx.Request:
    path = get_url(ProviderModel.GOOGLE_GEMINI, UrlModel.FETCH_CHAT_COMPLETIONS)
    return httpx.Request("POST", f"{HOST}/{path}", content=b"{}", **kwargs)


@pytest.mark.parametrize("version", list(ApiVersion))
@pytest.mark.parametrize("model", ["gemini-pro", "gemini-pro-vision", "gemini-1.5-flash"])
def test_blocking_request_carries_key_version_and_model(version, model):
    config = resolve_config("abc123", version=version, model=model)
    out = intercept_request(_template_request(), config)

    assert out.url.path == f"/{version.value}/models/{model}:generateContent"
    assert out.url.params["key"] == "abc123"
    assert "alt" not in out.url.params
    assert out.url.host == "generativelanguage.googleapis.com"
    assert out.method == "POST"


@pytest.mark.parametrize("version", list(ApiVersion))
def test_streaming_config_marks_request_for_sse(version):
    config = resolve_config("abc123", version=version, listener=StreamListener())
    out = intercept_request(_template_request(), config)

    assert out.url.path == f"/{version.value}/models/gemini-pro:streamGenerateContent"
    assert out.url.params["alt"] == "sse"
    assert out.url.params["key"] == "abc123"
    assert out.headers["Accept"] == "text/event-stream"


def test_event_stream_accept_header_marks_request_without_listener():
    config = resolve_config("abc123")
    out = intercept_request(_template_request(headers={"Accept": "text/event-stream"}), config)
    assert out.url.path.endswith(":streamGenerateContent")
    assert out.url.params["alt"] == "sse"


def test_interception_preserves_body_headers_and_original():
    config = resolve_config("abc123")
    original = _template_request(headers={"X-Trace": "t1", "Content-Type": "application/json"})
    out = intercept_request(original, config)

    assert out is not original
    assert out.read() == b"{}"
    assert out.headers["X-Trace"] == "t1"
    assert original.url.path == "/{version}/models/{model}:generateContent"
    assert "key" not in original.url.params


def test_existing_key_param_is_replaced_not_duplicated():
    config = resolve_config("abc123")
    request = httpx.Request("POST", f"{HOST}/v1beta/models/gemini-pro:generateContent?key=stale")
    out = intercept_request(request, config)
    assert out.url.params.get_list("key") == ["abc123"]


def test_interceptor_applies_to_every_request_sent_by_the_client():
    transport = RecordingTransport(lambda request: httpx.Response(200, json={}))
    config = resolve_config("abc123", model="gemini-pro-vision")
    with httpx.Client(transport=transport) as client:
        install_interceptor(client, config)
        client.post(f"{HOST}/{{version}}/models/{{model}}:generateContent", json={})
        client.get(f"{HOST}/v1beta/models")

    assert len(transport.requests) == 2
    first, second = transport.requests
    assert first.url.path == "/v1beta/models/gemini-pro-vision:generateContent"
    assert all(r.url.params["key"] == "abc123" for r in transport.requests)
    assert second.url.path == "/v1beta/models"


def test_default_client_uses_resolved_timeout():
    config = resolve_config("abc123", timeout=2, unit="minutes")
    client = install_interceptor(build_default_client(config), config)
    try:
        assert client.timeout == httpx.Timeout(120.0)
        assert isinstance(client.auth, GeminiInterceptor)
        assert client.auth.config is config
    finally:
        client.close()
