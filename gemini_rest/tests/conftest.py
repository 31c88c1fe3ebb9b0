"""Pytest configuration for the gemini_rest test suite.

Clears ``GEMINI_*`` environment variables so the developer's shell never
leaks into a test, and provides HTTP clients backed by a recording
``httpx.MockTransport`` so tests exercise the real client, interceptor and
event-source code without touching the network.
"""

from __future__ import annotations

import json
from typing import Callable, Iterator, List

import httpx
import pytest

from gemini_rest.config.env import API_HOST_ENV, API_KEY_ENV_VARS, MODEL_ENV, TIMEOUT_ENV, VERSION_ENV
from gemini_rest.tests.utils import CHAT_PAYLOAD, RecordingTransport


@pytest.fixture(autouse=True)
def clean_gemini_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove GEMINI_* variables for the duration of each test."""

    for name in (*API_KEY_ENV_VARS, API_HOST_ENV, MODEL_ENV, VERSION_ENV, TIMEOUT_ENV):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture()
def chat_payload() -> dict:
    """A fresh deep copy of ``CHAT_PAYLOAD``."""

    return json.loads(json.dumps(CHAT_PAYLOAD))


@pytest.fixture()
def json_transport(chat_payload) -> RecordingTransport:
    """Transport answering every request with ``CHAT_PAYLOAD``."""

    return RecordingTransport(lambda request: httpx.Response(200, json=chat_payload))


@pytest.fixture()
def http_client_factory() -> Iterator[Callable[[httpx.BaseTransport], httpx.Client]]:
    """Build ``httpx.Client`` instances on a transport and close them afterwards."""

    created: List[httpx.Client] = []

    def _make(transport: httpx.BaseTransport) -> httpx.Client:
        client = httpx.Client(transport=transport, timeout=5.0)
        created.append(client)
        return client

    yield _make
    for c in created:
        c.close()
