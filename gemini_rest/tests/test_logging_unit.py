"""Unit coverage for structured logging utilities and helpers."""

from __future__ import annotations

import io
import json
import logging

import httpx
import pytest

from gemini_rest import ChatRequest, GeminiClient
from gemini_rest.base.log_support import JsonFormatter
from gemini_rest.base.logging import (
    REQUIRED_NORMALIZED_KEYS,
    LogContext,
    _parse_level,  # type: ignore[attr-defined]
    configure_logger,
    get_logger,
    normalized_log_event,
)
from gemini_rest.base.errors import ParameterError


class _ListHandler(logging.Handler):
    """Capture log records into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: list = []
        self.levels: list = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())
        self.levels.append(record.levelno)


@pytest.fixture()
def base_handler():
    """Swap the shared handler for a list collector and restore it afterwards."""
    base_logger = get_logger()
    saved_handlers, saved_level = base_logger.handlers[:], base_logger.level
    handler = _ListHandler()
    base_logger.handlers[:] = [handler]
    base_logger.setLevel(logging.DEBUG)
    yield handler
    base_logger.handlers[:] = saved_handlers
    base_logger.setLevel(saved_level)


def test_parse_level_variants():
    assert _parse_level(None) == logging.INFO
    assert _parse_level("debug") == logging.DEBUG
    assert _parse_level("WARN") == logging.WARNING
    assert _parse_level("unknown", default=logging.ERROR) == logging.ERROR


def test_get_logger_env_overrides_level(monkeypatch, capsys):
    monkeypatch.setenv("GEMINI_REST_LOG_LEVEL", "ERROR")
    logger = get_logger(name="test.env", json_mode=True, level=logging.DEBUG)
    logger.info("hello")
    assert capsys.readouterr().err == ""
    logger.error("fail")
    data = json.loads(capsys.readouterr().err.strip())
    assert data["level"] == "ERROR"
    assert data["logger"] == "gemini_rest.test.env"
    monkeypatch.delenv("GEMINI_REST_LOG_LEVEL")
    get_logger()


def test_normalized_log_event_includes_required_keys(base_handler):
    logger = get_logger("test.normalized")
    ctx = LogContext(provider="gemini", model="gemini-pro", version="v1beta")
    normalized_log_event(
        logger,
        "chat.end",
        ctx,
        phase="finalize",
        attempt=None,
        error_code=None,
        emitted=True,
        latency_ms=12.5,
    )
    payload = json.loads(base_handler.messages[-1])
    for k in REQUIRED_NORMALIZED_KEYS:
        if k != "error_code":
            assert k in payload
    assert "error_code" not in payload
    assert payload["event"] == "chat.end"
    assert payload["provider"] == "gemini"
    assert payload["version"] == "v1beta"
    assert payload["latency_ms"] == 12.5


def test_normalized_log_event_drops_none_extras(base_handler):
    logger = get_logger("test.normalized2")
    normalized_log_event(logger, "stream.error", None, phase="finalize", error_code="auth", emitted=False, status=None)
    payload = json.loads(base_handler.messages[-1])
    assert payload["error_code"] == "auth"
    assert payload["emitted"] is False
    assert payload["attempt"] is None
    assert "status" not in payload


def test_json_formatter_hoists_json_message() -> None:
    formatter = JsonFormatter()
    record = logging.LogRecord(
        name="gemini_rest.test.json",
        level=logging.INFO,
        pathname=__file__,
        lineno=0,
        msg=json.dumps({"provider": "gemini", "event": "chat.start"}),
        args=(),
        exc_info=None,
    )
    payload = json.loads(formatter.format(record))
    assert payload["provider"] == "gemini"
    assert payload["event"] == "chat.start"
    assert payload["level"] == "INFO"


def test_child_logger_uses_parent_handler_without_duplicates() -> None:
    logger = get_logger(name="test.child", json_mode=False)
    base_logger = logging.getLogger("gemini_rest")
    saved = base_logger.handlers[:]
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    base_logger.handlers[:] = [handler]
    try:
        logger.info("alpha")
        handler.flush()
        lines = [ln for ln in stream.getvalue().splitlines() if ln]
        assert lines == ["alpha"]
    finally:
        base_logger.handlers[:] = saved


def test_configure_logger_level_and_file(tmp_path, base_handler) -> None:
    log_file = tmp_path / "logs" / "gemini.log"
    child = get_logger("test.file")
    logger = configure_logger(level="WARNING", file_path=str(log_file))
    try:
        child.info("hidden")
        child.warning("visible")
        for h in logger.handlers:
            h.flush()
        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["msg"] == "visible"
    finally:
        configure_logger(level=logging.INFO, file_path=None)
    assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)


def test_invalid_config_is_logged_without_the_key(base_handler) -> None:
    with pytest.raises(ParameterError):
        GeminiClient(api_key="secret-key", api_host="ftp://nowhere")
    payload = json.loads(base_handler.messages[-1])
    assert payload["event"] == "config.invalid"
    assert payload["error_code"] == "validation"
    assert "secret-key" not in base_handler.messages[-1]


def _levels_by_event(handler: _ListHandler) -> dict:
    return {json.loads(m)["event"]: lvl for m, lvl in zip(handler.messages, handler.levels)}


def test_failed_calls_are_logged_at_error_level(base_handler) -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(500, json={"error": {"code": 500}}))
    with httpx.Client(transport=transport) as http_client:
        client = GeminiClient(api_key="k", client=http_client)
        with pytest.raises(httpx.HTTPStatusError):
            client.create_chat_completions(ChatRequest.from_text("Hi"))
        source = client.stream_chat_completions(ChatRequest.from_text("Hi"), lambda event: None)
        assert source.join(5.0)

    levels = _levels_by_event(base_handler)
    assert levels["chat.start"] == logging.INFO
    assert levels["chat.error"] == logging.ERROR
    assert levels["stream.error"] == logging.ERROR
    payload = next(json.loads(m) for m in base_handler.messages if '"chat.error"' in m)
    assert payload["error_code"] == "server_error"
