"""Unit coverage for structured logging utilities and decode error events."""

from __future__ import annotations

import json
import logging

import pytest

from genai_content import Content, InvalidBlobError, InvalidPartError, contents_from_json
from genai_content.base.log_support import JsonFormatter
from genai_content.base.logging import LogContext, get_logger, log_event


def _last_json_line(err: str) -> dict:
    lines = [line for line in err.strip().splitlines() if line.strip()]
    return json.loads(lines[-1])


def test_get_logger_nests_under_base_name():
    assert get_logger("decoder").name == "genai_content.decoder"  # nosec B101
    assert get_logger("genai_content.x").name == "genai_content.x"  # nosec B101


def test_log_event_emits_json_and_drops_none(capsys):
    logger = get_logger("genai_content.test")
    ctx = LogContext(component="part", operation="from_json", extra={"turn": None, "k": 1})
    log_event(logger, "content.test", ctx, value=3, missing=None)
    data = _last_json_line(capsys.readouterr().err)
    assert data["event"] == "content.test"  # nosec B101
    assert data["component"] == "part"  # nosec B101
    assert data["k"] == 1  # nosec B101
    assert data["value"] == 3  # nosec B101
    assert "missing" not in data and "turn" not in data  # nosec B101


def test_env_level_suppresses_lower_events(monkeypatch, capsys):
    monkeypatch.setenv("GENAI_CONTENT_LOG_LEVEL", "ERROR")
    logger = get_logger("genai_content.quiet")
    log_event(logger, "content.info")
    assert capsys.readouterr().err == ""  # nosec B101
    log_event(logger, "content.error", level=logging.ERROR)
    data = _last_json_line(capsys.readouterr().err)
    assert data["level"] == "ERROR"  # nosec B101


def test_plain_mode_is_not_json(monkeypatch, capsys):
    monkeypatch.setenv("GENAI_CONTENT_LOG_JSON", "0")
    get_logger("genai_content.plain").info("hello plain")
    err = capsys.readouterr().err
    assert "hello plain" in err  # nosec B101
    assert not err.lstrip().startswith("{")  # nosec B101


def test_decode_failure_emits_warning_event(capsys):
    with pytest.raises(InvalidPartError):
        Content.from_json({"parts": [{"text": "ok"}, {}]})
    data = _last_json_line(capsys.readouterr().err)
    assert data["event"] == "content.decode.error"  # nosec B101
    assert data["level"] == "WARNING"  # nosec B101
    assert data["error_code"] == "invalid_part"  # nosec B101
    assert data["index"] == 1  # nosec B101


def test_lenient_blob_emits_event(lenient_blobs, capsys):
    Content.from_json({"parts": [{"inlineData": {"mimeType": "text/plain"}}]})
    data = _last_json_line(capsys.readouterr().err)
    assert data["event"] == "content.decode.lenient"  # nosec B101
    assert data["missing"] == ["data"]  # nosec B101


def test_json_formatter_hoists_json_message() -> None:
    formatter = JsonFormatter()
    record = logging.LogRecord(
        name="genai_content.test.json",
        level=logging.INFO,
        pathname=__file__,
        lineno=0,
        msg=json.dumps({"component": "blob", "event": "content.decode.error"}),
        args=(),
        exc_info=None,
    )
    payload = json.loads(formatter.format(record))
    assert payload["component"] == "blob"  # nosec B101
    assert payload["logger"] == "genai_content.test.json"  # nosec B101
    assert "msg" not in payload  # nosec B101


def test_history_decode_error_event_carries_turn_and_index(capsys):
    with pytest.raises(InvalidPartError):
        contents_from_json([{"parts": "a"}, {"parts": [{"text": "b"}, {}]}])
    lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
    assert len(lines) == 1  # nosec B101 - logged once, at the outermost decoder
    data = json.loads(lines[0])
    assert data["component"] == "conversation"  # nosec B101
    assert data["turn"] == 1  # nosec B101
    assert data["index"] == 1  # nosec B101


def test_blob_error_inside_part_event_carries_part_index(capsys):
    with pytest.raises(InvalidBlobError):
        Content.from_json({"parts": [{"text": "a"}, {"inlineData": {"data": "x"}}]})
    lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
    assert len(lines) == 1  # nosec B101
    data = json.loads(lines[0])
    assert data["error_code"] == "invalid_blob"  # nosec B101
    assert data["field"] == "mimeType"  # nosec B101
    assert data["index"] == 1  # nosec B101
