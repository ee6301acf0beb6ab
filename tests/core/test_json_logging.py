from __future__ import annotations

import json
import logging
import sys

from app.core.logging import JsonFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="app.symptom_analysis",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Symptom analysis returned",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_handles_records_without_extra_fields() -> None:
    payload = json.loads(JsonFormatter().format(_record()))
    assert payload["message"] == "Symptom analysis returned"
    assert payload["logger"] == "app.symptom_analysis"
    assert payload["level"] == "INFO"
    assert payload["request_id"] is None
    assert payload["variant"] is None
    assert "exception" not in payload


def test_formatter_includes_analysis_fields() -> None:
    record = _record(request_id="req_1", mode="live", variant="fallback", error_kind="unexpected")
    payload = json.loads(JsonFormatter().format(record))
    assert payload["request_id"] == "req_1"
    assert payload["mode"] == "live"
    assert payload["variant"] == "fallback"
    assert payload["error_kind"] == "unexpected"


def test_formatter_maps_http_fields() -> None:
    record = _record(http_method="POST", request_path="/api/analyze-symptoms", status_code=200)
    payload = json.loads(JsonFormatter().format(record))
    assert payload["method"] == "POST"
    assert payload["path"] == "/api/analyze-symptoms"
    assert payload["status_code"] == 200


def test_formatter_includes_exception() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record()
        record.exc_info = sys.exc_info()

    payload = json.loads(JsonFormatter().format(record))
    assert "RuntimeError: boom" in payload["exception"]
