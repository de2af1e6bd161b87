"""Unit tests for structured JSON logging"""

import json
import logging
import sys

from observability.logging_config import JSONFormatter, RequestIDFilter
from observability.request_id import get_request_id, request_id_var, set_request_id


def make_record(message: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="domain.validation.engine",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_request_id_defaults_when_unset():
    token = request_id_var.set(None)
    try:
        assert get_request_id() == "no-request-id"
    finally:
        request_id_var.reset(token)


def test_filter_attaches_current_request_id():
    token = request_id_var.set(None)
    try:
        set_request_id("req-123")
        record = make_record("hello")

        assert RequestIDFilter().filter(record) is True
        assert record.request_id == "req-123"
    finally:
        request_id_var.reset(token)


def test_json_formatter_output():
    record = make_record("Validation completed", request_id="req-9", quote_id="q-1")

    data = json.loads(JSONFormatter().format(record))

    assert data["level"] == "INFO"
    assert data["message"] == "Validation completed"
    assert data["request_id"] == "req-9"
    assert data["quote_id"] == "q-1"
    assert data["logger"] == "domain.validation.engine"
    assert "error" not in data


def test_json_formatter_includes_exception():
    try:
        raise LookupError("missing store")
    except LookupError:
        record = make_record("failed")
        record.exc_info = sys.exc_info()

    data = json.loads(JSONFormatter().format(record))

    assert data["error"] == "missing store"
    assert "LookupError" in data["traceback"]
