"""Structured Logging — JSON formatter output and setup idempotence."""

import json
import logging

from catalog.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "catalog.services", logging.WARNING, __file__, 1,
        "Product %s not found", (7,), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "catalog.services"
    assert log["message"] == "Product 7 not found"
    assert "timestamp" in log


def test_json_formatter_surfaces_extra_fields():
    log = json.loads(JSONFormatter().format(
        _record(product_id=7, error_code="PRODUCT_NOT_FOUND"),
    ))
    assert log["product_id"] == 7
    assert log["error_code"] == "PRODUCT_NOT_FOUND"
    assert "pattern" not in log


def test_setup_logging_replaces_previous_handler():
    first = setup_logging("INFO", "json")
    second = setup_logging("DEBUG", "text")
    try:
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
        assert logging.root.level == logging.DEBUG
    finally:
        logging.root.removeHandler(second)
