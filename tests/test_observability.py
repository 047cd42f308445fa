"""Structured logging — JSON fields and idempotent setup."""

import json
import logging

from warehouse.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("warehouse.test", logging.WARNING, __file__, 1, "placed %s", ("box",), None)
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "warehouse.test"
    assert payload["message"] == "placed box"


def test_json_formatter_surfaces_extras():
    payload = json.loads(JSONFormatter().format(_record(box_id=4, pallet_id=2, error_code="BOX_TOO_LARGE")))
    assert payload["box_id"] == 4
    assert payload["pallet_id"] == 2
    assert payload["error_code"] == "BOX_TOO_LARGE"
    assert "operation" not in payload


def test_setup_logging_replaces_own_handler():
    before = len(logging.root.handlers)
    setup_logging("DEBUG", "json")
    setup_logging("INFO", "text")
    ours = [h for h in logging.root.handlers if getattr(h, "_warehouse_handler", False)]
    assert len(ours) == 1
    assert len(logging.root.handlers) <= before + 1
    assert logging.root.level == logging.INFO
