"""Unit tests for structured logging helpers."""

import json
import logging

import pytest

from resource_naming.core.logging import JsonFormatter, ReadableFormatter, structured_log

LOGGER_NAME = "resource_naming.tests"


def _record(message: str = "derived") -> logging.LogRecord:
    return logging.LogRecord(LOGGER_NAME, logging.INFO, __file__, 1, message, None, None)


def test_json_formatter_includes_extra_fields() -> None:
    record = _record()
    record.resource_kind = "storage_account"
    record.service = "orders"
    record.metadata = {"name": "slswusdevorders", "length": 15}
    payload = json.loads(JsonFormatter().format(record))
    assert payload["severity"] == "INFO"
    assert payload["message"] == "derived"
    assert payload["resource_kind"] == "storage_account"
    assert payload["service"] == "orders"
    assert payload["metadata"] == {"name": "slswusdevorders", "length": 15}
    assert payload["timestamp"].endswith("Z")
    assert "operation" not in payload


def test_readable_formatter_renders_context_and_metadata() -> None:
    record = _record("Derived resource name")
    record.resource_kind = "virtual_network"
    record.metadata = {"name": "sls-wus-dev-vnet"}
    line = ReadableFormatter().format(record)
    assert line == "[INFO] Derived resource name resource_kind=virtual_network name=sls-wus-dev-vnet"


def test_structured_log_attaches_context(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger(LOGGER_NAME)
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        structured_log(
            "INFO",
            "Previewed resource names",
            service="orders",
            operation="preview_names",
            metadata={"count": 10},
            logger=logger,
        )
    record = caplog.records[-1]
    assert record.getMessage() == "Previewed resource names"
    assert record.service == "orders"
    assert record.operation == "preview_names"
    assert record.metadata == {"count": 10}
    assert not hasattr(record, "resource_kind")


def test_structured_log_skips_disabled_level(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger(LOGGER_NAME)
    with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
        structured_log("DEBUG", "Derived resource name", logger=logger)
    assert not caplog.records
