"""Structured logging for naming derivations.

Context fields (service, resource kind, operation, metadata) ride on the log
record as extras; the root handler renders them as single-line JSON, or as one
readable line when ``LOG_FORMAT=readable``.
"""

import json
import logging
import os
import sys
from datetime import UTC, datetime
from typing import Any, Optional

CONTEXT_FIELDS = ("service", "resource_kind", "operation")


def structured_log(
    level: str,
    message: str,
    *,
    service: Optional[str] = None,
    resource_kind: Optional[str] = None,
    operation: Optional[str] = None,
    metadata: Optional[dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Emit a log entry carrying naming context."""
    log = logger or logging.getLogger(__name__)
    levelno = getattr(logging, level.upper(), logging.INFO)
    if not log.isEnabledFor(levelno):
        return
    extra: dict[str, Any] = {
        key: value
        for key, value in (
            ("service", service),
            ("resource_kind", resource_kind),
            ("operation", operation),
            ("metadata", metadata),
        )
        if value
    }
    log.log(levelno, message, extra=extra)


def _use_json() -> bool:
    """Use JSON format unless LOG_FORMAT asks for readable output."""
    return os.getenv("LOG_FORMAT", "json").lower() == "json"


def configure_logging(log_level: str = "INFO") -> None:
    """Configure root logger with JSON or readable format."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(JsonFormatter() if _use_json() else ReadableFormatter())
        root.addHandler(handler)


class ReadableFormatter(logging.Formatter):
    """``[LEVEL] message key=value ...`` for local runs."""

    def format(self, record: logging.LogRecord) -> str:
        parts = [f"[{record.levelname}]", record.getMessage()]
        for key in CONTEXT_FIELDS:
            value = getattr(record, key, None)
            if value:
                parts.append(f"{key}={value}")
        for key, value in (getattr(record, "metadata", None) or {}).items():
            parts.append(f"{key}={value}")
        return " ".join(parts)


class JsonFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "severity": record.levelname,
            "message": record.getMessage(),
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat().replace("+00:00", "Z"),
            "logger": record.name,
        }
        for key in CONTEXT_FIELDS:
            value = getattr(record, key, None)
            if value:
                payload[key] = value
        if getattr(record, "metadata", None):
            payload["metadata"] = record.metadata
        if record.exc_info:
            payload["error"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else "",
                "message": str(record.exc_info[1]) if record.exc_info[1] else "",
                "stack_trace": self.formatException(record.exc_info) if record.exc_info[2] else "",
            }
        return json.dumps(payload, default=str)
