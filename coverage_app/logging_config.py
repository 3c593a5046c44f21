"""JSON logging for coverage runs.

Every record carries the correlation id of the evaluation it belongs to, so
the per-scenario events of one run can be stitched together downstream.
User identifiers and free-text item fields never reach the log stream.
"""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import os
import re
import sys
import uuid
from typing import IO, Any, Dict, Iterator, Mapping

CORRELATION_ID: contextvars.ContextVar[str | None] = contextvars.ContextVar("coverage_correlation_id", default=None)

# Attributes every LogRecord has; anything else was passed through ``extra``.
_RECORD_ATTRIBUTES = frozenset(vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))) | {
    "message",
    "asctime",
    "taskName",
}
_REDACTED_FIELDS = frozenset({"user_id", "email", "item_name", "notes", "image_url", "source_url"})
_EMAIL = re.compile(r"[\w.\-]+@[\w.\-]+")
_MASK = "[redacted]"


class JsonFormatter(logging.Formatter):
    """Render a record as a single JSON object."""

    def __init__(self, datefmt: str = "%Y-%m-%dT%H:%M:%S%z") -> None:
        super().__init__(datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        message = record.getMessage()
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": message,
            "event": getattr(record, "event", message),
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
        }
        for key, value in record.__dict__.items():
            if key in _RECORD_ATTRIBUTES or key in payload:
                continue
            payload[key] = redact_for_log(value)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(level: int | str | None = None, stream: IO[str] | None = None) -> logging.Handler:
    """Route the root logger through a single JSON handler.

    ``level`` falls back to ``LOG_LEVEL`` and then ``INFO``.
    """

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter())
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level or os.getenv("LOG_LEVEL", "INFO"))
    return handler


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


def _mask_text(value: str) -> str:
    if value.lower().startswith("http"):
        return "[redacted-url]"
    return _EMAIL.sub("[redacted-email]", value)


def redact_for_log(payload: Any) -> Any:
    """Return a log-safe copy of ``payload``.

    Mappings lose the values of identifying keys, strings lose emails and
    URLs, sequences come back as lists. Unknown objects are stringified.
    """

    if payload is None or isinstance(payload, (bool, int, float)):
        return payload
    if isinstance(payload, str):
        return _mask_text(payload)
    if isinstance(payload, Mapping):
        return {
            key: _MASK if key in _REDACTED_FIELDS else redact_for_log(value)
            for key, value in payload.items()
        }
    if isinstance(payload, (list, tuple, set, frozenset)):
        return [redact_for_log(value) for value in payload]
    return str(payload)


def ensure_correlation_id(correlation_id: str | None = None) -> str:
    """Pin ``correlation_id`` to the current context, or reuse/mint one."""

    if correlation_id:
        CORRELATION_ID.set(correlation_id)
        return correlation_id
    current = CORRELATION_ID.get()
    if current:
        return current
    minted = uuid.uuid4().hex
    CORRELATION_ID.set(minted)
    return minted


@contextlib.contextmanager
def correlation_context(correlation_id: str | None = None) -> Iterator[str]:
    """Temporarily bind a correlation id; the previous one is restored on exit."""

    token = CORRELATION_ID.set(correlation_id or CORRELATION_ID.get() or uuid.uuid4().hex)
    try:
        yield CORRELATION_ID.get()
    finally:
        CORRELATION_ID.reset(token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Log ``event`` with ``fields`` attached as structured, redacted extras."""

    correlation_id = ensure_correlation_id(fields.pop("correlation_id", None))
    exc_info = fields.pop("exc_info", None)
    logger.log(
        level,
        event,
        exc_info=exc_info,
        extra={"event": event, "correlation_id": correlation_id, **redact_for_log(fields)},
    )


@contextlib.contextmanager
def operation_context(name: str, correlation_id: str | None = None) -> Iterator[str]:
    """Scope one correlation id around a named operation such as an evaluation run."""

    with correlation_context(correlation_id) as scoped_id:
        log_event(logging.getLogger(__name__), logging.DEBUG, "operation_started", operation=name)
        yield scoped_id


__all__ = [
    "CORRELATION_ID",
    "JsonFormatter",
    "configure_logging",
    "correlation_context",
    "ensure_correlation_id",
    "get_logger",
    "log_event",
    "redact_for_log",
    "operation_context",
]
