"""Structured JSON logging with correlation ids and traveller-data scrubbing."""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import os
import re
import time
import uuid
from typing import Any, Dict, Iterator, Mapping
from urllib.parse import urlsplit, urlunsplit

SERVICE_NAME = "packing-assistant"
CORRELATION_ID: contextvars.ContextVar[str | None] = contextvars.ContextVar("correlation_id", default=None)

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}
_SENSITIVE_KEYS = frozenset({"client_id", "destination", "email", "ip", "latitude", "longitude"})
_EMAIL_PATTERN = re.compile(r"[\w.\-]+@[\w.\-]+")

LOGGER = logging.getLogger(__name__)


class JsonFormatter(logging.Formatter):
    """One JSON object per record: fixed envelope plus scrubbed extras."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        message = record.getMessage()
        envelope: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "service": SERVICE_NAME,
            "level": record.levelname,
            "logger": record.name,
            "event": getattr(record, "event", message),
            "message": message,
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
        }
        extras = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and key not in envelope
        }
        envelope.update(redact_for_log(extras))
        if record.exc_info:
            envelope["exception"] = self.formatException(record.exc_info)
        return json.dumps(envelope, default=str)


def configure_logging(level: int | str | None = None) -> None:
    """Route the root logger through a single JSON stream handler."""

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=level or os.getenv("LOG_LEVEL", "INFO"), handlers=[handler], force=True)


def _scrub_url(value: str) -> str:
    # Forecast and geocoding URLs carry coordinates and place names in the query.
    parts = urlsplit(value)
    if not parts.query:
        return value
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "[redacted]", ""))


def _scrub_text(value: str) -> str:
    if value.lower().startswith(("http://", "https://")):
        return _scrub_url(value)
    return _EMAIL_PATTERN.sub("[redacted-email]", value)


def redact_for_log(payload: Any) -> Any:
    """Recursively mask destinations, client identifiers and coordinates."""

    if payload is None or isinstance(payload, (bool, int, float)):
        return payload
    if isinstance(payload, str):
        return _scrub_text(payload)
    if isinstance(payload, Mapping):
        return {
            key: "[redacted]" if key in _SENSITIVE_KEYS else redact_for_log(value)
            for key, value in payload.items()
        }
    if isinstance(payload, (list, tuple, set, frozenset)):
        return [redact_for_log(item) for item in payload]
    return str(payload)


def get_logger(name: str) -> logging.Logger:
    """Module logger; configures JSON output on first use if nothing else has."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


def ensure_correlation_id(correlation_id: str | None = None) -> str:
    """Adopt ``correlation_id`` if given, else reuse the current one or mint a new one."""

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
    """Scope a correlation id to a block, restoring the previous one afterwards."""

    token = CORRELATION_ID.set(correlation_id or CORRELATION_ID.get() or uuid.uuid4().hex)
    try:
        yield CORRELATION_ID.get()  # type: ignore[misc]
    finally:
        CORRELATION_ID.reset(token)


@contextlib.contextmanager
def tracing_span(name: str, **attributes: Any) -> Iterator[Dict[str, Any]]:
    """Time a block and emit a debug-level span record when it exits."""

    span: Dict[str, Any] = {"name": name, **redact_for_log(attributes)}
    start = time.perf_counter()
    try:
        yield span
    finally:
        span["duration_ms"] = round((time.perf_counter() - start) * 1000, 2)
        LOGGER.debug("span_completed", extra={"event": "span_completed", "span": span})


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Log ``event`` with scrubbed ``fields`` attached as record attributes."""

    correlation_id = ensure_correlation_id(fields.pop("correlation_id", None))
    exc_info = fields.pop("exc_info", None)
    logger.log(
        level,
        event,
        exc_info=exc_info,
        extra={"event": event, "correlation_id": correlation_id, **redact_for_log(fields)},
    )


@contextlib.contextmanager
def operation_context(name: str, **attributes: Any) -> Iterator[str]:
    """Correlation scope plus a tracing span around one planner operation."""

    with correlation_context(attributes.get("correlation_id")) as scoped_id:
        with tracing_span(name, **{**attributes, "correlation_id": scoped_id}):
            yield scoped_id


__all__ = [
    "CORRELATION_ID",
    "JsonFormatter",
    "configure_logging",
    "correlation_context",
    "ensure_correlation_id",
    "get_logger",
    "log_event",
    "operation_context",
    "redact_for_log",
    "tracing_span",
]
