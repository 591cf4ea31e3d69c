"""Structured logging utilities emitting JSON Lines payloads."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping, MutableMapping, Optional
from uuid import uuid4

if TYPE_CHECKING:  # pragma: no cover
    from ..config import Settings

__all__ = [
    "JsonLogFormatter",
    "configure_json_logger",
    "configure_logging",
    "flush_handlers",
    "generate_trace_id",
    "log_event",
]

ROOT_LOGGER = "lengthparse"


class JsonLogFormatter(logging.Formatter):
    """Format log records as single-line JSON payloads."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        payload: MutableMapping[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z"),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": message,
        }

        trace_id = getattr(record, "trace_id", None)
        if trace_id:
            payload["trace_id"] = trace_id

        payload["event"] = getattr(record, "event", None) or message

        extra_fields = getattr(record, "extra_fields", None)
        if isinstance(extra_fields, Mapping):
            payload.update(extra_fields)

        return json.dumps(payload, ensure_ascii=False)


def configure_json_logger(log_path: Path | None, level: int | str = logging.INFO) -> logging.Logger:
    """Attach a JSONL handler (or a null handler) to the ``lengthparse`` logger."""

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_path is not None:
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setFormatter(JsonLogFormatter())
    else:
        handler = logging.NullHandler()

    handler.setLevel(level)
    logger.addHandler(handler)
    return logger


def configure_logging(settings: Optional["Settings"] = None) -> logging.Logger:
    """Configure the package logger from :class:`~lengthparse.config.Settings`."""

    if settings is None:
        from ..config import get_settings

        settings = get_settings()
    logger = configure_json_logger(settings.log_path, level=settings.log_level)
    log_event(logger, "logging.configured", level=logging.DEBUG, settings=settings.as_dict())
    return logger


def flush_handlers(logger: logging.Logger) -> None:
    """Ensure all handlers flush their buffers."""

    for handler in logger.handlers:
        handler.flush()


def generate_trace_id() -> str:
    """Return a unique trace identifier suitable for correlating log events."""

    return uuid4().hex


def log_event(
    logger: logging.Logger,
    event: str,
    *,
    trace_id: str | None = None,
    level: int = logging.INFO,
    message: str | None = None,
    **fields: Any,
) -> str | None:
    """Emit a structured event on the provided ``logger``.

    The event carries ``trace_id`` only when the caller supplies one; use
    :func:`generate_trace_id` to correlate several events.
    """

    extra: dict[str, Any] = {
        "event": event,
        "extra_fields": fields,
    }
    if trace_id:
        extra["trace_id"] = trace_id

    logger.log(level, message or event, extra=extra)
    return trace_id
