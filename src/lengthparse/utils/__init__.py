"""Shared helpers (structured logging)."""

from .logging import configure_json_logger, configure_logging, flush_handlers, log_event

__all__ = [
    "configure_json_logger",
    "configure_logging",
    "flush_handlers",
    "log_event",
]
