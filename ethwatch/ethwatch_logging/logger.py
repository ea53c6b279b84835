"""
structlog setup for ethwatch.

Every line carries timestamp (ISO 8601, UTC), level, event_type, logger and
service. Level and renderer come from ethwatch.config (LOG_LEVEL, LOG_FORMAT),
the same path Settings uses, and are applied once on first import.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from ethwatch.config.env import get_log_format, get_log_level

SERVICE_NAME = "ethwatch"


def _add_service(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def configure_logging(level: str, fmt: str) -> None:
    """Configure structlog: level name from config.LOG_LEVELS, fmt "json" or "console"."""
    renderer: Any
    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
            structlog.processors.format_exc_info,
            _add_service,
            structlog.processors.EventRenamer("event_type"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


# Module-level loggers bind at import, so configuration has to precede them
if not structlog.is_configured():
    configure_logging(get_log_level(), get_log_format())


def get_logger(name: str) -> structlog.BoundLogger:
    """Structured logger tagged with the module name: ``get_logger(__name__)``."""
    return structlog.get_logger(name).bind(logger=name)


def bind_address(address: str) -> structlog.BoundLogger:
    """Logger with ``address`` bound to every call; used per scanned address."""
    return get_logger(SERVICE_NAME).bind(address=address)
