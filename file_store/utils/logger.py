"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from file_store.models.config import Config


def _resolve_level(log_level: str) -> int:
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        msg = f"Unknown log level: {log_level}"
        raise ValueError(msg)
    return level


def configure_library_defaults() -> None:
    """Keep an unconfigured application quiet: WARNING and above only.

    Events go through stdlib logging, so they follow whatever handlers the
    host application installed (stderr by default). Leaves any existing
    structlog configuration untouched.
    """
    if structlog.is_configured():
        return
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def configure_logging(log_level: str | None = None, log_format: str | None = None) -> None:
    """Configure structlog for the application.

    Call once at startup. Arguments left as None are read from ``Config``
    (environment variables and .env). ``log_format`` selects the console or
    JSON renderer.
    """
    if log_level is None or log_format is None:
        config = Config()
        log_level = log_level or config.log_level
        log_format = log_format or config.log_format

    level = _resolve_level(log_level)
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
