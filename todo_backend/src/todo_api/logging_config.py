"""
Structured logging setup built on structlog.
- console: human-readable output for development
- json: one JSON object per line for log collectors
"""
from __future__ import annotations

import logging
import sys

import structlog


def setup_logging(fmt: str = "console", level: str = "INFO") -> None:
    """Configure structlog processors and route stdlib logging (uvicorn) to stdout."""
    log_level = logging.getLevelName(level)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    if fmt == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        # Left uncached so structlog.testing.capture_logs() can reconfigure in tests.
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )
