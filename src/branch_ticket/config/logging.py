"""Logging configuration using structlog."""

import logging
import sys

import structlog


def configure_logging(log_level: str = "ERROR") -> None:
    """Configure structlog to write human-readable lines to stderr."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.ERROR

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
