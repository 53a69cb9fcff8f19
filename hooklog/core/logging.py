"""Structlog configuration for hooklog's own diagnostic messages.

hooklog logs very little about itself: hook registration at debug level and,
when enabled, hook failures. These messages go through structlog so that
applications embedding hooklog can route them with the rest of their logs.
"""

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.types import Processor

from hooklog.levels import parse_level


def _to_stdlib_level(level: str | int) -> int:
    """Map a hooklog level onto the stdlib numbering structlog filters on."""
    value = parse_level(level)
    if value < 0:
        return logging.DEBUG
    if value < 4:
        return logging.INFO
    if value < 8:
        return logging.WARNING
    return logging.ERROR


def setup_logging(
    log_level_name: str | int = "INFO",
    json_logs: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog for hooklog diagnostics.

    Args:
        log_level_name: Minimum level for diagnostic messages
        json_logs: Render JSON lines instead of the console renderer
        stream: Output stream, defaults to stderr
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    renderers: list[Processor]
    if json_logs:
        renderers = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderers = [structlog.dev.ConsoleRenderer(colors=False)]

    structlog.configure(
        processors=shared_processors + renderers,
        wrapper_class=structlog.make_filtering_bound_logger(
            _to_stdlib_level(log_level_name)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger bound to ``name``."""
    return structlog.get_logger(name or "hooklog")
