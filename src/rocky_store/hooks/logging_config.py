"""Structured logging configuration using structlog.

Provides JSON logs when stderr is redirected and colored console output in a
terminal. Optionally mirrors warnings into the app's ``debug.log``.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

from rocky_store.persistence.debug_log import DebugLog, DebugLogHandler

if TYPE_CHECKING:
    from rocky_store.core.config import ObservabilityConfig


def setup_logging(config: ObservabilityConfig, debug_log: DebugLog | None = None) -> None:
    """Configure structured logging on the root logger.

    When ``debug_log`` is given, records from ``rocky_store`` at or above
    ``config.debug_log_level`` are also appended to it.
    """
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    shared_processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if sys.stderr.isatty():
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    handler.setLevel(level)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    logging.getLogger("rocky_store").setLevel(level)

    if debug_log is not None:
        attach_debug_log(debug_log, config.debug_log_level)


def attach_debug_log(debug_log: DebugLog, level_name: str = "WARNING") -> DebugLogHandler:
    """Forward ``rocky_store`` records at ``level_name`` or above to ``debug_log``.

    Replaces any handler attached by a previous call. The package logger is
    lowered to ``level_name`` if needed so those records are not filtered out
    before reaching the handler.
    """
    debug_level = getattr(logging, level_name.upper(), logging.WARNING)
    package_logger = logging.getLogger("rocky_store")
    for existing in list(package_logger.handlers):
        if isinstance(existing, DebugLogHandler):
            package_logger.removeHandler(existing)
    if package_logger.getEffectiveLevel() > debug_level:
        package_logger.setLevel(debug_level)

    handler = DebugLogHandler(debug_log, level=debug_level)
    package_logger.addHandler(handler)
    return handler
