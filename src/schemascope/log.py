# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Structured logging setup.

Modules obtain a logger with ``structlog.get_logger(__name__)`` and emit
events with keyword context; the CLI calls :func:`configure_logging` once
at startup to choose the level and route output to stderr.
"""

from __future__ import annotations

import logging
import sys

import structlog

# ###############
# Public Interface
# ###############

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(level: str = "WARNING") -> None:
    """Configure structlog to render human-readable events on stderr.

    Raises:
        ValueError: If *level* is not one of :data:`LOG_LEVELS`.
    """
    name = level.upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level!r}")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, name)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
