"""Structured logging using structlog.

Library modules log through ``logger``, which is bound to the stdlib
``resource_io`` logger with its own processors, so importing the package
leaves the host's structlog and logging configuration untouched. Only the
command line calls ``setup_logging``.
"""

from __future__ import annotations

import logging
import sys

import structlog

from .config import LOG_LEVEL

LOGGER_NAME = "resource_io"


def setup_logging(level: str = LOG_LEVEL) -> structlog.typing.FilteringBoundLogger:
    """Configure structlog with console output on stderr."""
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    # Library events go through stdlib logging
    logging.basicConfig(stream=sys.stderr, format="%(message)s")
    logging.getLogger(LOGGER_NAME).setLevel(numeric_level)

    return structlog.get_logger()


logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(
    logging.getLogger(LOGGER_NAME),
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.processors.KeyValueRenderer(key_order=["event"]),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
)
