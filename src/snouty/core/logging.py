# src/snouty/core/logging.py
"""structlog setup for the CLI.

Log events go to stderr so stdout carries only the API response. The
default level is WARNING; ``--verbose`` or ``SNOUTY_LOG_LEVEL`` lowers it.
"""

import logging
import os
import sys

import structlog

LOG_LEVEL_ENV = "SNOUTY_LOG_LEVEL"


def resolve_level(verbose: bool, environ_level: str | None = None) -> int:
    """Pick the log level from the CLI flag and environment."""
    if verbose:
        return logging.DEBUG
    if environ_level:
        level = logging.getLevelName(environ_level.upper())
        if isinstance(level, int):
            return level
    return logging.WARNING


def configure_logging(verbose: bool = False) -> None:
    """Configure structlog for one CLI invocation.

    Loggers are not cached so that reconfiguring (tests, repeated
    invocations in one process) binds to the current stderr.
    """
    level = resolve_level(verbose, os.environ.get(LOG_LEVEL_ENV))
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
