"""Logging configuration and setup utilities.

This module provides logging setup and configuration:
- Structured logging with structlog
- Log level configuration from the CLUSTER_SIZE_LOG_LEVEL environment variable
- Plain console rendering on stderr so stdout stays reserved for the report
"""
import logging
import os
import sys
from typing import Optional

import structlog

LOG_LEVEL_ENV = "CLUSTER_SIZE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def _resolve_level(level: Optional[str]) -> int:
    name = (level or os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structlog for CLI and programmatic use."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(level)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: Optional[str] = None):
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(name)
