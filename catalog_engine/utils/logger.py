"""
Structured Logging Configuration
================================

structlog setup for catalog load, search and price events.
"""

import logging
import sys
from typing import Any

import structlog

from catalog_engine.config.settings import get_settings


def configure_logging(
    log_level: str | None = None,
    json_output: bool | None = None,
) -> None:
    """
    Route catalog engine events through structlog.

    Renders JSON when json_output is set (or in production) and the
    console renderer otherwise; arguments win over settings.

    Args:
        log_level: Level name (e.g. "DEBUG"); defaults to settings.log_level
        json_output: Force JSON rendering; defaults to settings.is_production
    """
    settings = get_settings()

    level_name = (log_level or settings.log_level).upper()
    level = getattr(logging, level_name, logging.INFO)
    use_json = settings.is_production if json_output is None else json_output

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if use_json:
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name, typically __name__

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
