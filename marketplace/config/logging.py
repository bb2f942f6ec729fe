"""
Logging configuration for the application.
"""

import logging
import sys
from typing import Optional

import structlog

from marketplace.config.settings import settings

# Environments whose logs are shipped to a collector
STRUCTURED_ENVIRONMENTS = {"production", "staging"}

# Request lines come from LoggingMiddleware
QUIET_LOGGERS = (
    "sqlalchemy.engine",
    "sqlalchemy.pool",
    "asyncio",
    "aiosqlite",
    "uvicorn.access",
)


def _renderer(environment: str):
    if environment in STRUCTURED_ENVIRONMENTS:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structured logging.

    ``level`` overrides ``LOG_LEVEL`` for scripts that want more or less
    output than the service.
    """
    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            _renderer(settings.ENVIRONMENT),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)
    logging.getLogger().setLevel(log_level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger."""
    return structlog.get_logger(name)
