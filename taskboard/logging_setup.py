"""structlog configuration.

Call :func:`configure_logging` once at startup, then log through
``structlog.get_logger(__name__)``. Production renders one JSON object per
line; any other environment gets the colored console renderer.
"""
import logging
from typing import Optional

import structlog
from structlog.typing import Processor

from .config import ENVIRONMENT, LOG_LEVEL


def configure_logging(environment: str = ENVIRONMENT, level: Optional[str] = None) -> None:
    log_level = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        final_processors: list[Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        final_processors = [structlog.dev.ConsoleRenderer(colors=True)]

    structlog.configure(
        processors=shared_processors + final_processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
