"""Structured logging for chainbind.

The library never configures logging by itself: it only asks structlog for
loggers. Scripts call `configure_logging()` once at startup.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import Processor


def get_shared_processors() -> list[Processor]:
    """Processors used by both console and JSON output."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]


def configure_logging(level: str = "WARNING", json_logs: bool = False) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...).
        json_logs: JSON lines if True, colored console output otherwise.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)
    shared_processors = get_shared_processors()

    if json_logs:
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(log_level)


def configure_from_settings() -> None:
    """Configure logging from `chainbind._config.Settings`."""
    from ._config import get_settings

    settings = get_settings()
    configure_logging(settings.log_level, json_logs=settings.log_json)


def get_logger(name: str = "chainbind") -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


__all__ = (
    "configure_from_settings",
    "configure_logging",
    "get_logger",
    "get_shared_processors",
)
