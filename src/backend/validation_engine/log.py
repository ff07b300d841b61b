"""Structured logging for the validation engine.

Loggers wrap the stdlib logger of the same name, so an application that
never calls `configure_logging` only sees what its own stdlib logging setup
lets through (by default, nothing below WARNING).
"""

from __future__ import annotations

import logging
from typing import Optional

import structlog
from structlog.contextvars import merge_contextvars
from structlog.processors import (
    JSONRenderer,
    KeyValueRenderer,
    TimeStamper,
    UnicodeDecoder,
    add_log_level,
)
from structlog.stdlib import BoundLogger, ProcessorFormatter, add_logger_name

from .settings import EngineSettings


def get_logger(name: str) -> BoundLogger:
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=BoundLogger)


def configure_logging(settings: Optional[EngineSettings] = None) -> None:
    """Route structlog and stdlib logging through one processor chain.

    Call once at process start-up (CLI entry points, application bootstrap).
    """
    settings = settings or EngineSettings()

    processors = [
        merge_contextvars,
        TimeStamper(fmt="ISO", utc=True),
        add_log_level,
        add_logger_name,
        UnicodeDecoder(),
    ]
    if settings.log_json:
        renderer = JSONRenderer(sort_keys=True)
    else:
        renderer = KeyValueRenderer(key_order=["timestamp", "level", "event", "logger"])

    structlog.configure(
        processors=processors + [ProcessorFormatter.wrap_for_formatter],
        wrapper_class=BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        ProcessorFormatter(
            processors=[ProcessorFormatter.remove_processors_meta, renderer],
            foreign_pre_chain=processors,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(settings.log_level)
