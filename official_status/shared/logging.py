"""
Logging Configuration - Shared Layer

This module wires structlog on top of the standard logging module so that
every layer logs structured events through ``get_logger``.
"""

import logging
import os
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

from official_status.shared.consts import EnumEnvironment

LOG_FORMAT_JSON = "json"
LOG_FORMAT_CONSOLE = "console"


def _shared_processors() -> List[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def select_renderer(log_format: Optional[str], environment: str) -> Processor:
    """Pick the JSON or console renderer; an explicit format wins."""
    log_format = (log_format or "").lower()
    if log_format == LOG_FORMAT_JSON:
        return structlog.processors.JSONRenderer()
    if log_format != LOG_FORMAT_CONSOLE and (
        environment.lower() == EnumEnvironment.PRODUCTION
    ):
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(
    level: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = "development",
    log_format: Optional[str] = None,
) -> None:
    """
    Configure stdlib logging and structlog.

    Values not passed explicitly are read from ``LOG_LEVEL``,
    ``LOG_FILE_PATH`` and ``LOG_FORMAT`` so that logging is usable before
    settings load.

    Args:
        level: Log level name.
        file_path: Optional file to mirror console output to.
        environment: Application environment; production renders JSON.
        log_format: ``json`` or ``console``; overrides the environment default.
    """
    log_level = level or os.environ.get("LOG_LEVEL") or "INFO"
    log_file = file_path or os.environ.get("LOG_FILE_PATH")
    log_format = log_format or os.environ.get("LOG_FORMAT")
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=select_renderer(log_format, environment),
        foreign_pre_chain=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
        ],
    )
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    get_logger(__name__).debug(
        "logging.configured", level=log_level, file_path=log_file
    )


def update_logging_from_settings(settings: Any) -> None:
    """Reconfigure logging from a loaded ``AppSettings`` instance."""
    level = settings.logging.level
    environment = settings.environment
    configure_logging(
        level=getattr(level, "value", level),
        file_path=settings.logging.file_path,
        environment=getattr(environment, "value", environment),
        log_format=settings.logging.format,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
