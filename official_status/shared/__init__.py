"""
Shared module - Cross-cutting concerns / Shared Layer

Constants, enums, logging setup and environment helpers used by every
layer. It must not depend on Infrastructure or Frameworks beyond logging.
"""

from .consts import (
    CHECK_OPERATION,
    DEFAULT_STATUS_URL,
    DEFAULT_TIMEOUT_MS,
    EnumEnvironment,
    EnumLogLevel,
)
from .env import resolve_secret_files
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "CHECK_OPERATION",
    "DEFAULT_STATUS_URL",
    "DEFAULT_TIMEOUT_MS",
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "resolve_secret_files",
    "update_logging_from_settings",
]
