"""structlog-backed diagnostic side channel for probe failures."""

from __future__ import annotations

from typing import Optional

import structlog

from official_status.domain.ports.status_probe import IErrorLogger
from official_status.shared import get_logger


class StructlogErrorLogger(IErrorLogger):
    """Emit one structured error event per failed operation."""

    def __init__(self, logger: Optional[structlog.stdlib.BoundLogger] = None) -> None:
        self._logger = logger or get_logger("official_status.errors")

    def log_error(self, operation: str, error: BaseException) -> None:
        self._logger.error(
            "status_probe.check.failed",
            operation=operation,
            error_type=type(error).__name__,
            error=str(error),
            exc_info=error,
        )
