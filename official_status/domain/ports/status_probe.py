"""Domain abstractions for probing an official status page."""

from __future__ import annotations

from typing import Protocol

from official_status.domain.entities.health import StatusResult


class IStatusProbe(Protocol):
    """Interface for retrieving the current status of an upstream provider."""

    async def check(self) -> StatusResult:
        """Run one probe and classify its outcome. Never raises."""
        ...


class IErrorLogger(Protocol):
    """Side channel notified whenever a probe fails."""

    def log_error(self, operation: str, error: BaseException) -> None: ...
