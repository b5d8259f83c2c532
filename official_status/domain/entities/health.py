"""
Health domain entities.

This module defines the value objects produced by an official status
probe: the normalized health vocabulary and the point-in-time result.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

FALLBACK_MESSAGE = "status unknown"


class HealthStatus(str, Enum):
    """Normalized availability of an upstream provider."""

    OPERATIONAL = "operational"
    DEGRADED = "degraded"
    DOWN = "down"
    UNKNOWN = "unknown"


def utc_timestamp() -> str:
    """Return the current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True, slots=True)
class StatusResult:
    """Outcome of a single status probe."""

    status: HealthStatus
    message: str
    checked_at: str

    def __post_init__(self) -> None:
        if not self.message:
            object.__setattr__(self, "message", FALLBACK_MESSAGE)

    @classmethod
    def unknown(cls, message: str, checked_at: str) -> "StatusResult":
        return cls(status=HealthStatus.UNKNOWN, message=message, checked_at=checked_at)
