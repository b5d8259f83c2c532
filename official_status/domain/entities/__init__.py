"""
Domain Entities Package

This package contains the core domain entities and business logic.
"""

from .errors import (
    DomainError,
    MalformedResponseError,
    ProbeError,
    ProbeHttpError,
    ProbeTimeoutError,
    ProbeTransportError,
)
from .health import FALLBACK_MESSAGE, HealthStatus, StatusResult, utc_timestamp

__all__ = [
    "HealthStatus",
    "StatusResult",
    "FALLBACK_MESSAGE",
    "utc_timestamp",
    "DomainError",
    "ProbeError",
    "ProbeTimeoutError",
    "ProbeTransportError",
    "ProbeHttpError",
    "MalformedResponseError",
]
