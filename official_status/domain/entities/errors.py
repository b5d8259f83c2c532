"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
Probe failures form a closed set of variants; each one knows the
diagnostic message it surfaces in a ``StatusResult``.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ProbeError(DomainError):
    """Base class for failures raised while probing a status page."""

    result_message = "check failed"


class ProbeTimeoutError(ProbeError):
    """Raised when the status page does not answer before the deadline."""

    result_message = "check timed out"

    def __init__(self, timeout_ms: int, details: Optional[Dict[str, Any]] = None):
        self.timeout_ms = timeout_ms
        super().__init__(f"Status check exceeded {timeout_ms} ms", details)


class ProbeTransportError(ProbeError):
    """Raised when no HTTP response could be obtained."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class ProbeHttpError(ProbeError):
    """Raised when the status page answers with a non-2xx status code."""

    def __init__(self, status_code: int, details: Optional[Dict[str, Any]] = None):
        self.status_code = status_code
        self.result_message = f"HTTP {status_code}"
        super().__init__(f"Status page returned HTTP {status_code}", details)


class MalformedResponseError(ProbeError):
    """Raised when a 2xx body cannot be read as a status payload."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
