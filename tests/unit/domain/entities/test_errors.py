from __future__ import annotations

from official_status.domain.entities.errors import (
    DomainError,
    MalformedResponseError,
    ProbeError,
    ProbeHttpError,
    ProbeTimeoutError,
    ProbeTransportError,
)


def test_probe_errors_share_domain_base() -> None:
    for error in (
        ProbeTimeoutError(15000),
        ProbeTransportError("refused"),
        ProbeHttpError(503),
        MalformedResponseError("bad json"),
    ):
        assert isinstance(error, ProbeError)
        assert isinstance(error, DomainError)


def test_result_messages() -> None:
    assert ProbeTimeoutError(100).result_message == "check timed out"
    assert ProbeHttpError(429).result_message == "HTTP 429"
    assert ProbeTransportError("dns").result_message == "check failed"
    assert MalformedResponseError("x").result_message == "check failed"


def test_http_error_keeps_details() -> None:
    error = ProbeHttpError(500, details={"url": "https://status.example.com"})
    assert error.status_code == 500
    assert error.details == {"url": "https://status.example.com"}
    assert "500" in error.message
