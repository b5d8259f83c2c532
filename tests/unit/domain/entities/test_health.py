from __future__ import annotations

import dataclasses
from datetime import datetime, timezone

import pytest

from official_status.domain.entities.health import (
    FALLBACK_MESSAGE,
    HealthStatus,
    StatusResult,
    utc_timestamp,
)


def test_health_status_is_closed_vocabulary() -> None:
    assert {status.value for status in HealthStatus} == {
        "operational",
        "degraded",
        "down",
        "unknown",
    }


def test_status_result_is_immutable() -> None:
    result = StatusResult(
        status=HealthStatus.OPERATIONAL,
        message="All Systems Operational",
        checked_at=utc_timestamp(),
    )
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.status = HealthStatus.DOWN  # type: ignore[misc]


def test_status_result_empty_message_falls_back() -> None:
    result = StatusResult(
        status=HealthStatus.DEGRADED, message="", checked_at=utc_timestamp()
    )
    assert result.message == FALLBACK_MESSAGE


def test_unknown_factory() -> None:
    checked_at = utc_timestamp()
    result = StatusResult.unknown("HTTP 502", checked_at)
    assert result.status is HealthStatus.UNKNOWN
    assert result.message == "HTTP 502"
    assert result.checked_at == checked_at


def test_utc_timestamp_is_iso_utc() -> None:
    parsed = datetime.fromisoformat(utc_timestamp())
    assert parsed.utcoffset() == timezone.utc.utcoffset(None)
