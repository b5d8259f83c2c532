from __future__ import annotations

import json

from official_status.application.dtos.status_dto import StatusResultDTO
from official_status.domain.entities.health import HealthStatus, StatusResult


def test_status_result_dto_from_domain() -> None:
    domain = StatusResult(
        status=HealthStatus.DOWN,
        message="Major outage",
        checked_at="2024-09-09T12:00:00+00:00",
    )
    dto = StatusResultDTO.from_domain(domain)
    assert dto.status is HealthStatus.DOWN
    assert dto.message == "Major outage"
    assert dto.checked_at == "2024-09-09T12:00:00+00:00"


def test_status_result_dto_serializes_with_camel_case_timestamp() -> None:
    dto = StatusResultDTO(
        status=HealthStatus.UNKNOWN,
        message="check timed out",
        checked_at="2024-09-09T12:00:00+00:00",
    )
    payload = json.loads(dto.model_dump_json(by_alias=True))
    assert payload == {
        "status": "unknown",
        "message": "check timed out",
        "checkedAt": "2024-09-09T12:00:00+00:00",
    }
