"""DTO for official status probe responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from official_status.domain.entities.health import HealthStatus, StatusResult


class StatusResultDTO(BaseModel):
    """Serializable representation of a status probe result."""

    status: HealthStatus = Field(description="Normalized provider status")
    message: str = Field(description="Human readable status note")
    checked_at: str = Field(
        alias="checkedAt",
        description="ISO-8601 UTC timestamp of when the check was attempted",
    )

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "status": "operational",
                "message": "All Systems Operational",
                "checkedAt": "2024-09-09T12:00:00.000000+00:00",
            }
        },
    )

    @classmethod
    def from_domain(cls, result: StatusResult) -> "StatusResultDTO":
        return cls(
            status=result.status,
            message=result.message,
            checked_at=result.checked_at,
        )
