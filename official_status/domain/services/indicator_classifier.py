"""Domain service mapping status page indicators to health statuses."""

from typing import Dict, Optional

from official_status.domain.entities.health import HealthStatus

INDICATOR_STATUS: Dict[str, HealthStatus] = {
    "none": HealthStatus.OPERATIONAL,
    "minor": HealthStatus.DEGRADED,
    "major": HealthStatus.DOWN,
    "critical": HealthStatus.DOWN,
}


def classify_indicator(indicator: Optional[str]) -> HealthStatus:
    """Classify a vendor severity indicator.

    Matching is case-insensitive. Missing or unrecognized indicators map to
    ``HealthStatus.UNKNOWN``.
    """

    if not indicator:
        return HealthStatus.UNKNOWN
    return INDICATOR_STATUS.get(indicator.lower(), HealthStatus.UNKNOWN)
