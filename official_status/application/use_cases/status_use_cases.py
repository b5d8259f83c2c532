"""Use cases for the official status check."""

from official_status.application.dtos.status_dto import StatusResultDTO
from official_status.domain.ports.status_probe import IStatusProbe


class CheckOfficialStatusUseCase:
    """Use case responsible for returning the upstream provider status."""

    def __init__(self, status_probe: IStatusProbe) -> None:
        self._status_probe = status_probe

    async def execute(self) -> StatusResultDTO:
        result = await self._status_probe.check()
        return StatusResultDTO.from_domain(result)
