"""Status endpoint exposing the official provider status."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from official_status.application.dtos.status_dto import StatusResultDTO
from official_status.application.use_cases.status_use_cases import (
    CheckOfficialStatusUseCase,
)
from official_status.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/status", tags=["Status"])


@router.get("/official", response_model=StatusResultDTO)
@inject
async def official_status(
    check_official_status_use_case: CheckOfficialStatusUseCase = Depends(
        Provide["check_official_status_use_case"]
    ),
) -> StatusResultDTO:
    """Probe the upstream status page and return the normalized result."""
    result = await check_official_status_use_case.execute()
    logger.debug("status.official.retrieved", status=result.status.value)
    return result
