"""System endpoint exposing service health."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from garment_forecast.application.dtos.health_dto import ServiceInfoDTO
from garment_forecast.application.use_cases.health_use_cases import (
    GetServiceInfoUseCase,
)
from garment_forecast.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get("/health", response_model=ServiceInfoDTO)
@inject
async def health(
    get_service_info_use_case: GetServiceInfoUseCase = Depends(
        Provide["get_service_info_use_case"]
    ),
) -> ServiceInfoDTO:
    """Return service identity and status."""
    info = await get_service_info_use_case.execute()
    logger.debug("health.check.success", status=info.status)
    return info
