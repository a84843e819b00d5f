"""Use case for the health endpoint."""

from garment_forecast.application.dtos.health_dto import ServiceInfoDTO
from garment_forecast.application.models import ServiceInfo


class GetServiceInfoUseCase:
    """Use case responsible for returning service identity and status."""

    def __init__(self, service_info: ServiceInfo) -> None:
        self._info = service_info

    async def execute(self) -> ServiceInfoDTO:
        return ServiceInfoDTO.from_domain(self._info)
