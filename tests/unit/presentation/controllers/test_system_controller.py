from __future__ import annotations

import pytest

from garment_forecast.application.models import ServiceInfo
from garment_forecast.application.use_cases.health_use_cases import (
    GetServiceInfoUseCase,
)
from garment_forecast.presentation.controllers.system_controller import health


@pytest.mark.asyncio
async def test_health_endpoint_returns_status():
    use_case = GetServiceInfoUseCase(
        ServiceInfo(
            title="Forecast",
            description="desc",
            version="1.0",
            environment="testing",
        )
    )

    dto = await health(get_service_info_use_case=use_case)

    assert dto.status == "up"
    assert dto.name == "Forecast"
