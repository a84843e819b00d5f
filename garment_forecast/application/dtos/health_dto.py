"""DTOs for the service health response."""

from __future__ import annotations

from pydantic import BaseModel, Field

from garment_forecast.application.models import ServiceInfo


class ServiceInfoDTO(BaseModel):
    """DTO representing the /health response payload."""

    name: str = Field(description="Service name")
    version: str = Field(description="Service version")
    environment: str = Field(description="Current deployment environment")
    status: str = Field(default="up", description="Overall service status")

    @classmethod
    def from_domain(cls, info: ServiceInfo) -> "ServiceInfoDTO":
        return cls(
            name=info.title,
            version=info.version,
            environment=info.environment,
            status="up",
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Garment Revenue Forecast",
                "version": "1.0.0",
                "environment": "development",
                "status": "up",
            }
        }
    }
