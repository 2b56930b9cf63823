"""Health and service status response schemas."""

from datetime import datetime

from pydantic import Field

from relay.schemas.base_schema_model import BaseSchemaModel
from relay.schemas.health.dependency_health import DependencyHealth


class LivenessResponse(BaseSchemaModel):
    """Response model for liveness checks."""

    status: str = Field(..., description="Liveness status")


class ReadinessResponse(BaseSchemaModel):
    """Response model for readiness checks."""

    ready: bool = Field(..., description="Service is ready to serve requests")
    status: str = Field(..., description="Overall status: 'ready' or 'degraded'")
    degraded: bool = Field(
        ..., description="Whether service is running in degraded mode"
    )
    dependencies: dict[str, DependencyHealth] = Field(
        ..., description="Status of each dependency"
    )


class ServiceInfoResponse(BaseSchemaModel):
    """Response model for the root endpoint."""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Display name of the service")
    version: str = Field(..., description="Service version")
    timestamp: datetime = Field(..., description="Server time of the response")
