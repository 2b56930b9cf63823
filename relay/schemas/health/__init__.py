"""Health check schemas."""

from relay.schemas.health.dependency_health import DependencyHealth
from relay.schemas.health.responses import (
    LivenessResponse,
    ReadinessResponse,
    ServiceInfoResponse,
)

__all__ = [
    "DependencyHealth",
    "LivenessResponse",
    "ReadinessResponse",
    "ServiceInfoResponse",
]
