"""Schemas for the relay app."""

from relay.schemas.base_schema_model import BaseSchemaModel
from relay.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
    ServiceInfoResponse,
)
from relay.schemas.notification import (
    BatchDeliveryResponse,
    DirectSendResponse,
    SingleDeliveryResponse,
)
from relay.schemas.otp import (
    OtpIssuedResponse,
    OtpSendRequest,
    OtpVerifiedResponse,
    OtpVerifyRequest,
)

__all__ = [
    "BaseSchemaModel",
    "BatchDeliveryResponse",
    "DependencyHealth",
    "DirectSendResponse",
    "LivenessResponse",
    "OtpIssuedResponse",
    "OtpSendRequest",
    "OtpVerifiedResponse",
    "OtpVerifyRequest",
    "ReadinessResponse",
    "ServiceInfoResponse",
    "SingleDeliveryResponse",
]
