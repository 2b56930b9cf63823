"""One-time code schemas."""

from relay.schemas.otp.requests import OtpSendRequest, OtpVerifyRequest
from relay.schemas.otp.responses import OtpIssuedResponse, OtpVerifiedResponse

__all__ = [
    "OtpIssuedResponse",
    "OtpSendRequest",
    "OtpVerifiedResponse",
    "OtpVerifyRequest",
]
