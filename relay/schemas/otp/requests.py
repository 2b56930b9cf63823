"""One-time code request schemas."""

from pydantic import Field

from relay.schemas.base_schema_model import BaseSchemaModel


class OtpSendRequest(BaseSchemaModel):
    """Request schema for issuing or resending a code.

    Only presence is checked here; the address format is validated by the
    OTP service so every entry point shares one rule.
    """

    email: str = Field(..., min_length=1, description="Address to send the code to")


class OtpVerifyRequest(BaseSchemaModel):
    """Request schema for verifying a code."""

    email: str = Field(..., min_length=1, description="Address the code was sent to")
    otp: str = Field(..., min_length=1, description="Code entered by the user")
