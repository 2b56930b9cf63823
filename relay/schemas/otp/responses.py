"""One-time code response schemas."""

from pydantic import Field

from relay.schemas.base_schema_model import BaseSchemaModel


class OtpIssuedResponse(BaseSchemaModel):
    success: bool = Field(True, description="Whether the code was sent")
    expires_in: int = Field(..., description="Seconds until the code expires")


class OtpVerifiedResponse(BaseSchemaModel):
    success: bool = Field(True, description="Whether verification succeeded")
    verified: bool = Field(True, description="Whether the address is verified")
