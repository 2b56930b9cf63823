"""Response schemas for notification endpoints."""

from pydantic import Field

from relay.schemas.base_schema_model import BaseSchemaModel


class DirectSendResponse(BaseSchemaModel):
    """Response schema for a caller-authored push.

    ``sent`` and ``total`` are only set when the provider rejected the push.
    """

    success: bool = Field(True, description="Whether the request succeeded")
    message_id: str | None = Field(None, description="Provider-assigned message ID")
    recipient_id: str = Field(..., description="User the push was addressed to")
    sent: int | None = Field(None, description="Pushes accepted, set on failure")
    total: int | None = Field(None, description="Pushes attempted, set on failure")


class SingleDeliveryResponse(BaseSchemaModel):
    """Response schema for notifications with one target user.

    Carries ``message_id`` when a push was sent. Carries ``sent=0`` when the
    actor targeted themselves, plus ``total=1`` when the provider rejected
    the push.
    """

    success: bool = Field(True, description="Whether the request succeeded")
    message_id: str | None = Field(None, description="Provider-assigned message ID")
    sent: int | None = Field(None, description="Pushes accepted by the provider")
    total: int | None = Field(None, description="Pushes attempted")


class BatchDeliveryResponse(BaseSchemaModel):
    """Response schema for fanned-out notifications."""

    success: bool = Field(True, description="Whether the request succeeded")
    sent: int = Field(..., description="Pushes accepted by the provider")
    total: int = Field(..., description="Pushes attempted")
    saved: int = Field(..., description="In-app records written")
    muted_count: int | None = Field(
        None, description="Recipients who muted the conversation (messages only)"
    )
