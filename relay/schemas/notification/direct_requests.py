"""Request schemas for notifications addressed to one explicit user."""

from typing import Literal

from pydantic import Field, field_validator

from relay.events import (
    DirectSend,
    FriendRequest,
    FriendRequestAccepted,
    GroupInvite,
    Mention,
)
from relay.schemas.base_schema_model import BaseSchemaModel


class SendNotificationRequest(BaseSchemaModel):
    """Request schema for a caller-authored push to one user."""

    recipient_id: str = Field(..., min_length=1, description="Target user ID")
    title: str = Field(..., min_length=1, description="Alert title")
    body: str = Field(..., min_length=1, description="Alert body")
    data: dict[str, str] = Field(
        default_factory=dict, description="Navigation payload for the client"
    )

    @field_validator("data", mode="before")
    @classmethod
    def stringify_data(cls, value):
        """Coerce data values to strings; push data payloads are string-only."""
        if value is None:
            return {}
        if isinstance(value, dict):
            return {
                str(key): str(item) for key, item in value.items() if item is not None
            }
        return value

    def to_event(self) -> DirectSend:
        return DirectSend(
            recipient_id=self.recipient_id,
            title=self.title,
            body=self.body,
            data=self.data,
        )


class FriendRequestRequest(BaseSchemaModel):
    """Request schema for friend request notifications."""

    recipient_id: str = Field(..., min_length=1, description="User receiving the request")
    sender_id: str = Field(..., min_length=1, description="User sending the request")
    sender_name: str | None = Field(None, description="Display name of the sender")

    def to_event(self) -> FriendRequest:
        return FriendRequest(
            recipient_id=self.recipient_id,
            sender_id=self.sender_id,
            sender_name=self.sender_name,
        )


class FriendRequestAcceptedRequest(BaseSchemaModel):
    """Request schema for accepted friend request notifications."""

    recipient_id: str = Field(
        ..., min_length=1, description="User who sent the original request"
    )
    acceptor_id: str = Field(..., min_length=1, description="User who accepted")
    acceptor_name: str | None = Field(None, description="Display name of the acceptor")

    def to_event(self) -> FriendRequestAccepted:
        return FriendRequestAccepted(
            recipient_id=self.recipient_id,
            acceptor_id=self.acceptor_id,
            acceptor_name=self.acceptor_name,
        )


class GroupInviteRequest(BaseSchemaModel):
    """Request schema for group invitation notifications."""

    recipient_id: str = Field(..., min_length=1, description="Invited user")
    group_id: str = Field(..., min_length=1, description="Group conversation ID")
    inviter_id: str = Field(..., min_length=1, description="User sending the invite")
    group_name: str | None = Field(None, description="Display name of the group")
    inviter_name: str | None = Field(None, description="Display name of the inviter")

    def to_event(self) -> GroupInvite:
        return GroupInvite(
            recipient_id=self.recipient_id,
            group_id=self.group_id,
            inviter_id=self.inviter_id,
            group_name=self.group_name,
            inviter_name=self.inviter_name,
        )


class MentionRequest(BaseSchemaModel):
    """Request schema for mention notifications."""

    recipient_id: str = Field(..., min_length=1, description="Mentioned user")
    mentioner_id: str = Field(..., min_length=1, description="User who mentioned")
    mentioner_name: str | None = Field(
        None, description="Display name of the mentioning user"
    )
    post_id: str | None = Field(None, description="Post containing the mention")
    comment_id: str | None = Field(None, description="Comment containing the mention")
    target: Literal["post", "comment"] = Field(
        "post", alias="type", description="Whether the mention is in a post or comment"
    )

    def to_event(self) -> Mention:
        return Mention(
            recipient_id=self.recipient_id,
            mentioner_id=self.mentioner_id,
            mentioner_name=self.mentioner_name,
            post_id=self.post_id,
            comment_id=self.comment_id,
            target=self.target,
        )
