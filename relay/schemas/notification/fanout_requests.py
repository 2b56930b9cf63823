"""Request schemas for notifications fanned out to a derived recipient set."""

from pydantic import Field

from relay.events import NewMessage, NewPost
from relay.schemas.base_schema_model import BaseSchemaModel


class MessageNotificationRequest(BaseSchemaModel):
    """Request schema for new chat message notifications.

    Recipients are every chat member except the sender; members who muted
    the chat get an in-app record but no push.
    """

    chat_id: str = Field(..., min_length=1, description="Conversation ID")
    sender_id: str = Field(..., min_length=1, description="Message author")
    sender_name: str | None = Field(None, description="Display name of the author")
    text: str | None = Field(None, description="Message text; empty for media")
    message_id: str | None = Field(None, description="ID of the new message")

    def to_event(self) -> NewMessage:
        return NewMessage(
            chat_id=self.chat_id,
            sender_id=self.sender_id,
            sender_name=self.sender_name,
            text=self.text,
            message_id=self.message_id,
        )


class NewPostNotificationRequest(BaseSchemaModel):
    """Request schema for new post notifications sent to the author's followers."""

    post_id: str = Field(..., min_length=1, description="Published post ID")
    user_id: str = Field(..., min_length=1, description="Post author")
    user_name: str | None = Field(None, description="Display name of the author")

    def to_event(self) -> NewPost:
        return NewPost(
            post_id=self.post_id,
            user_id=self.user_id,
            user_name=self.user_name,
        )
