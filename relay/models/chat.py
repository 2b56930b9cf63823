"""Chat model."""

from django.db import models


class Chat(models.Model):
    """Conversation row from the chat application's ``chats`` table.

    ``member_ids`` lists every participant (sender included);
    ``muted_ids`` lists participants who silenced this conversation. Both are
    JSON arrays of user ids. Unmanaged: the chat application owns the schema.
    """

    chat_id = models.CharField(primary_key=True, max_length=128)
    name = models.CharField(max_length=255, default="", blank=True)
    is_group = models.BooleanField(default=False)
    member_ids = models.JSONField(default=list)
    muted_ids = models.JSONField(default=list)

    class Meta:
        """Django model metadata."""

        db_table = "chats"
        managed = False

    def __str__(self) -> str:
        """Return string representation of chat."""
        return self.name or self.chat_id
