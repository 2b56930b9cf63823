"""Notification model for the in-app notification feed.

One row is written per (event, recipient) pair, whether or not the push
alert reached a device and whether or not the recipient muted the chat.
"""

import uuid
from typing import ClassVar

from django.db import models


class Notification(models.Model):
    """Durable in-app notification record.

    Attributes:
        notification_id: Unique identifier for the record.
        recipient_id: User the record belongs to.
        notification_type: Event type that produced the record.
        title: Rendered alert title.
        body: Rendered alert body.
        data: String-to-string payload used by the client to navigate.
        is_read: Flipped by the client only; the relay always writes False.
        created_at: When the record was written.
    """

    notification_id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the notification",
    )
    recipient_id = models.CharField(
        max_length=128,
        help_text="User receiving the notification",
    )
    notification_type = models.CharField(
        max_length=50,
        db_column="type",
        help_text="Event type discriminator, matches the push data 'type'",
    )
    title = models.CharField(max_length=255)
    body = models.TextField()
    data = models.JSONField(default=dict)
    is_read = models.BooleanField(
        default=False,
        db_column="read",
        help_text="Whether the notification has been read by the user",
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="When the notification was created",
    )

    class Meta:
        """Django model metadata."""

        db_table = "notifications"
        managed = False
        ordering: ClassVar[list[str]] = ["-created_at"]
        indexes: ClassVar[list] = [
            models.Index(fields=["recipient_id", "-created_at"]),
            models.Index(fields=["recipient_id", "is_read", "-created_at"]),
        ]

    def __str__(self) -> str:
        """Return string representation of notification."""
        return f"{self.notification_type} for user {self.recipient_id}"

    def __repr__(self) -> str:
        """Return detailed representation of notification."""
        return (
            f"<Notification(id={self.notification_id}, "
            f"type={self.notification_type}, "
            f"recipient={self.recipient_id}, "
            f"is_read={self.is_read})>"
        )
