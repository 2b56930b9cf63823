"""Durable store for in-app notification records."""

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime

from django.db import DatabaseError
from django.utils import timezone

from relay.exceptions import PersistenceError
from relay.models import Notification


@dataclass(frozen=True)
class NotificationRecord:
    """In-app notification as handed to the store.

    Records are immutable once written; only the client flips ``read``.
    """

    recipient_id: str
    notification_type: str
    title: str
    body: str
    data: dict[str, str]
    read: bool = False
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=timezone.now)


class NotificationStore(ABC):
    """Append-only sink for notification records."""

    @abstractmethod
    def append(self, record: NotificationRecord) -> uuid.UUID:
        """Write one record and return its id.

        Raises:
            PersistenceError: If the record could not be written
        """


class OrmNotificationStore(NotificationStore):
    """Notification store backed by the ``notifications`` table."""

    def append(self, record: NotificationRecord) -> uuid.UUID:
        """Insert the record as a new ``Notification`` row.

        Database errors are re-raised as ``PersistenceError`` so the writer
        can count them without knowing about Django.
        """
        try:
            Notification.objects.create(
                notification_id=record.id,
                recipient_id=record.recipient_id,
                notification_type=record.notification_type,
                title=record.title,
                body=record.body,
                data=record.data,
                is_read=record.read,
            )
        except DatabaseError as e:
            raise PersistenceError(
                f"Failed to store notification for {record.recipient_id}: {e}"
            ) from e
        return record.id
