"""Data access for the relay: directory, social graph and notification store."""

from relay.repositories.directory import Directory, DirectoryEntry, OrmDirectory
from relay.repositories.notification_store import (
    NotificationRecord,
    NotificationStore,
    OrmNotificationStore,
)
from relay.repositories.social_repository import ChatMembers, SocialRepository

__all__ = [
    "ChatMembers",
    "Directory",
    "DirectoryEntry",
    "NotificationRecord",
    "NotificationStore",
    "OrmDirectory",
    "OrmNotificationStore",
    "SocialRepository",
]
