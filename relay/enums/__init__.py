"""Enumerations for the relay app."""

from relay.enums.health_status import HealthStatus
from relay.enums.notification import NotificationType, PushChannel

__all__ = ["HealthStatus", "NotificationType", "PushChannel"]
