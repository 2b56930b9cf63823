"""Services for the relay app."""

from relay.services.email_service import EmailService
from relay.services.health_service import HealthService, health_service

__all__ = [
    "EmailService",
    "HealthService",
    "health_service",
]
