"""Django application configuration for the relay."""

import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class RelayConfig(AppConfig):
    """Configuration class for the relay application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "relay"

    def ready(self) -> None:
        """Configure structured logging once the app registry is loaded."""
        if getattr(settings, "TEST_MODE", False):
            return

        from relay.logging import setup_logging  # noqa: PLC0415

        setup_logging()
        logger.info("Notification relay initialized")
