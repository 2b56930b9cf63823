"""ASGI config for the notification relay service."""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "notification_relay.settings")

application = get_asgi_application()
