"""Push delivery providers."""

from relay.services.push.fcm_client import FcmClient, PushProvider

__all__ = ["FcmClient", "PushProvider"]
