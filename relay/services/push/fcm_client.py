"""Firebase Cloud Messaging client (HTTP v1 API).

This client handles:
- Service account credentials from settings or the environment
- Bearer token refresh shared between fan-out worker threads
- One ``messages:send`` call per device token
"""

import threading
from abc import ABC, abstractmethod
from typing import Any

from django.conf import settings

import google.auth
import requests
import structlog
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request as GoogleAuthRequest
from google.oauth2 import service_account

from relay.constants import FCM_SCOPE, FCM_SEND_URL
from relay.exceptions import ProviderError

logger = structlog.get_logger(__name__)


class PushProvider(ABC):
    """External push delivery provider."""

    @abstractmethod
    def send(self, message: dict[str, Any]) -> str:
        """Deliver one message to one device.

        Args:
            message: Provider message, including the target token

        Returns:
            Provider-assigned message id

        Raises:
            ProviderError: If the provider rejected or failed the delivery
        """


class FcmClient(PushProvider):
    """Push provider backed by the FCM HTTP v1 API."""

    def __init__(
        self,
        project_id: str | None = None,
        credentials: Any = None,
        timeout: int | None = None,
    ):
        """Initialize FCM client.

        Args:
            project_id: Firebase project id (default: ``FCM_PROJECT_ID``)
            credentials: google-auth credentials; loaded lazily when omitted
            timeout: HTTP timeout in seconds (default: ``PUSH_REQUEST_TIMEOUT``)
        """
        self.project_id = project_id or getattr(settings, "FCM_PROJECT_ID", None)
        self.timeout = timeout or getattr(settings, "PUSH_REQUEST_TIMEOUT", 10)
        self._credentials = credentials
        self._lock = threading.Lock()

    @property
    def send_url(self) -> str:
        return FCM_SEND_URL.format(project_id=self.project_id)

    def _load_credentials(self) -> Any:
        """Load credentials from ``FIREBASE_SERVICE_ACCOUNT`` or ADC.

        Raises:
            GoogleAuthError: If no usable credentials are configured
        """
        info = getattr(settings, "FIREBASE_SERVICE_ACCOUNT", None)
        if info:
            logger.info("Loading Firebase service account from settings")
            credentials = service_account.Credentials.from_service_account_info(
                info, scopes=[FCM_SCOPE]
            )
            if not self.project_id:
                self.project_id = info.get("project_id")
            return credentials

        logger.info("Loading Google application default credentials")
        credentials, project_id = google.auth.default(scopes=[FCM_SCOPE])
        if not self.project_id:
            self.project_id = project_id
        return credentials

    def get_access_token(self) -> str:
        """Return a valid bearer token, refreshing it when it has expired.

        Raises:
            ProviderError: If credentials cannot be loaded or refreshed
        """
        with self._lock:
            try:
                if self._credentials is None:
                    self._credentials = self._load_credentials()
                if not self._credentials.valid:
                    logger.debug("Refreshing FCM access token")
                    self._credentials.refresh(GoogleAuthRequest())
            except GoogleAuthError as e:
                logger.error("Failed to obtain FCM access token", error=str(e))
                raise ProviderError(f"FCM authentication failed: {e}") from e
            return self._credentials.token

    def send(self, message: dict[str, Any]) -> str:
        """Send one message through ``messages:send``.

        Raises:
            ProviderError: On transport errors and non-2xx responses
        """
        headers = {
            "Authorization": f"Bearer {self.get_access_token()}",
            "Content-Type": "application/json",
        }

        try:
            response = requests.post(
                self.send_url,
                json={"message": message},
                headers=headers,
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            logger.warning("FCM request timed out", timeout=self.timeout)
            raise ProviderError(f"FCM request timed out after {self.timeout}s") from e
        except requests.RequestException as e:
            logger.warning("FCM request failed", error=str(e))
            raise ProviderError(f"FCM request failed: {e}") from e

        if response.status_code >= 400:
            logger.warning(
                "FCM rejected message",
                status_code=response.status_code,
                response_text=response.text,
            )
            raise ProviderError(
                f"FCM returned {response.status_code}: {response.text}",
                provider_status=response.status_code,
            )

        try:
            return response.json().get("name", "")
        except ValueError as e:
            logger.warning(
                "FCM returned an unreadable response",
                status_code=response.status_code,
                response_text=response.text,
            )
            raise ProviderError(
                f"FCM returned an unreadable response: {response.text}",
                provider_status=response.status_code,
            ) from e
