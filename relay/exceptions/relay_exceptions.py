"""Exceptions raised by the notification relay.

Each exception carries the HTTP status and machine-readable code it maps to,
so the global handler can render it without a lookup table.
"""

from typing import Any


class RelayError(Exception):
    """Base exception for request-level relay failures."""

    status_code = 500
    error_code = "INTERNAL_ERROR"

    def __init__(self, message: str, **extra: Any):
        """Initialize relay error.

        Args:
            message: Error message returned to the client
            **extra: Additional fields merged into the error response body
        """
        self.message = message
        self.extra = extra
        super().__init__(message)


class RequestValidationError(RelayError):
    """Missing or malformed request fields (400)."""

    status_code = 400
    error_code = "VALIDATION_ERROR"


class NotFoundError(RelayError):
    """Referenced recipient, chat or post does not exist (404)."""

    status_code = 404
    error_code = "NOT_FOUND"

    def __init__(self, resource: str, resource_id: str):
        """Initialize not found error.

        Args:
            resource: Kind of resource that was looked up (user, chat, post)
            resource_id: Identifier that could not be resolved
        """
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource.capitalize()} {resource_id} not found")


class NoDeliveryAddressError(RelayError):
    """Recipient exists but has not registered a push token (400)."""

    status_code = 400
    error_code = "NO_DELIVERY_ADDRESS"

    def __init__(self, recipient_id: str):
        """Initialize no delivery address error.

        Args:
            recipient_id: Recipient without a registered push token
        """
        self.recipient_id = recipient_id
        super().__init__(f"User {recipient_id} has no push token")


class ProviderError(RelayError):
    """Push provider rejected or failed a single delivery.

    Counted in the dispatch tally and logged. Never rendered as a response.
    """

    error_code = "PROVIDER_ERROR"

    def __init__(self, message: str, provider_status: int | None = None):
        """Initialize provider error.

        Args:
            message: Provider error description
            provider_status: HTTP status returned by the provider, if any
        """
        self.provider_status = provider_status
        super().__init__(message)


class PersistenceError(RelayError):
    """Notification record could not be written. Logged and skipped."""

    error_code = "PERSISTENCE_ERROR"
