"""Exception types and handlers for the notification relay."""

from relay.exceptions.otp_exceptions import (
    OtpDeliveryError,
    OtpExhaustedError,
    OtpExpiredError,
    OtpInvalidError,
    OtpNotFoundError,
    OtpRateLimitedError,
)
from relay.exceptions.relay_exceptions import (
    NoDeliveryAddressError,
    NotFoundError,
    PersistenceError,
    ProviderError,
    RelayError,
    RequestValidationError,
)

__all__ = [
    "NoDeliveryAddressError",
    "NotFoundError",
    "OtpDeliveryError",
    "OtpExhaustedError",
    "OtpExpiredError",
    "OtpInvalidError",
    "OtpNotFoundError",
    "OtpRateLimitedError",
    "PersistenceError",
    "ProviderError",
    "RelayError",
    "RequestValidationError",
]
