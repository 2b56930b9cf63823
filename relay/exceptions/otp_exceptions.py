"""Exceptions raised by the one-time code flow."""

from relay.exceptions.relay_exceptions import RelayError


class OtpNotFoundError(RelayError):
    """No active code for the address (400)."""

    status_code = 400
    error_code = "OTP_NOT_FOUND"

    def __init__(self):
        """Initialize OTP not found error."""
        super().__init__("No verification code found. Please request a new one.")


class OtpExpiredError(RelayError):
    """The active code expired before verification (400)."""

    status_code = 400
    error_code = "OTP_EXPIRED"

    def __init__(self):
        """Initialize OTP expired error."""
        super().__init__("Verification code has expired. Please request a new one.")


class OtpExhaustedError(RelayError):
    """Verification attempts for the active code are used up (400)."""

    status_code = 400
    error_code = "TOO_MANY_ATTEMPTS"

    def __init__(self):
        """Initialize OTP exhausted error."""
        super().__init__("Too many failed attempts. Please request a new code.")


class OtpInvalidError(RelayError):
    """Supplied code does not match the active code (400)."""

    status_code = 400
    error_code = "INVALID_OTP"

    def __init__(self, remaining_attempts: int):
        """Initialize invalid OTP error.

        Args:
            remaining_attempts: Attempts left before the code is exhausted
        """
        self.remaining_attempts = remaining_attempts
        super().__init__(
            "Invalid verification code.",
            remainingAttempts=remaining_attempts,
        )


class OtpRateLimitedError(RelayError):
    """A code was issued too recently to send another one (429)."""

    status_code = 429
    error_code = "RATE_LIMITED"

    def __init__(self, retry_after: int):
        """Initialize OTP rate limited error.

        Args:
            retry_after: Seconds until a new code may be requested
        """
        self.retry_after = retry_after
        super().__init__(
            f"Please wait {retry_after} seconds before requesting a new code.",
            retryAfter=retry_after,
        )


class OtpDeliveryError(RelayError):
    """The code could not be mailed (500)."""

    status_code = 500
    error_code = "DELIVERY_FAILED"

    def __init__(self, email: str):
        """Initialize OTP delivery error.

        Args:
            email: Address the code was meant for
        """
        self.email = email
        super().__init__("Failed to send verification code.")
