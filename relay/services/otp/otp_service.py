"""Issuance and verification of one-time email verification codes."""

import math
import secrets
import smtplib
from collections.abc import Callable
from datetime import datetime, timedelta

from django.conf import settings
from django.utils import timezone

import structlog

from relay.exceptions import (
    OtpDeliveryError,
    OtpExhaustedError,
    OtpExpiredError,
    OtpInvalidError,
    OtpNotFoundError,
    OtpRateLimitedError,
    RequestValidationError,
)
from relay.schemas.otp import OtpIssuedResponse, OtpVerifiedResponse
from relay.services.email_service import EmailService, is_valid_email
from relay.services.otp.store import InMemoryOtpStore, OtpEntry, OtpStore

logger = structlog.get_logger(__name__)

OTP_EMAIL_SUBJECT = "Your verification code"
OTP_EMAIL_TEMPLATE = "emails/otp_code.html"


class OtpService:
    """Service for the one-time code state machine.

    An address is either absent or has exactly one active entry. Issuing
    or resending replaces the entry; a successful, expired or exhausted
    verification removes it.
    """

    def __init__(
        self,
        store: OtpStore | None = None,
        email_service: EmailService | None = None,
        clock: Callable[[], datetime] = timezone.now,
    ):
        """Initialize OTP service.

        Args:
            store: Entry store (default: process-wide in-memory store)
            email_service: Mail transport for the code (default: SMTP)
            clock: Source of the current time
        """
        self.store = store or InMemoryOtpStore()
        self.email_service = email_service or EmailService()
        self.clock = clock
        self.expiry_seconds = settings.OTP_EXPIRY_SECONDS
        self.max_attempts = settings.OTP_MAX_ATTEMPTS
        self.cooldown_seconds = settings.OTP_RESEND_COOLDOWN_SECONDS
        self.code_length = getattr(settings, "OTP_CODE_LENGTH", 6)

    def send(self, email: str) -> OtpIssuedResponse:
        """Issue a code unless one was issued within the cooldown.

        Raises:
            RequestValidationError: If the address is malformed
            OtpRateLimitedError: If the active code is younger than the cooldown
            OtpDeliveryError: If the code could not be mailed
        """
        address = self._normalize(email)
        now = self.clock()
        entry = self._new_entry(address, now)

        blocking = self.store.put_if_absent_or_expired(
            entry, now, min_age_seconds=self.cooldown_seconds
        )
        if blocking is not None:
            age = (now - blocking.created_at).total_seconds()
            retry_after = max(1, math.ceil(self.cooldown_seconds - age))
            logger.info("OTP request rate limited", retry_after=retry_after)
            raise OtpRateLimitedError(retry_after)

        self._deliver(entry)
        logger.info("OTP issued", expires_in=self.expiry_seconds)
        return OtpIssuedResponse(expires_in=self.expiry_seconds)

    def resend(self, email: str) -> OtpIssuedResponse:
        """Replace any active code with a fresh one, ignoring the cooldown.

        Raises:
            RequestValidationError: If the address is malformed
            OtpDeliveryError: If the code could not be mailed
        """
        address = self._normalize(email)
        entry = self._new_entry(address, self.clock())

        self.store.delete(address)
        self.store.put(entry)

        self._deliver(entry)
        logger.info("OTP reissued", expires_in=self.expiry_seconds)
        return OtpIssuedResponse(expires_in=self.expiry_seconds)

    def verify(self, email: str, otp: str) -> OtpVerifiedResponse:
        """Check a code against the active entry for the address.

        Raises:
            OtpNotFoundError: If no code is active
            OtpExpiredError: If the active code expired (entry removed)
            OtpExhaustedError: If attempts are used up (entry removed)
            OtpInvalidError: If the code does not match (attempt counted)
        """
        address = self._normalize(email, validate=False)
        entry = self.store.get(address)
        if entry is None:
            raise OtpNotFoundError()

        if entry.is_expired(self.clock()):
            self.store.delete(address)
            logger.info("OTP expired")
            raise OtpExpiredError()

        if entry.attempts >= self.max_attempts:
            self.store.delete(address)
            logger.warning("OTP attempts exhausted", attempts=entry.attempts)
            raise OtpExhaustedError()

        if not secrets.compare_digest((otp or "").strip(), entry.code):
            updated = self.store.increment_attempts(address)
            if updated is None:
                raise OtpNotFoundError()
            remaining = max(0, self.max_attempts - updated.attempts)
            logger.info("OTP mismatch", remaining_attempts=remaining)
            raise OtpInvalidError(remaining)

        self.store.delete(address)
        logger.info("OTP verified")
        return OtpVerifiedResponse()

    def generate_code(self) -> str:
        """Return a uniformly random numeric code of ``code_length`` digits."""
        return f"{secrets.randbelow(10**self.code_length):0{self.code_length}d}"

    def _new_entry(self, address: str, now: datetime) -> OtpEntry:
        return OtpEntry(
            address=address,
            code=self.generate_code(),
            expires_at=now + timedelta(seconds=self.expiry_seconds),
            created_at=now,
        )

    def _normalize(self, email: str, validate: bool = True) -> str:
        address = (email or "").strip().lower()
        if validate and not is_valid_email(address):
            raise RequestValidationError("Invalid email format")
        return address

    def _deliver(self, entry: OtpEntry) -> None:
        """Mail the code. The stored entry is kept even if mailing fails."""
        try:
            self.email_service.send_template_email(
                to_email=entry.address,
                subject=OTP_EMAIL_SUBJECT,
                template_name=OTP_EMAIL_TEMPLATE,
                context={
                    "code": entry.code,
                    "expiry_minutes": self.expiry_seconds // 60,
                    "service_name": settings.SERVICE_DISPLAY_NAME,
                },
            )
        except (ValueError, smtplib.SMTPException, OSError) as e:
            logger.error("Failed to send OTP email", error=str(e))
            raise OtpDeliveryError(entry.address) from e


otp_service = OtpService()
