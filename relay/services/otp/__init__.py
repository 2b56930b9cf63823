"""One-time code issuance and verification."""

from relay.services.otp.otp_service import OtpService, otp_service
from relay.services.otp.store import InMemoryOtpStore, OtpEntry, OtpStore

__all__ = ["InMemoryOtpStore", "OtpEntry", "OtpService", "OtpStore", "otp_service"]
