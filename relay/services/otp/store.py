"""Volatile storage for one-time code entries.

Entries live for the lifetime of the process only. Each store operation is
atomic; sequences of operations (issue, then verify) are not serialized
against each other, so two concurrent requests for one address can still
interleave between calls.
"""

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from datetime import datetime


@dataclass(frozen=True)
class OtpEntry:
    """Active code for one address."""

    address: str
    code: str
    expires_at: datetime
    created_at: datetime
    attempts: int = 0

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at


class OtpStore(ABC):
    """Key-value store of OTP entries keyed by address."""

    @abstractmethod
    def get(self, address: str) -> OtpEntry | None:
        """Return the entry for ``address``, if any."""

    @abstractmethod
    def put(self, entry: OtpEntry) -> None:
        """Store ``entry``, replacing any entry for the same address."""

    @abstractmethod
    def put_if_absent_or_expired(
        self, entry: OtpEntry, now: datetime, min_age_seconds: float
    ) -> OtpEntry | None:
        """Store ``entry`` unless a live entry younger than ``min_age_seconds`` exists.

        Returns:
            None if ``entry`` was stored, otherwise the blocking entry
        """

    @abstractmethod
    def increment_attempts(self, address: str) -> OtpEntry | None:
        """Add one failed attempt; return the updated entry or None if absent."""

    @abstractmethod
    def delete(self, address: str) -> None:
        """Remove the entry for ``address``; a missing entry is not an error."""


class InMemoryOtpStore(OtpStore):
    """Lock-guarded dict; the process-wide default store."""

    def __init__(self) -> None:
        self._entries: dict[str, OtpEntry] = {}
        self._lock = threading.Lock()

    def get(self, address: str) -> OtpEntry | None:
        with self._lock:
            return self._entries.get(address)

    def put(self, entry: OtpEntry) -> None:
        with self._lock:
            self._entries[entry.address] = entry

    def put_if_absent_or_expired(
        self, entry: OtpEntry, now: datetime, min_age_seconds: float
    ) -> OtpEntry | None:
        with self._lock:
            current = self._entries.get(entry.address)
            if (
                current is not None
                and not current.is_expired(now)
                and (now - current.created_at).total_seconds() < min_age_seconds
            ):
                return current
            self._entries[entry.address] = entry
            return None

    def increment_attempts(self, address: str) -> OtpEntry | None:
        with self._lock:
            current = self._entries.get(address)
            if current is None:
                return None
            updated = replace(current, attempts=current.attempts + 1)
            self._entries[address] = updated
            return updated

    def delete(self, address: str) -> None:
        with self._lock:
            self._entries.pop(address, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
