"""Address lookup: recipient ids to push tokens."""

from collections.abc import Iterable
from dataclasses import dataclass, field

import structlog

from relay.exceptions import NoDeliveryAddressError, NotFoundError
from relay.repositories import Directory
from relay.services.fanout import run_all

logger = structlog.get_logger(__name__)


@dataclass
class AddressBook:
    """Outcome of a batch lookup.

    Attributes:
        addresses: Recipient id to push token, only for recipients with a token
        unknown: Ids the directory does not know at all
        unregistered: Known ids without a registered token
        failed: Ids whose lookup raised (treated like "no address")
    """

    addresses: dict[str, str] = field(default_factory=dict)
    unknown: set[str] = field(default_factory=set)
    unregistered: set[str] = field(default_factory=set)
    failed: set[str] = field(default_factory=set)

    def for_recipients(self, recipient_ids: Iterable[str]) -> dict[str, str]:
        """Return the addresses of the given subset of recipients."""
        return {
            rid: self.addresses[rid] for rid in recipient_ids if rid in self.addresses
        }


class AddressLookup:
    """Resolves recipients to delivery addresses through a Directory."""

    def __init__(self, directory: Directory):
        """Initialize address lookup.

        Args:
            directory: Directory used to resolve recipient ids
        """
        self.directory = directory

    def lookup_one(self, recipient_id: str) -> str:
        """Resolve a single recipient that must be reachable.

        Raises:
            NotFoundError: If the recipient is unknown
            NoDeliveryAddressError: If the recipient has no push token
        """
        entry = self.directory.resolve(recipient_id)
        if not entry.exists:
            logger.warning("recipient_not_found", recipient_id=recipient_id)
            raise NotFoundError("user", recipient_id)
        if not entry.has_address:
            logger.info("recipient_has_no_push_token", recipient_id=recipient_id)
            raise NoDeliveryAddressError(recipient_id)
        return entry.address

    def lookup_many(self, recipient_ids: Iterable[str]) -> AddressBook:
        """Resolve a batch of recipients concurrently.

        Unknown ids are logged as a data-consistency warning, recipients
        without a token are skipped silently; neither fails the batch.
        """
        ids = sorted(set(recipient_ids))
        outcomes = run_all(
            [lambda rid=rid: self.directory.resolve(rid) for rid in ids]
        )

        book = AddressBook()
        for rid, outcome in zip(ids, outcomes, strict=True):
            if not outcome.is_success:
                logger.warning(
                    "recipient_lookup_failed",
                    recipient_id=rid,
                    error=str(outcome.error),
                )
                book.failed.add(rid)
            elif not outcome.value.exists:
                book.unknown.add(rid)
            elif not outcome.value.has_address:
                book.unregistered.add(rid)
            else:
                book.addresses[rid] = outcome.value.address

        if book.unknown:
            logger.warning(
                "recipients_missing_from_directory",
                recipient_ids=sorted(book.unknown),
            )

        logger.info(
            "addresses_resolved",
            requested=len(ids),
            with_address=len(book.addresses),
            unregistered=len(book.unregistered),
            unknown=len(book.unknown),
        )
        return book
