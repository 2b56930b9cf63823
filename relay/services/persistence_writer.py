"""Writes in-app notification records for a recipient set."""

from collections.abc import Iterable

import structlog

from relay.repositories import NotificationRecord, NotificationStore
from relay.services.fanout import run_all
from relay.services.payload_builder import PushPayload

logger = structlog.get_logger(__name__)


class PersistenceWriter:
    """Stores one record per recipient, independently of push delivery."""

    def __init__(self, store: NotificationStore):
        """Initialize persistence writer.

        Args:
            store: Store the records are appended to
        """
        self.store = store

    def write_all(
        self,
        notification_type: str,
        payload: PushPayload,
        recipients: Iterable[str],
    ) -> int:
        """Write one record per recipient.

        A failed write is logged and skipped; it never stops sibling writes
        or fails the request.

        Args:
            notification_type: Event type stored on each record
            payload: Rendered alert whose title, body and data are stored
            recipients: Persistence subset (mute state ignored)

        Returns:
            Number of records written
        """
        records = [
            NotificationRecord(
                recipient_id=rid,
                notification_type=notification_type,
                title=payload.title,
                body=payload.body,
                data=dict(payload.data),
            )
            for rid in sorted(set(recipients))
        ]
        if not records:
            return 0

        outcomes = run_all(
            [lambda record=record: self.store.append(record) for record in records]
        )

        saved = 0
        for record, outcome in zip(records, outcomes, strict=True):
            if outcome.is_success:
                saved += 1
            else:
                logger.error(
                    "Failed to save notification record",
                    recipient_id=record.recipient_id,
                    notification_type=notification_type,
                    error=str(outcome.error),
                )

        logger.info(
            "Notification records saved",
            notification_type=notification_type,
            saved=saved,
            total=len(records),
        )
        return saved
