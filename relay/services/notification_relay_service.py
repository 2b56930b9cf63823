"""Service relaying application events to push alerts and in-app records."""

import structlog

from relay.events import (
    DirectSend,
    NewMessage,
    NewPost,
    NotificationEvent,
)
from relay.exceptions import NoDeliveryAddressError
from relay.repositories import OrmDirectory, OrmNotificationStore, SocialRepository
from relay.schemas.notification import (
    BatchDeliveryResponse,
    DirectSendResponse,
    SingleDeliveryResponse,
)
from relay.services import mute_filter
from relay.services.address_lookup import AddressLookup
from relay.services.dispatcher import DispatchResult, Dispatcher
from relay.services.fanout import run_all
from relay.services.payload_builder import PushPayload, build_payload
from relay.services.persistence_writer import PersistenceWriter
from relay.services.push import FcmClient
from relay.services.recipient_resolver import RecipientResolver

logger = structlog.get_logger(__name__)


class NotificationRelayService:
    """Service for handling notification relay business logic.

    Every event goes through the same pipeline: resolve recipients, look up
    their push tokens, then push and persist side by side. Push and
    persistence are joined before returning, and neither one's failures
    stop the other.
    """

    def __init__(
        self,
        resolver: RecipientResolver | None = None,
        address_lookup: AddressLookup | None = None,
        dispatcher: Dispatcher | None = None,
        writer: PersistenceWriter | None = None,
    ):
        """Initialize notification relay service.

        Args:
            resolver: Recipient resolver (default: ORM-backed)
            address_lookup: Push token lookup (default: ORM-backed)
            dispatcher: Push dispatcher (default: FCM)
            writer: In-app record writer (default: ORM-backed)
        """
        self.resolver = resolver or RecipientResolver(SocialRepository())
        self.address_lookup = address_lookup or AddressLookup(OrmDirectory())
        self.dispatcher = dispatcher or Dispatcher(FcmClient())
        self.writer = writer or PersistenceWriter(OrmNotificationStore())

    def send_direct(self, event: DirectSend) -> DirectSendResponse:
        """Send a caller-authored push to one user.

        A provider rejection is reported as ``sent=0, total=1``.

        Raises:
            NotFoundError: If the recipient does not exist
            NoDeliveryAddressError: If the recipient has no push token
        """
        logger.info("Sending direct notification", recipient_id=event.recipient_id)
        payload = build_payload(event)
        message_id = self._deliver_one(event, payload, event.recipient_id)
        if message_id is None:
            return DirectSendResponse(recipient_id=event.recipient_id, sent=0, total=1)
        return DirectSendResponse(message_id=message_id, recipient_id=event.recipient_id)

    def notify_single(self, event: NotificationEvent) -> SingleDeliveryResponse:
        """Notify the single target of a social event.

        Used for friend requests, group invites, mentions and interactions
        on posts and comments. When the actor is the target nothing is sent
        and no collaborator is called.

        Raises:
            NotFoundError: If the target (or the post) does not exist
            NoDeliveryAddressError: If the target has no push token
        """
        notification_type = event.notification_type.value
        resolution = self.resolver.resolve(event)

        if not resolution.recipients:
            logger.info(
                "Skipping self-action notification",
                notification_type=notification_type,
                actor_id=event.actor_id,
            )
            return SingleDeliveryResponse(sent=0)

        (recipient_id,) = resolution.recipients
        logger.info(
            "Relaying notification",
            notification_type=notification_type,
            recipient_id=recipient_id,
            actor_id=event.actor_id,
        )
        payload = build_payload(event, owner_id=resolution.owner_id)
        message_id = self._deliver_one(event, payload, recipient_id)
        if message_id is None:
            return SingleDeliveryResponse(sent=0, total=1)
        return SingleDeliveryResponse(message_id=message_id)

    def notify_new_message(self, event: NewMessage) -> BatchDeliveryResponse:
        """Notify every other member of a chat about a new message.

        Members who muted the chat are persisted but not pushed.

        Raises:
            NotFoundError: If the chat does not exist
        """
        resolution = self.resolver.resolve(event)
        split = mute_filter.split(resolution.recipients, resolution.muted)
        logger.info(
            "Relaying chat message notification",
            chat_id=event.chat_id,
            recipient_count=len(split.persist),
            muted_count=split.muted_count,
        )

        dispatched, saved = self._fan_out(event, build_payload(event), split)
        return BatchDeliveryResponse(
            sent=dispatched.sent,
            total=dispatched.total,
            saved=saved,
            muted_count=split.muted_count,
        )

    def notify_new_post(self, event: NewPost) -> BatchDeliveryResponse:
        """Notify every follower of the author about a new post.

        An author without followers is not an error: the response reports
        ``sent=0``.
        """
        resolution = self.resolver.resolve(event)
        split = mute_filter.split(resolution.recipients)
        logger.info(
            "Relaying new post notification",
            post_id=event.post_id,
            follower_count=len(split.persist),
        )

        dispatched, saved = self._fan_out(event, build_payload(event), split)
        return BatchDeliveryResponse(
            sent=dispatched.sent, total=dispatched.total, saved=saved
        )

    def _deliver_one(
        self, event: NotificationEvent, payload: PushPayload, recipient_id: str
    ) -> str | None:
        """Push to one recipient while writing their record.

        A recipient without a token still gets the in-app record before the
        error is raised; an unknown recipient gets nothing.

        Returns:
            Provider message id, or None when the push failed
        """
        notification_type = event.notification_type.value

        try:
            address = self.address_lookup.lookup_one(recipient_id)
        except NoDeliveryAddressError:
            self.writer.write_all(notification_type, payload, [recipient_id])
            raise

        push, persist = run_all(
            [
                lambda: self.dispatcher.send_one(payload, address),
                lambda: self.writer.write_all(
                    notification_type, payload, [recipient_id]
                ),
            ]
        )
        if not persist.is_success:
            logger.error(
                "Notification record writer failed",
                recipient_id=recipient_id,
                error=str(persist.error),
            )
        if not push.is_success:
            logger.warning(
                "Push delivery failed",
                recipient_id=recipient_id,
                error=str(push.error),
            )
            return None
        return push.value

    def _fan_out(
        self,
        event: NotificationEvent,
        payload: PushPayload,
        split: mute_filter.MuteSplit,
    ) -> tuple[DispatchResult, int]:
        """Dispatch to the push-eligible subset and persist for everyone."""
        if not split.persist:
            return DispatchResult(), 0

        book = self.address_lookup.lookup_many(split.push_eligible)
        addresses = book.for_recipients(split.push_eligible)

        push, persist = run_all(
            [
                lambda: self.dispatcher.dispatch(payload, addresses),
                lambda: self.writer.write_all(
                    event.notification_type.value, payload, split.persist
                ),
            ]
        )

        if not persist.is_success:
            logger.error(
                "Notification record writer failed",
                notification_type=event.notification_type.value,
                error=str(persist.error),
            )
        if not push.is_success:
            raise push.error

        return push.value, persist.value if persist.is_success else 0


notification_relay_service = NotificationRelayService()
