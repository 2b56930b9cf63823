"""Recipient resolution for notification events."""

from dataclasses import dataclass

import structlog

from relay.events import (
    CommentLike,
    CommentReply,
    DirectSend,
    FriendRequest,
    FriendRequestAccepted,
    GroupInvite,
    Mention,
    NewMessage,
    NewPost,
    NotificationEvent,
    PostComment,
    PostReaction,
    PostShare,
)
from relay.exceptions import NotFoundError
from relay.repositories import SocialRepository

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Resolution:
    """Recipients of one event.

    Attributes:
        recipients: Everyone who should hear about the event, actor excluded
        muted: Recipients who silenced the conversation (new messages only)
        owner_id: Post owner, when it had to be read from the posts table
    """

    recipients: frozenset[str]
    muted: frozenset[str] = frozenset()
    owner_id: str | None = None


class RecipientResolver:
    """Derives the recipient set of an event.

    A recipient is never notified of their own action: the actor is always
    removed. Missing chats and posts raise ``NotFoundError`` before any
    fan-out starts.
    """

    def __init__(self, social_repository: SocialRepository):
        """Initialize recipient resolver.

        Args:
            social_repository: Source of chat members, followers and post owners
        """
        self.social = social_repository

    def resolve(self, event: NotificationEvent) -> Resolution:
        """Resolve the recipients of ``event``.

        Raises:
            NotFoundError: If the chat or post the event refers to is missing
        """
        match event:
            case NewMessage(chat_id=chat_id, sender_id=sender_id):
                chat = self.social.get_chat_members(chat_id)
                if chat is None:
                    logger.warning("chat_not_found", chat_id=chat_id)
                    raise NotFoundError("chat", chat_id)
                recipients = chat.member_ids - {sender_id}
                return Resolution(recipients=recipients, muted=chat.muted_ids)

            case NewPost(user_id=user_id):
                followers = frozenset(self.social.get_follower_ids(user_id))
                return Resolution(recipients=followers - {user_id})

            case PostComment() | PostReaction() | PostShare():
                owner_id = event.owner_id or self._post_owner(event.post_id)
                return Resolution(
                    recipients=self._single(owner_id, event.actor_id),
                    owner_id=owner_id,
                )

            case CommentReply(owner_id=owner_id, actor_id=actor_id) | CommentLike(
                owner_id=owner_id, actor_id=actor_id
            ):
                return Resolution(recipients=self._single(owner_id, actor_id))

            case DirectSend(recipient_id=recipient_id):
                return Resolution(recipients=frozenset({recipient_id}))

            case (
                FriendRequest(recipient_id=recipient_id)
                | FriendRequestAccepted(recipient_id=recipient_id)
                | GroupInvite(recipient_id=recipient_id)
                | Mention(recipient_id=recipient_id)
            ):
                return Resolution(
                    recipients=self._single(recipient_id, event.actor_id)
                )

        raise TypeError(f"Unsupported notification event: {type(event).__name__}")

    def _post_owner(self, post_id: str) -> str:
        owner_id = self.social.get_post_owner(post_id)
        if owner_id is None:
            logger.warning("post_not_found", post_id=post_id)
            raise NotFoundError("post", post_id)
        return owner_id

    @staticmethod
    def _single(recipient_id: str, actor_id: str) -> frozenset[str]:
        if recipient_id == actor_id:
            return frozenset()
        return frozenset({recipient_id})
