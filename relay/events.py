"""Notification events relayed by the service.

``NotificationEvent`` is a closed union: every consumer (recipient resolver,
payload builder) handles it with an exhaustive ``match``. Events are built
from validated request schemas and never stored.
"""

from dataclasses import dataclass, field
from typing import ClassVar

from relay.enums import NotificationType


@dataclass(frozen=True)
class DirectSend:
    """Caller-authored alert for one user."""

    notification_type: ClassVar[NotificationType] = NotificationType.DIRECT_SEND

    recipient_id: str
    title: str
    body: str
    data: dict[str, str] = field(default_factory=dict)

    @property
    def actor_id(self) -> str | None:
        return None


@dataclass(frozen=True)
class NewMessage:
    """A chat message was sent; every other member is notified."""

    notification_type: ClassVar[NotificationType] = NotificationType.NEW_MESSAGE

    chat_id: str
    sender_id: str
    sender_name: str | None = None
    text: str | None = None
    message_id: str | None = None

    @property
    def actor_id(self) -> str:
        return self.sender_id


@dataclass(frozen=True)
class FriendRequest:
    notification_type: ClassVar[NotificationType] = NotificationType.FRIEND_REQUEST

    recipient_id: str
    sender_id: str
    sender_name: str | None = None

    @property
    def actor_id(self) -> str:
        return self.sender_id


@dataclass(frozen=True)
class FriendRequestAccepted:
    notification_type: ClassVar[NotificationType] = (
        NotificationType.FRIEND_REQUEST_ACCEPTED
    )

    recipient_id: str
    acceptor_id: str
    acceptor_name: str | None = None

    @property
    def actor_id(self) -> str:
        return self.acceptor_id


@dataclass(frozen=True)
class NewPost:
    """A user published a post; all of their followers are notified."""

    notification_type: ClassVar[NotificationType] = NotificationType.NEW_POST

    post_id: str
    user_id: str
    user_name: str | None = None

    @property
    def actor_id(self) -> str:
        return self.user_id


@dataclass(frozen=True)
class PostComment:
    notification_type: ClassVar[NotificationType] = NotificationType.POST_COMMENT

    post_id: str
    actor_id: str
    owner_id: str | None = None
    actor_name: str | None = None
    comment_text: str | None = None
    comment_id: str | None = None


@dataclass(frozen=True)
class PostReaction:
    notification_type: ClassVar[NotificationType] = NotificationType.POST_REACTION

    post_id: str
    actor_id: str
    owner_id: str | None = None
    actor_name: str | None = None
    reaction_type: str | None = None


@dataclass(frozen=True)
class PostShare:
    notification_type: ClassVar[NotificationType] = NotificationType.POST_SHARE

    post_id: str
    actor_id: str
    owner_id: str | None = None
    actor_name: str | None = None


@dataclass(frozen=True)
class CommentReply:
    """Someone replied to a comment; ``owner_id`` is the comment author."""

    notification_type: ClassVar[NotificationType] = NotificationType.COMMENT_REPLY

    post_id: str
    comment_id: str
    owner_id: str
    actor_id: str
    actor_name: str | None = None
    reply_text: str | None = None


@dataclass(frozen=True)
class CommentLike:
    """Someone liked a comment; ``owner_id`` is the comment author."""

    notification_type: ClassVar[NotificationType] = NotificationType.COMMENT_LIKE

    post_id: str
    comment_id: str
    owner_id: str
    actor_id: str
    actor_name: str | None = None


@dataclass(frozen=True)
class GroupInvite:
    notification_type: ClassVar[NotificationType] = NotificationType.GROUP_INVITE

    recipient_id: str
    group_id: str
    inviter_id: str
    group_name: str | None = None
    inviter_name: str | None = None

    @property
    def actor_id(self) -> str:
        return self.inviter_id


@dataclass(frozen=True)
class Mention:
    """A user was mentioned in a post or a comment (``target``)."""

    notification_type: ClassVar[NotificationType] = NotificationType.MENTION

    recipient_id: str
    mentioner_id: str
    mentioner_name: str | None = None
    post_id: str | None = None
    comment_id: str | None = None
    target: str = "post"

    @property
    def actor_id(self) -> str:
        return self.mentioner_id


NotificationEvent = (
    DirectSend
    | NewMessage
    | FriendRequest
    | FriendRequestAccepted
    | NewPost
    | PostComment
    | PostReaction
    | PostShare
    | CommentReply
    | CommentLike
    | GroupInvite
    | Mention
)

# Events addressed to the owner of a post or comment
OwnerTargetedEvent = PostComment | PostReaction | PostShare | CommentReply | CommentLike
