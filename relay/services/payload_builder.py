"""Push payload rendering.

Each event variant has one rendering branch in ``build_payload``. The alert
(title and body) must be displayable by the OS on its own when the app is
terminated; the ``data`` map is what a foregrounded app navigates with.
"""

import time
from dataclasses import dataclass
from typing import Any

from django.conf import settings

from relay.constants import (
    DEFAULT_ACTOR_NAME,
    PUSH_ACCENT_COLOR,
    QUOTE_PREVIEW_LENGTH,
    REACTION_EMOJIS,
)
from relay.enums import PushChannel
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


@dataclass(frozen=True)
class PushPayload:
    """Channel-agnostic alert for one event.

    Attributes:
        title: Alert title shown by the OS
        body: Alert body shown by the OS
        data: Navigation payload, string values only
        channel_id: Android notification channel
    """

    title: str
    body: str
    data: dict[str, str]
    channel_id: str = PushChannel.GENERAL.value


def truncate(text: str, limit: int = QUOTE_PREVIEW_LENGTH) -> str:
    """Shorten quoted user text to ``limit`` characters plus an ellipsis."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def reaction_emoji(reaction_type: str | None) -> str:
    """Glyph for a reaction code; unknown codes render as a like."""
    return REACTION_EMOJIS.get(reaction_type or "like", REACTION_EMOJIS["like"])


def _stringify(data: dict[str, Any]) -> dict[str, str]:
    # FCM rejects non-string data values
    return {key: str(value) for key, value in data.items() if value is not None}


def _name(name: str | None) -> str:
    return name or DEFAULT_ACTOR_NAME


def _quote(text: str | None, fallback: str) -> str:
    if not text:
        return fallback
    return f'"{truncate(text)}"'


def build_payload(
    event: NotificationEvent, owner_id: str | None = None
) -> PushPayload:
    """Render the push alert for an event.

    Args:
        event: Event to render
        owner_id: Post owner read from storage, for post events that did not
            carry one

    Returns:
        PushPayload ready to be turned into provider messages
    """
    kind = event.notification_type.value

    match event:
        case DirectSend():
            return PushPayload(
                title=event.title,
                body=event.body,
                data=_stringify({**event.data, "type": event.data.get("type", kind)}),
                channel_id=PushChannel.MESSAGES.value,
            )

        case NewMessage():
            return PushPayload(
                title=event.sender_name or "New message",
                body=event.text or "📷 Photo",
                data=_stringify(
                    {
                        "screen": "Chat_fr",
                        "roomId": event.chat_id,
                        "senderId": event.sender_id,
                        "messageId": event.message_id,
                        "type": kind,
                    }
                ),
                channel_id=PushChannel.MESSAGES.value,
            )

        case FriendRequest():
            return PushPayload(
                title="Friend request",
                body=f"{_name(event.sender_name)} sent you a friend request",
                data=_stringify(
                    {"screen": "FriendRequest", "senderId": event.sender_id, "type": kind}
                ),
                channel_id=PushChannel.FRIEND_REQUESTS.value,
            )

        case FriendRequestAccepted():
            return PushPayload(
                title="Friend request accepted",
                body=f"{_name(event.acceptor_name)} accepted your friend request",
                data=_stringify(
                    {"screen": "Profile", "userId": event.acceptor_id, "type": kind}
                ),
                channel_id=PushChannel.FRIEND_REQUESTS.value,
            )

        case NewPost():
            return PushPayload(
                title="New post",
                body=f"{_name(event.user_name)} published a new post",
                data=_stringify(
                    {
                        "screen": "PostDetail",
                        "postId": event.post_id,
                        "userId": event.user_id,
                        "type": kind,
                    }
                ),
                channel_id=PushChannel.POSTS.value,
            )

        case PostComment():
            return PushPayload(
                title=f"{_name(event.actor_name)} commented on your post",
                body=_quote(event.comment_text, "Tap to read the comment"),
                data=_stringify(
                    {
                        "screen": "PostDetail",
                        "postId": event.post_id,
                        "commentId": event.comment_id,
                        "actorId": event.actor_id,
                        "ownerId": event.owner_id or owner_id,
                        "type": kind,
                    }
                ),
                channel_id=PushChannel.POSTS.value,
            )

        case PostReaction():
            emoji = reaction_emoji(event.reaction_type)
            return PushPayload(
                title="New reaction",
                body=f"{_name(event.actor_name)} reacted {emoji} to your post",
                data=_stringify(
                    {
                        "screen": "PostDetail",
                        "postId": event.post_id,
                        "actorId": event.actor_id,
                        "ownerId": event.owner_id or owner_id,
                        "reactionType": event.reaction_type or "like",
                        "type": kind,
                    }
                ),
                channel_id=PushChannel.POSTS.value,
            )

        case PostShare():
            return PushPayload(
                title="Post shared",
                body=f"{_name(event.actor_name)} shared your post",
                data=_stringify(
                    {
                        "screen": "PostDetail",
                        "postId": event.post_id,
                        "actorId": event.actor_id,
                        "ownerId": event.owner_id or owner_id,
                        "type": kind,
                    }
                ),
                channel_id=PushChannel.POSTS.value,
            )

        case CommentReply():
            return PushPayload(
                title=f"{_name(event.actor_name)} replied to your comment",
                body=_quote(event.reply_text, "Tap to read the reply"),
                data=_stringify(
                    {
                        "screen": "PostDetail",
                        "postId": event.post_id,
                        "commentId": event.comment_id,
                        "actorId": event.actor_id,
                        "type": kind,
                    }
                ),
                channel_id=PushChannel.POSTS.value,
            )

        case CommentLike():
            return PushPayload(
                title="Comment liked",
                body=f"{_name(event.actor_name)} liked your comment",
                data=_stringify(
                    {
                        "screen": "PostDetail",
                        "postId": event.post_id,
                        "commentId": event.comment_id,
                        "actorId": event.actor_id,
                        "type": kind,
                    }
                ),
                channel_id=PushChannel.POSTS.value,
            )

        case GroupInvite():
            group = event.group_name or "a group"
            return PushPayload(
                title="Group invitation",
                body=f"{_name(event.inviter_name)} invited you to join {group}",
                data=_stringify(
                    {
                        "screen": "GroupChat",
                        "groupId": event.group_id,
                        "inviterId": event.inviter_id,
                        "type": kind,
                    }
                ),
                channel_id=PushChannel.GROUPS.value,
            )

        case Mention():
            where = "a comment" if event.target == "comment" else "a post"
            return PushPayload(
                title="You were mentioned",
                body=f"{_name(event.mentioner_name)} mentioned you in {where}",
                data=_stringify(
                    {
                        "screen": "PostDetail",
                        "postId": event.post_id,
                        "commentId": event.comment_id,
                        "mentionerId": event.mentioner_id,
                        "target": event.target,
                        "type": kind,
                    }
                ),
                channel_id=PushChannel.POSTS.value,
            )

    raise TypeError(f"Unsupported notification event: {type(event).__name__}")


def build_message(payload: PushPayload, token: str) -> dict[str, Any]:
    """Build one FCM HTTP v1 message for a device token.

    Delivery hints ask for immediate high-priority delivery with sound and
    vibration, bounded by ``PUSH_TTL_SECONDS``, on both Android and APNs.
    """
    ttl = getattr(settings, "PUSH_TTL_SECONDS", 3600)
    return {
        "token": token,
        "notification": {"title": payload.title, "body": payload.body},
        "data": dict(payload.data),
        "android": {
            "priority": "high",
            "ttl": f"{ttl}s",
            "notification": {
                "sound": "default",
                "default_vibrate_timings": True,
                "color": PUSH_ACCENT_COLOR,
                "channel_id": payload.channel_id,
            },
        },
        "apns": {
            "headers": {
                "apns-priority": "10",
                "apns-expiration": str(int(time.time()) + ttl),
            },
            "payload": {
                "aps": {
                    "sound": "default",
                    "badge": 1,
                    "content-available": 1,
                }
            },
        },
    }
