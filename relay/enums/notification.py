"""Notification-related enumerations.

``NotificationType`` values travel to the mobile client in the ``type`` key
of the push data payload and are stored on every notification record, so
they must stay in sync with the client's navigation handlers.
"""

from enum import Enum


class NotificationType(str, Enum):
    """Event types relayed by the service."""

    DIRECT_SEND = "direct_send"
    NEW_MESSAGE = "new_message"
    FRIEND_REQUEST = "friend_request"
    FRIEND_REQUEST_ACCEPTED = "friend_request_accepted"
    NEW_POST = "new_post"
    POST_COMMENT = "post_comment"
    POST_REACTION = "post_reaction"
    POST_SHARE = "post_share"
    COMMENT_REPLY = "comment_reply"
    COMMENT_LIKE = "comment_like"
    GROUP_INVITE = "group_invite"
    MENTION = "mention"


class PushChannel(str, Enum):
    """Android notification channels registered by the mobile client."""

    MESSAGES = "messages"
    FRIEND_REQUESTS = "friend_requests"
    POSTS = "posts"
    GROUPS = "groups"
    GENERAL = "general"
