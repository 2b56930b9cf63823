"""Notification request and response schemas."""

from relay.schemas.notification.direct_requests import (
    FriendRequestAcceptedRequest,
    FriendRequestRequest,
    GroupInviteRequest,
    MentionRequest,
    SendNotificationRequest,
)
from relay.schemas.notification.fanout_requests import (
    MessageNotificationRequest,
    NewPostNotificationRequest,
)
from relay.schemas.notification.post_requests import (
    CommentLikeRequest,
    CommentReplyRequest,
    PostCommentRequest,
    PostReactionRequest,
    PostShareRequest,
)
from relay.schemas.notification.responses import (
    BatchDeliveryResponse,
    DirectSendResponse,
    SingleDeliveryResponse,
)

__all__ = [
    "BatchDeliveryResponse",
    "CommentLikeRequest",
    "CommentReplyRequest",
    "DirectSendResponse",
    "FriendRequestAcceptedRequest",
    "FriendRequestRequest",
    "GroupInviteRequest",
    "MentionRequest",
    "MessageNotificationRequest",
    "NewPostNotificationRequest",
    "PostCommentRequest",
    "PostReactionRequest",
    "PostShareRequest",
    "SendNotificationRequest",
    "SingleDeliveryResponse",
]
