"""URL routing configuration for the relay application."""

from django.urls import path

from .views import (
    CommentLikeNotificationView,
    CommentReplyNotificationView,
    FriendRequestAcceptedNotificationView,
    FriendRequestNotificationView,
    GroupInviteNotificationView,
    LivenessCheckView,
    MentionNotificationView,
    MessageNotificationView,
    NewPostNotificationView,
    OtpResendView,
    OtpSendView,
    OtpVerifyView,
    PostCommentNotificationView,
    PostReactionNotificationView,
    PostShareNotificationView,
    ReadinessCheckView,
    SendNotificationView,
    ServiceInfoView,
)

urlpatterns = [
    # Service status
    path("", ServiceInfoView.as_view(), name="service-info"),
    path("health", LivenessCheckView.as_view(), name="health"),
    path("health/ready", ReadinessCheckView.as_view(), name="health-ready"),
    # Direct push
    path(
        "api/send-notification",
        SendNotificationView.as_view(),
        name="send-notification",
    ),
    # Event notifications
    path(
        "api/notify/message",
        MessageNotificationView.as_view(),
        name="notify-message",
    ),
    path(
        "api/notify/friend-request",
        FriendRequestNotificationView.as_view(),
        name="notify-friend-request",
    ),
    path(
        "api/notify/friend-request-accepted",
        FriendRequestAcceptedNotificationView.as_view(),
        name="notify-friend-request-accepted",
    ),
    path(
        "api/notify/new-post",
        NewPostNotificationView.as_view(),
        name="notify-new-post",
    ),
    path(
        "api/notify/post-comment",
        PostCommentNotificationView.as_view(),
        name="notify-post-comment",
    ),
    path(
        "api/notify/post-reaction",
        PostReactionNotificationView.as_view(),
        name="notify-post-reaction",
    ),
    path(
        "api/notify/post-share",
        PostShareNotificationView.as_view(),
        name="notify-post-share",
    ),
    path(
        "api/notify/comment-reply",
        CommentReplyNotificationView.as_view(),
        name="notify-comment-reply",
    ),
    path(
        "api/notify/comment-like",
        CommentLikeNotificationView.as_view(),
        name="notify-comment-like",
    ),
    path(
        "api/notify/group-invite",
        GroupInviteNotificationView.as_view(),
        name="notify-group-invite",
    ),
    path(
        "api/notify/mention",
        MentionNotificationView.as_view(),
        name="notify-mention",
    ),
    # One-time codes
    path("api/otp/send", OtpSendView.as_view(), name="otp-send"),
    path("api/otp/verify", OtpVerifyView.as_view(), name="otp-verify"),
    path("api/otp/resend", OtpResendView.as_view(), name="otp-resend"),
]
