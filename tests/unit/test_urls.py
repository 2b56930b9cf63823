"""Unit tests for URL configuration."""

from django.test import SimpleTestCase
from django.urls import Resolver404, resolve, reverse

from relay import views


class TestRelayURLPatterns(SimpleTestCase):
    """Tests for the relay's public paths."""

    ROUTES = [
        ("/", "service-info", views.ServiceInfoView),
        ("/health", "health", views.LivenessCheckView),
        ("/health/ready", "health-ready", views.ReadinessCheckView),
        ("/api/send-notification", "send-notification", views.SendNotificationView),
        ("/api/notify/message", "notify-message", views.MessageNotificationView),
        (
            "/api/notify/friend-request",
            "notify-friend-request",
            views.FriendRequestNotificationView,
        ),
        (
            "/api/notify/friend-request-accepted",
            "notify-friend-request-accepted",
            views.FriendRequestAcceptedNotificationView,
        ),
        ("/api/notify/new-post", "notify-new-post", views.NewPostNotificationView),
        ("/api/notify/post-comment", "notify-post-comment", views.PostCommentNotificationView),
        (
            "/api/notify/post-reaction",
            "notify-post-reaction",
            views.PostReactionNotificationView,
        ),
        ("/api/notify/post-share", "notify-post-share", views.PostShareNotificationView),
        (
            "/api/notify/comment-reply",
            "notify-comment-reply",
            views.CommentReplyNotificationView,
        ),
        ("/api/notify/comment-like", "notify-comment-like", views.CommentLikeNotificationView),
        ("/api/notify/group-invite", "notify-group-invite", views.GroupInviteNotificationView),
        ("/api/notify/mention", "notify-mention", views.MentionNotificationView),
        ("/api/otp/send", "otp-send", views.OtpSendView),
        ("/api/otp/verify", "otp-verify", views.OtpVerifyView),
        ("/api/otp/resend", "otp-resend", views.OtpResendView),
    ]

    def test_paths_resolve_to_views(self):
        for url, name, view_class in self.ROUTES:
            with self.subTest(url=url):
                resolved = resolve(url)
                self.assertEqual(resolved.func.cls, view_class)
                self.assertEqual(resolved.url_name, name)
                self.assertEqual(reverse(name), url)

    def test_trailing_slash_is_not_routed(self):
        with self.assertRaises(Resolver404):
            resolve("/api/otp/send/")

    def test_unknown_path(self):
        with self.assertRaises(Resolver404):
            resolve("/api/notify/unknown")
