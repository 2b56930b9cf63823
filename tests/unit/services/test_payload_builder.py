"""Tests for push payload rendering."""

import time

from django.test import SimpleTestCase, override_settings

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
    PostComment,
    PostReaction,
    PostShare,
)
from relay.services.payload_builder import (
    PushPayload,
    build_message,
    build_payload,
    reaction_emoji,
    truncate,
)


class TestBuildPayload(SimpleTestCase):
    """Test suite for build_payload."""

    def test_new_message_uses_sender_and_text(self):
        payload = build_payload(
            NewMessage(
                chat_id="room-9",
                sender_id="A",
                sender_name="Alice",
                text="hi there",
                message_id="m-1",
            )
        )

        self.assertEqual(payload.title, "Alice")
        self.assertEqual(payload.body, "hi there")
        self.assertEqual(payload.channel_id, "messages")
        self.assertEqual(
            payload.data,
            {
                "screen": "Chat_fr",
                "roomId": "room-9",
                "senderId": "A",
                "messageId": "m-1",
                "type": "new_message",
            },
        )

    def test_new_message_defaults_for_media_message(self):
        payload = build_payload(NewMessage(chat_id="room-9", sender_id="A"))

        self.assertEqual(payload.title, "New message")
        self.assertEqual(payload.body, "📷 Photo")
        self.assertNotIn("messageId", payload.data)

    def test_friend_request(self):
        payload = build_payload(
            FriendRequest(recipient_id="B", sender_id="A", sender_name="Alice")
        )

        self.assertEqual(payload.title, "Friend request")
        self.assertEqual(payload.body, "Alice sent you a friend request")
        self.assertEqual(payload.data["screen"], "FriendRequest")
        self.assertEqual(payload.data["type"], "friend_request")
        self.assertEqual(payload.channel_id, "friend_requests")

    def test_missing_actor_name_falls_back(self):
        payload = build_payload(FriendRequestAccepted(recipient_id="B", acceptor_id="A"))

        self.assertEqual(payload.body, "Someone accepted your friend request")
        self.assertEqual(payload.data["screen"], "Profile")

    def test_new_post(self):
        payload = build_payload(NewPost(post_id="p1", user_id="A", user_name="Alice"))

        self.assertEqual(payload.body, "Alice published a new post")
        self.assertEqual(payload.data["postId"], "p1")
        self.assertEqual(payload.data["userId"], "A")
        self.assertEqual(payload.channel_id, "posts")

    def test_post_comment_truncates_quote(self):
        text = "x" * 80
        payload = build_payload(
            PostComment(post_id="p1", actor_id="A", owner_id="B", comment_text=text)
        )

        self.assertEqual(payload.body, '"' + "x" * 50 + '..."')

    def test_comment_reply_truncates_quote(self):
        payload = build_payload(
            CommentReply(
                post_id="p1",
                comment_id="c1",
                owner_id="B",
                actor_id="A",
                reply_text="y" * 51,
            )
        )

        self.assertEqual(payload.body, '"' + "y" * 50 + '..."')
        self.assertEqual(payload.data["commentId"], "c1")

    def test_post_comment_uses_resolved_owner(self):
        payload = build_payload(PostComment(post_id="p1", actor_id="A"), owner_id="B")

        self.assertEqual(payload.data["ownerId"], "B")

    def test_unknown_reaction_renders_like_glyph(self):
        like = build_payload(
            PostReaction(post_id="p", actor_id="A", owner_id="B", reaction_type="like")
        )
        unknown = build_payload(
            PostReaction(post_id="p", actor_id="A", owner_id="B", reaction_type="zzz")
        )

        self.assertEqual(like.body, unknown.body)
        self.assertIn("👍", unknown.body)

    def test_known_reaction_glyph(self):
        payload = build_payload(
            PostReaction(
                post_id="p", actor_id="A", owner_id="B", actor_name="Al", reaction_type="love"
            )
        )

        self.assertEqual(payload.body, "Al reacted ❤️ to your post")

    def test_group_invite(self):
        payload = build_payload(
            GroupInvite(
                recipient_id="B",
                group_id="g1",
                inviter_id="A",
                group_name="Hikers",
                inviter_name="Alice",
            )
        )

        self.assertEqual(payload.body, "Alice invited you to join Hikers")
        self.assertEqual(payload.data["screen"], "GroupChat")
        self.assertEqual(payload.channel_id, "groups")

    def test_mention_target_selects_copy(self):
        in_post = build_payload(Mention(recipient_id="B", mentioner_id="A"))
        in_comment = build_payload(
            Mention(recipient_id="B", mentioner_id="A", target="comment", comment_id="c")
        )

        self.assertTrue(in_post.body.endswith("in a post"))
        self.assertTrue(in_comment.body.endswith("in a comment"))

    def test_direct_send_keeps_caller_copy(self):
        payload = build_payload(
            DirectSend(recipient_id="B", title="Hello", body="World", data={"k": "v"})
        )

        self.assertEqual((payload.title, payload.body), ("Hello", "World"))
        self.assertEqual(payload.data, {"k": "v", "type": "direct_send"})

    def test_every_payload_carries_type_and_string_values(self):
        events = [
            NewMessage(chat_id="c", sender_id="A"),
            FriendRequest(recipient_id="B", sender_id="A"),
            FriendRequestAccepted(recipient_id="B", acceptor_id="A"),
            NewPost(post_id="p", user_id="A"),
            PostComment(post_id="p", actor_id="A", owner_id="B"),
            PostReaction(post_id="p", actor_id="A", owner_id="B"),
            PostShare(post_id="p", actor_id="A", owner_id="B"),
            CommentReply(post_id="p", comment_id="c", owner_id="B", actor_id="A"),
            CommentLike(post_id="p", comment_id="c", owner_id="B", actor_id="A"),
            GroupInvite(recipient_id="B", group_id="g", inviter_id="A"),
            Mention(recipient_id="B", mentioner_id="A"),
        ]

        for event in events:
            with self.subTest(event=type(event).__name__):
                payload = build_payload(event)
                self.assertEqual(payload.data["type"], event.notification_type.value)
                self.assertTrue(payload.title)
                self.assertTrue(payload.body)
                self.assertTrue(all(isinstance(v, str) for v in payload.data.values()))


class TestHelpers(SimpleTestCase):
    """Test suite for rendering helpers."""

    def test_truncate_keeps_short_text(self):
        self.assertEqual(truncate("short"), "short")
        self.assertEqual(truncate("z" * 50), "z" * 50)

    def test_reaction_emoji_defaults(self):
        self.assertEqual(reaction_emoji(None), "👍")
        self.assertEqual(reaction_emoji("angry"), "😡")


class TestBuildMessage(SimpleTestCase):
    """Test suite for build_message."""

    @override_settings(PUSH_TTL_SECONDS=3600)
    def test_delivery_hints(self):
        payload = PushPayload(title="t", body="b", data={"type": "x"}, channel_id="posts")

        message = build_message(payload, "token-1")

        self.assertEqual(message["token"], "token-1")
        self.assertEqual(message["notification"], {"title": "t", "body": "b"})
        self.assertEqual(message["data"], {"type": "x"})
        android = message["android"]
        self.assertEqual(android["priority"], "high")
        self.assertEqual(android["ttl"], "3600s")
        self.assertEqual(android["notification"]["channel_id"], "posts")
        self.assertEqual(android["notification"]["color"], "#006AF5")
        self.assertEqual(android["notification"]["sound"], "default")
        apns = message["apns"]
        self.assertEqual(apns["headers"]["apns-priority"], "10")
        expiration = int(apns["headers"]["apns-expiration"])
        self.assertAlmostEqual(expiration, int(time.time()) + 3600, delta=5)
        aps = apns["payload"]["aps"]
        self.assertEqual(aps["badge"], 1)
        self.assertEqual(aps["content-available"], 1)
