"""Tests for RecipientResolver."""

from django.test import SimpleTestCase

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
from relay.exceptions import NotFoundError
from relay.repositories import ChatMembers
from relay.services.recipient_resolver import RecipientResolver
from tests.fakes import FakeSocialRepository


class TestRecipientResolver(SimpleTestCase):
    """Test suite for RecipientResolver."""

    def setUp(self):
        self.social = FakeSocialRepository(
            chats={
                "chat-1": ChatMembers(
                    member_ids=frozenset({"A", "B", "C"}),
                    muted_ids=frozenset({"B"}),
                )
            },
            followers={"author": ["f1", "f2", "author"]},
            posts={"post-1": "owner"},
        )
        self.resolver = RecipientResolver(self.social)

    def test_new_message_excludes_sender_and_carries_mutes(self):
        resolution = self.resolver.resolve(NewMessage(chat_id="chat-1", sender_id="A"))

        self.assertEqual(resolution.recipients, frozenset({"B", "C"}))
        self.assertEqual(resolution.muted, frozenset({"B"}))

    def test_new_message_unknown_chat_raises_not_found(self):
        with self.assertRaises(NotFoundError) as ctx:
            self.resolver.resolve(NewMessage(chat_id="missing", sender_id="A"))

        self.assertEqual(ctx.exception.resource, "chat")
        self.assertEqual(ctx.exception.status_code, 404)

    def test_new_post_resolves_followers_without_author(self):
        resolution = self.resolver.resolve(NewPost(post_id="p", user_id="author"))

        self.assertEqual(resolution.recipients, frozenset({"f1", "f2"}))

    def test_new_post_without_followers_is_empty(self):
        resolution = self.resolver.resolve(NewPost(post_id="p", user_id="loner"))

        self.assertEqual(resolution.recipients, frozenset())

    def test_post_comment_with_explicit_owner_skips_lookup(self):
        resolution = self.resolver.resolve(
            PostComment(post_id="post-1", actor_id="X", owner_id="owner")
        )

        self.assertEqual(resolution.recipients, frozenset({"owner"}))
        self.assertEqual(self.social.calls, [])

    def test_post_reaction_without_owner_reads_post(self):
        resolution = self.resolver.resolve(PostReaction(post_id="post-1", actor_id="X"))

        self.assertEqual(resolution.recipients, frozenset({"owner"}))
        self.assertEqual(resolution.owner_id, "owner")
        self.assertEqual(self.social.calls, [("post", "post-1")])

    def test_unknown_post_raises_not_found(self):
        with self.assertRaises(NotFoundError) as ctx:
            self.resolver.resolve(PostShare(post_id="missing", actor_id="X"))

        self.assertEqual(ctx.exception.resource, "post")

    def test_self_actions_resolve_to_empty_set(self):
        events = [
            PostComment(post_id="post-1", actor_id="owner", owner_id="owner"),
            PostReaction(post_id="post-1", actor_id="owner", owner_id="owner"),
            PostShare(post_id="post-1", actor_id="owner", owner_id="owner"),
            CommentReply(post_id="p", comment_id="c", owner_id="u", actor_id="u"),
            CommentLike(post_id="p", comment_id="c", owner_id="u", actor_id="u"),
            Mention(recipient_id="u", mentioner_id="u"),
            FriendRequest(recipient_id="u", sender_id="u"),
            FriendRequestAccepted(recipient_id="u", acceptor_id="u"),
            GroupInvite(recipient_id="u", group_id="g", inviter_id="u"),
        ]

        for event in events:
            with self.subTest(event=type(event).__name__):
                self.assertEqual(self.resolver.resolve(event).recipients, frozenset())

    def test_single_target_events_resolve_target(self):
        cases = [
            (CommentReply(post_id="p", comment_id="c", owner_id="u", actor_id="v"), "u"),
            (CommentLike(post_id="p", comment_id="c", owner_id="u", actor_id="v"), "u"),
            (Mention(recipient_id="u", mentioner_id="v"), "u"),
            (FriendRequest(recipient_id="u", sender_id="v"), "u"),
            (FriendRequestAccepted(recipient_id="u", acceptor_id="v"), "u"),
            (GroupInvite(recipient_id="u", group_id="g", inviter_id="v"), "u"),
            (DirectSend(recipient_id="u", title="t", body="b"), "u"),
        ]

        for event, expected in cases:
            with self.subTest(event=type(event).__name__):
                self.assertEqual(
                    self.resolver.resolve(event).recipients, frozenset({expected})
                )

    def test_unsupported_event_raises_type_error(self):
        with self.assertRaises(TypeError):
            self.resolver.resolve(object())
