"""Component tests for the chat message endpoint."""

from relay.repositories import ChatMembers
from tests.component.base import RelayEndpointTestCase


class TestMessageEndpoint(RelayEndpointTestCase):
    """Component tests for POST /api/notify/message."""

    url = "/api/notify/message"
    chats = {
        "chat-1": ChatMembers(
            member_ids=frozenset({"alice", "bob", "carol"}),
            muted_ids=frozenset({"bob"}),
        ),
        "chat-2": ChatMembers(
            member_ids=frozenset({"alice", "dave"}), muted_ids=frozenset()
        ),
    }

    def test_muted_member_gets_record_but_no_push(self):
        response = self.post_json(
            self.url,
            {
                "chatId": "chat-1",
                "senderId": "alice",
                "senderName": "Alice",
                "text": "hello",
                "messageId": "m-1",
            },
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {"success": True, "sent": 1, "total": 1, "saved": 2, "mutedCount": 1},
        )
        self.assertEqual(self.provider.tokens, {"tok-carol"})
        self.assertEqual(self.store.recipient_ids, {"bob", "carol"})

        message = self.provider.sent[0]
        self.assertEqual(message["notification"]["title"], "Alice")
        self.assertEqual(message["data"]["roomId"], "chat-1")
        self.assertEqual(message["data"]["type"], "new_message")

    def test_media_message_body(self):
        self.post_json(self.url, {"chatId": "chat-1", "senderId": "alice"})

        self.assertEqual(self.provider.sent[0]["notification"]["body"], "📷 Photo")

    def test_member_without_token_is_saved_only(self):
        response = self.post_json(self.url, {"chatId": "chat-2", "senderId": "alice"})

        data = response.json()
        self.assertEqual((data["sent"], data["total"], data["saved"]), (0, 0, 1))
        self.assertEqual(data["mutedCount"], 0)

    def test_unknown_chat(self):
        response = self.post_json(self.url, {"chatId": "missing", "senderId": "alice"})

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["error"], "NOT_FOUND")
        self.assertEqual(self.store.records, [])

    def test_missing_chat_id(self):
        response = self.post_json(self.url, {"senderId": "alice"})

        self.assertEqual(response.status_code, 400)
        self.assertIn("chatId", response.json()["fields"])


class TestMessageEndpointPartialFailure(RelayEndpointTestCase):
    """One rejected device does not fail the fan-out."""

    url = "/api/notify/message"
    chats = {
        "chat-1": ChatMembers(
            member_ids=frozenset({"alice", "bob", "carol"}), muted_ids=frozenset()
        ),
    }
    failing_tokens = {"tok-bob"}

    def test_partial_failure_still_succeeds(self):
        response = self.post_json(self.url, {"chatId": "chat-1", "senderId": "alice"})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual((data["sent"], data["total"], data["saved"]), (1, 2, 2))
