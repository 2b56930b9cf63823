"""Component tests for the new post endpoint."""

from tests.component.base import RelayEndpointTestCase


class TestNewPostEndpoint(RelayEndpointTestCase):
    """Component tests for POST /api/notify/new-post."""

    url = "/api/notify/new-post"
    followers = {"alice": ["bob", "carol", "dave"], "lonely": []}

    def test_followers_are_notified(self):
        response = self.post_json(
            self.url, {"postId": "post-1", "userId": "alice", "userName": "Alice"}
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(), {"success": True, "sent": 2, "total": 2, "saved": 3}
        )
        message = self.provider.sent[0]
        self.assertEqual(message["notification"]["body"], "Alice published a new post")
        self.assertEqual(message["data"]["screen"], "PostDetail")

    def test_no_followers(self):
        response = self.post_json(self.url, {"postId": "post-1", "userId": "lonely"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(), {"success": True, "sent": 0, "total": 0, "saved": 0}
        )

    def test_missing_author(self):
        response = self.post_json(self.url, {"postId": "post-1"})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "VALIDATION_ERROR")
