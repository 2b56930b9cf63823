"""Tests for Dispatcher."""

from django.test import SimpleTestCase

from relay.exceptions import ProviderError
from relay.services.dispatcher import Dispatcher
from relay.services.payload_builder import PushPayload
from tests.fakes import FakePushProvider


class TestDispatcher(SimpleTestCase):
    """Test suite for Dispatcher."""

    def setUp(self):
        self.payload = PushPayload(title="t", body="b", data={"type": "new_post"})

    def test_dispatch_counts_successes_and_attempts(self):
        provider = FakePushProvider(failing={"tok-b"})
        dispatcher = Dispatcher(provider)

        result = dispatcher.dispatch(
            self.payload, {"a": "tok-a", "b": "tok-b", "c": "tok-c"}
        )

        self.assertEqual(result.total, 3)
        self.assertEqual(result.sent, 2)
        self.assertEqual(result.failed, 1)
        self.assertEqual(provider.tokens, {"tok-a", "tok-c"})
        self.assertIsInstance(result.outcomes["b"].error, ProviderError)
        self.assertTrue(result.outcomes["a"].value.startswith("projects/"))

    def test_sent_never_exceeds_total(self):
        provider = FakePushProvider(failing={f"tok-{i}" for i in range(0, 20, 3)})
        addresses = {f"u{i}": f"tok-{i}" for i in range(20)}

        result = Dispatcher(provider).dispatch(self.payload, addresses)

        self.assertEqual(result.total, len(addresses))
        self.assertLessEqual(result.sent, result.total)
        self.assertEqual(result.sent, 20 - 7)

    def test_dispatch_without_addresses_sends_nothing(self):
        provider = FakePushProvider()

        result = Dispatcher(provider).dispatch(self.payload, {})

        self.assertEqual((result.sent, result.total), (0, 0))
        self.assertEqual(provider.sent, [])

    def test_send_one_returns_message_id(self):
        provider = FakePushProvider()

        message_id = Dispatcher(provider).send_one(self.payload, "tok-1")

        self.assertEqual(message_id, "projects/test-project/messages/1")
        self.assertEqual(provider.sent[0]["notification"]["title"], "t")

    def test_send_one_propagates_provider_error(self):
        provider = FakePushProvider(failing={"tok-1"})

        with self.assertRaises(ProviderError):
            Dispatcher(provider).send_one(self.payload, "tok-1")
