"""Tests for FcmClient."""

import json
from unittest.mock import MagicMock, patch

from django.test import SimpleTestCase, override_settings

import requests
import responses
from google.auth.exceptions import RefreshError

from relay.exceptions import ProviderError
from relay.services.push import FcmClient

SEND_URL = "https://fcm.googleapis.com/v1/projects/test-project/messages:send"


def valid_credentials(token="access-token"):
    credentials = MagicMock()
    credentials.valid = True
    credentials.token = token
    return credentials


class TestFcmClient(SimpleTestCase):
    """Test suite for FcmClient."""

    def setUp(self):
        self.message = {"token": "device-1", "notification": {"title": "t", "body": "b"}}
        self.client = FcmClient(project_id="test-project", credentials=valid_credentials())

    @responses.activate
    def test_send_returns_message_name(self):
        responses.add(
            responses.POST,
            SEND_URL,
            json={"name": "projects/test-project/messages/0:123"},
            status=200,
        )

        message_id = self.client.send(self.message)

        self.assertEqual(message_id, "projects/test-project/messages/0:123")
        call = responses.calls[0]
        self.assertEqual(call.request.headers["Authorization"], "Bearer access-token")
        self.assertEqual(json.loads(call.request.body), {"message": self.message})

    @responses.activate
    def test_unreadable_success_body_becomes_provider_error(self):
        responses.add(
            responses.POST,
            SEND_URL,
            body="<html>gateway</html>",
            status=200,
            content_type="text/html",
        )

        with self.assertRaises(ProviderError) as ctx:
            self.client.send(self.message)

        self.assertEqual(ctx.exception.provider_status, 200)

    @responses.activate
    def test_send_raises_provider_error_on_rejection(self):
        responses.add(
            responses.POST,
            SEND_URL,
            json={"error": {"status": "NOT_FOUND", "message": "Requested entity was not found."}},
            status=404,
        )

        with self.assertRaises(ProviderError) as ctx:
            self.client.send(self.message)

        self.assertEqual(ctx.exception.provider_status, 404)

    @responses.activate
    def test_send_wraps_transport_errors(self):
        responses.add(
            responses.POST, SEND_URL, body=requests.ConnectionError("connection reset")
        )

        with self.assertRaises(ProviderError):
            self.client.send(self.message)

    @responses.activate
    def test_send_wraps_timeouts(self):
        responses.add(responses.POST, SEND_URL, body=requests.Timeout("read timeout"))

        with self.assertRaisesRegex(ProviderError, "timed out"):
            self.client.send(self.message)

    @patch("relay.services.push.fcm_client.GoogleAuthRequest")
    def test_expired_token_is_refreshed(self, _mock_request):
        credentials = valid_credentials()
        credentials.valid = False
        client = FcmClient(project_id="test-project", credentials=credentials)

        token = client.get_access_token()

        credentials.refresh.assert_called_once()
        self.assertEqual(token, "access-token")

    @patch("relay.services.push.fcm_client.GoogleAuthRequest")
    def test_refresh_failure_becomes_provider_error(self, _mock_request):
        credentials = valid_credentials()
        credentials.valid = False
        credentials.refresh.side_effect = RefreshError("invalid_grant")
        client = FcmClient(project_id="test-project", credentials=credentials)

        with self.assertRaises(ProviderError):
            client.get_access_token()

    @override_settings(FIREBASE_SERVICE_ACCOUNT={"project_id": "from-account"})
    @patch("relay.services.push.fcm_client.service_account.Credentials")
    def test_service_account_from_settings(self, mock_credentials_cls):
        mock_credentials_cls.from_service_account_info.return_value = valid_credentials()
        client = FcmClient(project_id=None)
        client.project_id = None

        client.get_access_token()

        mock_credentials_cls.from_service_account_info.assert_called_once()
        self.assertEqual(client.project_id, "from-account")

    @override_settings(FIREBASE_SERVICE_ACCOUNT=None)
    @patch("relay.services.push.fcm_client.google.auth.default")
    def test_application_default_credentials(self, mock_default):
        mock_default.return_value = (valid_credentials("adc-token"), "adc-project")
        client = FcmClient(project_id="test-project")

        self.assertEqual(client.get_access_token(), "adc-token")
        self.assertEqual(client.project_id, "test-project")
