"""Unit tests for SecurityHeadersMiddleware."""

import unittest

from django.http import HttpRequest, HttpResponse

from relay.constants import SECURITY_HEADERS
from relay.middleware.security_headers import SecurityHeadersMiddleware


class TestSecurityHeadersMiddleware(unittest.TestCase):
    """Test cases for SecurityHeadersMiddleware."""

    def _create_request(self):
        request = HttpRequest()
        request.method = "GET"
        request.path = "/health"
        return request

    def test_adds_all_security_headers(self):
        middleware = SecurityHeadersMiddleware(lambda _request: HttpResponse("OK"))

        response = middleware(self._create_request())

        for header, value in SECURITY_HEADERS.items():
            with self.subTest(header=header):
                self.assertEqual(response[header], value)

    def test_does_not_override_view_headers(self):
        def get_response(_request):
            response = HttpResponse("OK")
            response["X-Frame-Options"] = "SAMEORIGIN"
            return response

        middleware = SecurityHeadersMiddleware(get_response)

        response = middleware(self._create_request())

        self.assertEqual(response["X-Frame-Options"], "SAMEORIGIN")
        self.assertEqual(response["X-Content-Type-Options"], "nosniff")

    def test_headers_added_to_error_responses(self):
        middleware = SecurityHeadersMiddleware(
            lambda _request: HttpResponse("Bad request", status=400)
        )

        response = middleware(self._create_request())

        self.assertEqual(response.status_code, 400)
        self.assertIn("Content-Security-Policy", response)


if __name__ == "__main__":
    unittest.main()
