"""Security headers middleware."""

from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from relay.constants import SECURITY_HEADERS


class SecurityHeadersMiddleware:
    """Middleware to add the standard hardening headers to all responses.

    Covers framing, MIME sniffing, XSS filter, HSTS, referrer policy and
    content security policy (see ``SECURITY_HEADERS``).
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the middleware.

        Args:
            get_response: The next middleware or view in the chain.
        """
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Process the request and add security headers to the response."""
        response = self.get_response(request)

        for header, value in SECURITY_HEADERS.items():
            response.setdefault(header, value)

        return response
