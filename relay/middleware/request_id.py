"""Request ID middleware for distributed tracing."""

import uuid
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from relay.constants import REQUEST_ID_HEADER
from relay.logging.context import clear_request_id, set_request_id


class RequestIDMiddleware:
    """Middleware to handle request ID for distributed tracing.

    Reuses an incoming X-Request-ID header or generates a UUID, binds it to
    the logging context for the duration of the request, and echoes it in
    the response headers.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the middleware.

        Args:
            get_response: The next middleware or view in the chain.
        """
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Process the request and add request ID tracking."""
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        set_request_id(request_id)
        request.request_id = request_id  # type: ignore[attr-defined]

        try:
            response = self.get_response(request)
            response[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            clear_request_id()
