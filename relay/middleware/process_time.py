"""Process time middleware for performance monitoring."""

import logging
import time
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from relay.constants import PROCESS_TIME_HEADER, SLOW_REQUEST_THRESHOLD

logger = logging.getLogger(__name__)


class ProcessTimeMiddleware:
    """Middleware to track request processing time.

    Adds the X-Process-Time header (seconds) to every response and warns
    about requests slower than the threshold. Fan-out endpoints wait for
    every push and record write, so this is where slow providers show up.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the middleware.

        Args:
            get_response: The next middleware or view in the chain.
        """
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Process the request and track its duration."""
        start_time = time.perf_counter()

        response = self.get_response(request)

        duration = time.perf_counter() - start_time
        response[PROCESS_TIME_HEADER] = f"{duration:.6f}"

        if duration > SLOW_REQUEST_THRESHOLD:
            logger.warning(
                f"Slow request detected: {request.method} {request.path} "
                f"took {duration:.2f}s (threshold: {SLOW_REQUEST_THRESHOLD}s)"
            )

        return response
