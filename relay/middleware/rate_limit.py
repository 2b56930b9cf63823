"""Rate limiting middleware using a token bucket in the Django cache."""

import logging
import time
from collections.abc import Callable
from datetime import UTC, datetime

from django.conf import settings
from django.core.cache import cache
from django.http import HttpRequest, HttpResponse, JsonResponse

from relay.constants import DEFAULT_RATE_LIMIT_REQUESTS, DEFAULT_RATE_LIMIT_WINDOW

logger = logging.getLogger(__name__)

EXEMPT_PATHS = frozenset({"/", "/health", "/health/ready"})


class RateLimitMiddleware:
    """Middleware to enforce per-client-IP rate limiting.

    Each client IP gets a bucket of ``RATE_LIMIT_REQUESTS`` tokens that
    refills over ``RATE_LIMIT_WINDOW`` seconds; each request consumes one.
    Health probes are exempt. If the cache is unavailable the request is
    allowed through.

    This guards the HTTP surface as a whole; the per-address cooldown on
    one-time codes is enforced separately by the OTP service.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the middleware.

        Args:
            get_response: The next middleware or view in the chain.
        """
        self.get_response = get_response
        self.max_requests = getattr(
            settings, "RATE_LIMIT_REQUESTS", DEFAULT_RATE_LIMIT_REQUESTS
        )
        self.window = getattr(settings, "RATE_LIMIT_WINDOW", DEFAULT_RATE_LIMIT_WINDOW)

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Process the request, or answer 429 when the bucket is empty."""
        if request.path in EXEMPT_PATHS:
            return self.get_response(request)

        client_ip = self._get_client_ip(request)
        allowed, retry_after = self._check_rate_limit(client_ip)

        if not allowed:
            logger.warning(f"Rate limit exceeded for IP: {client_ip}")
            return JsonResponse(
                {
                    "success": False,
                    "error": "RATE_LIMITED",
                    "message": "Rate limit exceeded. Please try again later.",
                    "requestId": getattr(request, "request_id", None),
                    "timestamp": datetime.now(UTC).isoformat(),
                    "retryAfter": retry_after,
                },
                status=429,
                headers={"Retry-After": str(retry_after)},
            )

        return self.get_response(request)

    def _get_client_ip(self, request: HttpRequest) -> str:
        """Return the original client IP, honouring X-Forwarded-For."""
        x_forwarded_for = request.headers.get("x-forwarded-for")
        if x_forwarded_for:
            return x_forwarded_for.split(",")[0].strip()
        return str(request.META.get("REMOTE_ADDR", "unknown"))

    def _check_rate_limit(self, client_ip: str) -> tuple[bool, int]:
        """Consume a token for the client.

        Args:
            client_ip: The client IP address.

        Returns:
            Tuple of (allowed, retry_after_seconds).
        """
        cache_key = f"rate_limit:{client_ip}"

        try:
            rate_limit_data = cache.get(cache_key)
            current_time = time.time()

            if rate_limit_data is None:
                tokens = self.max_requests - 1
            else:
                tokens, last_refill = rate_limit_data
                elapsed = current_time - last_refill
                tokens = min(
                    self.max_requests,
                    tokens + (elapsed / self.window) * self.max_requests,
                )

                if tokens < 1:
                    tokens_needed = 1 - tokens
                    retry_after = int((tokens_needed / self.max_requests) * self.window)
                    return False, max(1, retry_after)

                tokens -= 1

            cache.set(cache_key, (tokens, current_time), timeout=self.window * 2)
            return True, 0

        except Exception as e:
            logger.error(f"Rate limit check failed for {client_ip}: {e}")
            return True, 0
