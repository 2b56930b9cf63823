"""Middleware components for the notification relay."""

from relay.middleware.process_time import ProcessTimeMiddleware
from relay.middleware.rate_limit import RateLimitMiddleware
from relay.middleware.request_id import RequestIDMiddleware
from relay.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "ProcessTimeMiddleware",
    "RateLimitMiddleware",
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
]
