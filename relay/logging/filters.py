"""Logging filters for enriching log records with request context."""

import logging

from relay.logging.context import get_request_id


class RequestIDFilter(logging.Filter):
    """Add request ID to stdlib log records.

    Middleware and the exception handler log through the stdlib logger;
    this filter gives their records the same ``request_id`` attribute that
    structlog events receive from ``add_request_context``.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Attach ``request_id`` (or ``N/A``) to the record and keep it."""
        record.request_id = get_request_id() or "N/A"
        return True
