"""Logging utilities for the notification relay."""

from relay.logging.config import setup_logging
from relay.logging.context import clear_request_id, get_request_id, set_request_id
from relay.logging.filters import RequestIDFilter

__all__ = [
    "RequestIDFilter",
    "clear_request_id",
    "get_request_id",
    "set_request_id",
    "setup_logging",
]
