"""Request context shared between the request thread and fan-out workers.

The request id lives in a ``ContextVar`` rather than thread-local storage so
that ``relay.services.fanout.run_all`` can copy it into its worker threads.
"""

from contextvars import ContextVar

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(request_id: str) -> None:
    """Bind the request ID to the current context.

    Args:
        request_id: The unique request identifier to store.
    """
    _request_id.set(request_id)


def get_request_id() -> str | None:
    """Return the request ID bound to the current context, if any."""
    return _request_id.get()


def clear_request_id() -> None:
    """Unbind the request ID once the request has been answered."""
    _request_id.set(None)
