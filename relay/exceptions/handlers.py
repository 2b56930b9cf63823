"""Global exception handlers for the notification relay."""

import logging
import traceback
from datetime import UTC, datetime
from typing import Any

from django.conf import settings
from django.http import Http404

from rest_framework import status
from rest_framework.exceptions import APIException, ParseError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from relay.exceptions.otp_exceptions import OtpRateLimitedError
from relay.exceptions.relay_exceptions import RelayError
from relay.logging.context import get_request_id

logger = logging.getLogger(__name__)


def custom_exception_handler(
    exc: Exception, context: dict[str, Any]
) -> Response | None:
    """Custom exception handler for Django REST Framework.

    Renders relay errors, DRF errors and unexpected exceptions with one body
    shape: {success, error, message, requestId, timestamp, ...extra}.

    Args:
        exc: The exception that was raised.
        context: Context dictionary containing request and view information.

    Returns:
        A Response object with the error details.
    """
    view = context.get("view")
    request = view.request if view else None
    request_id = get_request_id()

    if isinstance(exc, RelayError):
        response_data = _create_error_response(
            error_code=exc.error_code,
            message=exc.message,
            request_id=request_id,
            extra=exc.extra,
        )
        response = Response(response_data, status=exc.status_code)
        if isinstance(exc, OtpRateLimitedError):
            response["Retry-After"] = str(exc.retry_after)
    else:
        # Let DRF handle its own exceptions (parse errors, bad methods)
        response = exception_handler(exc, context)

        if response is not None:
            detail = getattr(exc, "detail", str(exc))
            response.data = _create_error_response(
                error_code=_drf_error_code(exc),
                message=str(detail),
                request_id=request_id,
            )
        else:
            response_data = _create_error_response(
                error_code="INTERNAL_ERROR",
                message="An internal server error occurred.",
                request_id=request_id,
            )
            response = Response(
                response_data, status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

    if request_id:
        response["X-Request-ID"] = request_id

    _log_exception(exc, request, response)

    return response


def _create_error_response(
    error_code: str,
    message: str,
    request_id: str | None,
    extra: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Create a standardized error response.

    Args:
        error_code: Machine-readable error code.
        message: The error message to return to the client.
        request_id: The request ID for tracing.
        extra: Additional fields specific to the error.

    Returns:
        Dictionary with standard error response format.
    """
    body: dict[str, Any] = {
        "success": False,
        "error": error_code,
        "message": message,
        "requestId": request_id,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    if extra:
        body.update(extra)
    return body


def _log_exception(
    exc: Exception,
    request: Any,
    response: Response,
) -> None:
    """Log detailed exception information for troubleshooting.

    Client errors are logged as warnings, everything else as errors. In DEBUG
    mode the log line also carries the stack trace.

    Args:
        exc: The exception that was raised.
        request: The HTTP request object.
        response: The response returned to the client.
    """
    if isinstance(exc, (RelayError, Http404, APIException)) and (
        400 <= response.status_code < 500
    ):
        log_level = logging.WARNING
    else:
        log_level = logging.ERROR

    error_type = type(exc).__name__
    request_path = request.path if request else "unknown"
    request_method = request.method if request else "unknown"

    log_message = (
        f"Exception occurred: {error_type}: {exc} | "
        f"Path: {request_method} {request_path} | "
        f"Status: {response.status_code}"
    )

    if settings.DEBUG:
        stack_trace = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
        log_message += f"\nStack trace:\n{stack_trace}"

    logger.log(log_level, log_message)


def _drf_error_code(exc: Exception) -> str:
    """Map framework exceptions onto the relay's error codes."""
    if isinstance(exc, Http404):
        return "NOT_FOUND"
    if isinstance(exc, ParseError):
        # Unparseable JSON body
        return "VALIDATION_ERROR"
    return getattr(exc, "default_code", "error").upper()
