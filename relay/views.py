"""API views for the notification relay."""

from django.conf import settings
from django.utils import timezone

import structlog
from pydantic import ValidationError
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from relay.exceptions import RequestValidationError
from relay.schemas import BaseSchemaModel, ServiceInfoResponse
from relay.schemas.notification import (
    CommentLikeRequest,
    CommentReplyRequest,
    FriendRequestAcceptedRequest,
    FriendRequestRequest,
    GroupInviteRequest,
    MentionRequest,
    MessageNotificationRequest,
    NewPostNotificationRequest,
    PostCommentRequest,
    PostReactionRequest,
    PostShareRequest,
    SendNotificationRequest,
)
from relay.schemas.otp import OtpSendRequest, OtpVerifyRequest
from relay.services import health_service
from relay.services.notification_relay_service import notification_relay_service
from relay.services.otp import otp_service

logger = structlog.get_logger(__name__)


def parse_request(schema: type[BaseSchemaModel], request) -> BaseSchemaModel:
    """Validate a request body against a pydantic schema.

    Args:
        schema: Request schema class
        request: DRF request whose JSON body is validated

    Returns:
        Validated schema instance

    Raises:
        RequestValidationError: If fields are missing or malformed
    """
    try:
        return schema.model_validate(request.data)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False, include_input=False)
        logger.warning(
            "Invalid request body",
            path=request.path,
            validation_errors=errors,
        )
        missing = [".".join(str(p) for p in err["loc"]) for err in errors]
        raise RequestValidationError(
            "Missing or invalid required fields",
            errors=errors,
            fields=missing,
        ) from e


class ServiceInfoView(APIView):
    """Root endpoint describing the running service."""

    permission_classes = [AllowAny]

    def get(self, _request):
        info = ServiceInfoResponse(
            status="ok",
            service=settings.SERVICE_DISPLAY_NAME,
            version=settings.SERVICE_VERSION,
            timestamp=timezone.now(),
        )
        return Response(info.to_response(), status=status.HTTP_200_OK)


class LivenessCheckView(APIView):
    """Liveness probe endpoint.

    Returns 200 while the process is serving. External dependencies are
    not checked here.
    """

    permission_classes = [AllowAny]

    def get(self, _request):
        liveness = health_service.get_liveness_status()
        return Response(liveness.to_response(), status=status.HTTP_200_OK)


class ReadinessCheckView(APIView):
    """Readiness probe endpoint.

    Returns 200 with a degraded status when the database is unavailable, so
    push delivery can keep running while the database recovers.
    """

    permission_classes = [AllowAny]

    def get(self, _request):
        readiness = health_service.get_readiness_status()
        return Response(readiness.to_response(), status=status.HTTP_200_OK)


class RelayView(APIView):
    """Base view: validate the body, hand it to the service, render the result.

    Subclasses set ``request_schema`` and implement ``handle``. Domain
    errors raised by the service are rendered by the global exception
    handler.
    """

    permission_classes = [AllowAny]
    request_schema: type[BaseSchemaModel]
    success_status = status.HTTP_200_OK

    def post(self, request):
        """Handle POST request for this endpoint.

        Returns:
            200 OK with the service response
            400 Bad Request if validation fails
            404 Not Found if a referenced user, chat or post is missing
        """
        body = parse_request(self.request_schema, request)
        logger.info("Relay request received", view=type(self).__name__)
        result = self.handle(body)
        return Response(result.to_response(), status=self.success_status)


class SendNotificationView(RelayView):
    """Send a caller-authored push to one user."""

    request_schema = SendNotificationRequest

    def handle(self, body):
        return notification_relay_service.send_direct(body.to_event())


class MessageNotificationView(RelayView):
    """Notify chat members about a new message (mute-aware)."""

    request_schema = MessageNotificationRequest

    def handle(self, body):
        return notification_relay_service.notify_new_message(body.to_event())


class NewPostNotificationView(RelayView):
    """Notify the author's followers about a new post."""

    request_schema = NewPostNotificationRequest

    def handle(self, body):
        return notification_relay_service.notify_new_post(body.to_event())


class SingleTargetNotificationView(RelayView):
    """Notify the one user targeted by a social event."""

    def handle(self, body):
        return notification_relay_service.notify_single(body.to_event())


class FriendRequestNotificationView(SingleTargetNotificationView):
    request_schema = FriendRequestRequest


class FriendRequestAcceptedNotificationView(SingleTargetNotificationView):
    request_schema = FriendRequestAcceptedRequest


class PostCommentNotificationView(SingleTargetNotificationView):
    request_schema = PostCommentRequest


class PostReactionNotificationView(SingleTargetNotificationView):
    request_schema = PostReactionRequest


class PostShareNotificationView(SingleTargetNotificationView):
    request_schema = PostShareRequest


class CommentReplyNotificationView(SingleTargetNotificationView):
    request_schema = CommentReplyRequest


class CommentLikeNotificationView(SingleTargetNotificationView):
    request_schema = CommentLikeRequest


class GroupInviteNotificationView(SingleTargetNotificationView):
    request_schema = GroupInviteRequest


class MentionNotificationView(SingleTargetNotificationView):
    request_schema = MentionRequest


class OtpSendView(RelayView):
    """Issue a verification code; rate limited per address.

    Returns:
        200 OK with ``expiresIn``
        400 Bad Request for a malformed address
        429 Too Many Requests with ``retryAfter`` during the cooldown
        500 Internal Server Error if the code could not be mailed
    """

    request_schema = OtpSendRequest

    def handle(self, body):
        return otp_service.send(body.email)


class OtpResendView(RelayView):
    """Replace the active code with a fresh one, bypassing the cooldown."""

    request_schema = OtpSendRequest

    def handle(self, body):
        return otp_service.resend(body.email)


class OtpVerifyView(RelayView):
    """Verify a code.

    Returns:
        200 OK with ``verified: true``
        400 Bad Request with OTP_NOT_FOUND, OTP_EXPIRED, TOO_MANY_ATTEMPTS or
            INVALID_OTP (plus ``remainingAttempts``)
    """

    request_schema = OtpVerifyRequest

    def handle(self, body):
        return otp_service.verify(body.email, body.otp)
