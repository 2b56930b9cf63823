"""Concurrent push dispatch with per-address failure isolation."""

from dataclasses import dataclass, field

import structlog

from relay.services.fanout import Outcome, run_all
from relay.services.payload_builder import PushPayload, build_message
from relay.services.push import PushProvider

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class DispatchResult:
    """Aggregate of one dispatch batch.

    Attributes:
        sent: Deliveries the provider accepted
        total: Deliveries attempted (one per address)
        outcomes: Message id or error per recipient
    """

    sent: int = 0
    total: int = 0
    outcomes: dict[str, Outcome[str]] = field(default_factory=dict)

    @property
    def failed(self) -> int:
        return self.total - self.sent


class Dispatcher:
    """Sends one payload to many devices through a push provider."""

    def __init__(self, provider: PushProvider):
        """Initialize dispatcher.

        Args:
            provider: Push provider used for every delivery
        """
        self.provider = provider

    def send_one(self, payload: PushPayload, address: str) -> str:
        """Deliver to a single device.

        Returns:
            Provider message id

        Raises:
            ProviderError: If the delivery failed
        """
        message_id = self.provider.send(build_message(payload, address))
        logger.info("Push notification sent", message_id=message_id)
        return message_id

    def dispatch(self, payload: PushPayload, addresses: dict[str, str]) -> DispatchResult:
        """Deliver to every address concurrently.

        Failures are counted, never raised: a provider error for one device
        does not affect its siblings or the request.

        Args:
            payload: Alert to deliver
            addresses: Recipient id to push token

        Returns:
            DispatchResult with ``sent <= total == len(addresses)``
        """
        if not addresses:
            return DispatchResult()

        recipients = list(addresses)
        outcomes = run_all(
            [
                lambda token=addresses[rid]: self.provider.send(
                    build_message(payload, token)
                )
                for rid in recipients
            ]
        )
        by_recipient = dict(zip(recipients, outcomes, strict=True))

        for rid, outcome in by_recipient.items():
            if not outcome.is_success:
                logger.warning(
                    "Push delivery failed",
                    recipient_id=rid,
                    error=str(outcome.error),
                )

        result = DispatchResult(
            sent=sum(1 for outcome in outcomes if outcome.is_success),
            total=len(outcomes),
            outcomes=by_recipient,
        )
        logger.info(
            "Push batch dispatched",
            sent=result.sent,
            total=result.total,
            failed=result.failed,
        )
        return result
