"""Get-payment flow."""

import asyncio
import uuid

import structlog

from payment_gateway.models import (
    AuthorizationStatus,
    InvalidPaymentId,
    Payment,
    PaymentResult,
)
from payment_gateway.repositories.base import PaymentRepository

logger = structlog.get_logger(__name__)


def parse_payment_id(payment_id: str | uuid.UUID | None) -> uuid.UUID:
    """
    Parse a payment identifier.

    Raises:
        InvalidPaymentId: If the id is blank or not a UUID
    """
    if isinstance(payment_id, uuid.UUID):
        return payment_id
    if payment_id is None or not payment_id.strip():
        raise InvalidPaymentId(payment_id)
    try:
        return uuid.UUID(payment_id.strip())
    except ValueError as e:
        raise InvalidPaymentId(payment_id) from e


class GetPaymentHandler:
    """
    Looks up a recorded payment.

    A found record is always reported with envelope status AUTHORIZED,
    whatever status the record itself carries; callers that need the stored
    outcome read ``value.status``.
    """

    def __init__(self, repository: PaymentRepository) -> None:
        self.repository = repository

    async def handle(self, payment_id: str | uuid.UUID | None) -> PaymentResult[Payment]:
        """
        Raises:
            InvalidPaymentId: If payment_id is blank or malformed
        """
        parsed = parse_payment_id(payment_id)

        # The nil UUID is well-formed but can never be assigned
        if parsed.int == 0:
            return PaymentResult.empty()

        payment = await asyncio.to_thread(self.repository.get_by_id, str(parsed))

        if not payment.exists:
            logger.info("payment_lookup_miss", payment_id=str(parsed))
            return PaymentResult.empty()

        logger.info("payment_lookup_hit", payment_id=payment.id)
        return PaymentResult(status=AuthorizationStatus.AUTHORIZED, value=payment)
