"""In-memory payment repository."""

import threading
import uuid
from collections.abc import Iterable

import structlog

from payment_gateway.domain.currency import normalize_currency
from payment_gateway.models import EMPTY_PAYMENT, AuthorizationStatus, Payment, PaymentRequest
from payment_gateway.repositories.base import PaymentRepository, card_last4

logger = structlog.get_logger(__name__)


class InMemoryPaymentRepository(PaymentRepository):
    """
    Payment repository backed by a dict keyed by payment id.

    Each instance owns its own store, so tests never share state. Writes
    and reads go through a lock; Payment records are frozen so they can be
    handed out without copying.
    """

    def __init__(self, seed: Iterable[Payment] = ()) -> None:
        self._lock = threading.Lock()
        self._payments: dict[str, Payment] = {payment.id: payment for payment in seed}

    def save(self, request: PaymentRequest, status: AuthorizationStatus) -> str:
        with self._lock:
            payment_id = str(uuid.uuid4())
            while payment_id in self._payments:
                payment_id = str(uuid.uuid4())

            self._payments[payment_id] = Payment(
                id=payment_id,
                status=status,
                card_last4=card_last4(request),
                expiry_month=request.expiry_month,
                expiry_year=request.expiry_year,
                currency=normalize_currency(request.currency),
                amount=request.amount,
            )

        logger.debug("payment_saved", payment_id=payment_id, status=status.value)
        return payment_id

    def get_by_id(self, payment_id: str) -> Payment:
        with self._lock:
            payment = self._payments.get(payment_id)

        if payment is None:
            logger.debug("payment_not_found", payment_id=payment_id)
            return EMPTY_PAYMENT
        return payment

    def __len__(self) -> int:
        with self._lock:
            return len(self._payments)
