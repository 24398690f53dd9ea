"""SQLAlchemy-backed payment repository."""

import uuid
from collections.abc import Iterable

import structlog
from sqlalchemy.orm import sessionmaker

from payment_gateway.domain.currency import normalize_currency
from payment_gateway.models import EMPTY_PAYMENT, AuthorizationStatus, Payment, PaymentRequest
from payment_gateway.repositories.base import PaymentRepository, card_last4
from payment_gateway.repositories.models import PaymentRecord

logger = structlog.get_logger(__name__)


class SqlPaymentRepository(PaymentRepository):
    """Repository for payment records in a relational database.

    Every call opens its own session, so one instance can be shared across
    concurrent requests.
    """

    def __init__(self, session_factory: sessionmaker, seed: Iterable[Payment] = ()):
        """Initialize repository with a session factory.

        Args:
            session_factory: SQLAlchemy sessionmaker bound to the database
            seed: Payments to insert if they are not already present
        """
        self.session_factory = session_factory
        self._seed(seed)

    def save(self, request: PaymentRequest, status: AuthorizationStatus) -> str:
        payment_id = str(uuid.uuid4())

        record = PaymentRecord(
            id=payment_id,
            status=status.value,
            card_last4=card_last4(request),
            expiry_month=request.expiry_month,
            expiry_year=request.expiry_year,
            currency=normalize_currency(request.currency),
            amount=request.amount,
        )

        with self.session_factory() as session:
            session.add(record)
            session.commit()

        logger.debug("payment_saved", payment_id=payment_id, status=status.value)
        return payment_id

    def get_by_id(self, payment_id: str) -> Payment:
        with self.session_factory() as session:
            record = session.get(PaymentRecord, payment_id)

            if record is None:
                logger.debug("payment_not_found", payment_id=payment_id)
                return EMPTY_PAYMENT

            return self._to_domain_entity(record)

    def _seed(self, payments: Iterable[Payment]) -> None:
        payments = list(payments)
        if not payments:
            return

        with self.session_factory() as session:
            for payment in payments:
                if session.get(PaymentRecord, payment.id) is not None:
                    continue
                session.add(
                    PaymentRecord(
                        id=payment.id,
                        status=payment.status.value,
                        card_last4=payment.card_last4,
                        expiry_month=payment.expiry_month,
                        expiry_year=payment.expiry_year,
                        currency=payment.currency,
                        amount=payment.amount,
                    )
                )
            session.commit()

        logger.info("payments_seeded", count=len(payments))

    @staticmethod
    def _to_domain_entity(record: PaymentRecord) -> Payment:
        return Payment(
            id=record.id,
            status=AuthorizationStatus(record.status),
            card_last4=record.card_last4,
            expiry_month=record.expiry_month,
            expiry_year=record.expiry_year,
            currency=record.currency,
            amount=record.amount,
        )
