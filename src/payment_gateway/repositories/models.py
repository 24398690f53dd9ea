"""SQLAlchemy ORM models for the Payment Gateway."""

from datetime import datetime

from sqlalchemy import TIMESTAMP, BigInteger, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from payment_gateway.repositories.database import Base


class PaymentRecord(Base):
    """
    Stored payment attempt.

    Holds the last four digits of the card only; the full card number and
    CVV never reach the database.
    """

    __tablename__ = "payments"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, comment="Payment UUID"
    )

    status: Mapped[str] = mapped_column(
        String(20), nullable=False, comment="Authorization outcome"
    )

    card_last4: Mapped[str] = mapped_column(
        String(4), nullable=False, comment="Last four digits of the card number"
    )

    expiry_month: Mapped[int] = mapped_column(Integer, nullable=False)
    expiry_year: Mapped[int] = mapped_column(Integer, nullable=False)

    currency: Mapped[str] = mapped_column(
        String(3), nullable=False, comment="ISO 4217 currency code"
    )

    amount: Mapped[int] = mapped_column(
        BigInteger, nullable=False, comment="Amount in minor currency units"
    )

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
        comment="Record creation timestamp",
    )

    __table_args__ = (Index("idx_payments_created_at", "created_at"),)
