"""Payment domain models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class AuthorizationStatus(str, Enum):
    """Outcome of a payment authorization attempt.

    AUTHORIZED, DECLINED, BAD_REQUEST and UNAVAILABLE come from the acquiring
    bank. REJECTED is produced by the gateway itself when the request fails
    validation and the bank is never called.
    """

    AUTHORIZED = "Authorized"
    DECLINED = "Declined"
    REJECTED = "Rejected"
    BAD_REQUEST = "BadRequest"
    UNAVAILABLE = "Unavailable"


def normalize_card_number(card_number: str | None) -> str:
    """Strip spaces and dashes from a card number."""
    if not card_number or not card_number.strip():
        return ""
    return card_number.replace(" ", "").replace("-", "")


@dataclass(frozen=True)
class PaymentRequest:
    """
    Card payment submitted by a merchant.

    The full card number and CVV only live for the duration of the request;
    neither is ever persisted.
    """

    card_number: str | None
    expiry_month: int
    expiry_year: int
    currency: str | None
    amount: int
    cvv: str | None

    @property
    def normalized_card_number(self) -> str:
        return normalize_card_number(self.card_number)


@dataclass(frozen=True)
class AuthorizationRequest:
    """Authorization request in the acquiring bank's wire shape."""

    card_number: str
    expiry_month: int
    expiry_year: int
    currency: str
    amount: int
    cvv: str

    @property
    def expiry_date(self) -> str:
        """Expiry rendered as MM/YYYY."""
        return f"{self.expiry_month:02d}/{self.expiry_year:04d}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "card_number": self.card_number,
            "expiry_date": self.expiry_date,
            "currency": self.currency,
            "amount": self.amount,
            "cvv": self.cvv,
        }


@dataclass(frozen=True)
class AuthorizationResult:
    """Result returned by an acquiring bank client."""

    status: AuthorizationStatus
    authorization_code: str | None = None


@dataclass(frozen=True)
class Payment:
    """
    Persisted payment record.

    Only the last four digits of the card number are kept. An empty ``id``
    marks the "not found" sentinel returned by repositories.
    """

    id: str
    status: AuthorizationStatus | None
    card_last4: str
    expiry_month: int
    expiry_year: int
    currency: str
    amount: int

    @property
    def exists(self) -> bool:
        return bool(self.id)


EMPTY_PAYMENT = Payment(
    id="",
    status=None,
    card_last4="",
    expiry_month=0,
    expiry_year=0,
    currency="",
    amount=0,
)


@dataclass(frozen=True)
class FieldError:
    """A single validation failure."""

    field: str
    message: str


@dataclass(frozen=True)
class PaymentResult(Generic[T]):
    """
    Outcome-carrying response envelope.

    ``value`` is the payment id for the create flow and the Payment record
    for the get flow. Both ``status`` and ``value`` are None for an empty
    result.
    """

    status: AuthorizationStatus | None = None
    value: T | None = None
    errors: tuple[FieldError, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> "PaymentResult[T]":
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.status is None and self.value is None
