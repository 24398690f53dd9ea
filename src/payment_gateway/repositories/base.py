"""Payment repository interface."""

from abc import ABC, abstractmethod

from payment_gateway.models import AuthorizationStatus, Payment, PaymentRequest


class PaymentRepository(ABC):
    """
    Storage contract for payment records.

    Contract:
    - save() assigns a new, unique id; callers never supply one
    - save() stores only the last four digits of the card number
    - get_by_id() returns EMPTY_PAYMENT when nothing matches, never raises
      for a missing record
    - a get_by_id() that starts after a save() completed observes it
    """

    @abstractmethod
    def save(self, request: PaymentRequest, status: AuthorizationStatus) -> str:
        """Persist a payment attempt and return its generated id."""
        pass

    @abstractmethod
    def get_by_id(self, payment_id: str) -> Payment:
        """Return the payment with the given id, or EMPTY_PAYMENT."""
        pass


def card_last4(request: PaymentRequest) -> str:
    return request.normalized_card_number[-4:]
