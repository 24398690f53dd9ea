"""Base interface for acquiring bank clients."""

from abc import ABC, abstractmethod

from payment_gateway.models import AuthorizationRequest, AuthorizationResult


class AcquiringBankClient(ABC):
    """
    Abstract base class for acquiring bank integrations.

    Every implementation sends at most one authorization request per call and
    never retries.
    """

    @abstractmethod
    async def authorize(self, request: AuthorizationRequest) -> AuthorizationResult:
        """
        Ask the acquiring bank to authorize a card payment.

        Args:
            request: Authorization request in the bank's wire shape

        Returns:
            AuthorizationResult with AUTHORIZED, DECLINED, BAD_REQUEST or
            UNAVAILABLE status.

        Raises:
            AcquiringBankError: For any other HTTP status and for network
                failures. These are never converted into a decline.
        """
        pass

    async def close(self) -> None:
        """Release any held resources."""
        return None
