"""
In-process acquiring bank simulator.

Used for local runs and end-to-end tests when no bank is reachable. The
outcome is derived from the last digit of the card number, matching the
behaviour of the bank simulator the HTTP client is developed against:

- missing field          -> BAD_REQUEST (the bank answers 400)
- last digit 0           -> UNAVAILABLE (the bank answers 503)
- last digit odd         -> AUTHORIZED with a random authorization code
- last digit even        -> DECLINED
"""

import asyncio
import uuid

import structlog

from payment_gateway.clients.base import AcquiringBankClient
from payment_gateway.models import (
    AuthorizationRequest,
    AuthorizationResult,
    AuthorizationStatus,
)

logger = structlog.get_logger(__name__)


class SimulatedAcquiringBankClient(AcquiringBankClient):
    """
    Acquiring bank client that never leaves the process.

    Args:
        latency_ms: Simulated processing latency in milliseconds
    """

    def __init__(self, latency_ms: int = 0) -> None:
        self.latency_ms = latency_ms
        logger.info("bank_simulator_initialized", latency_ms=latency_ms)

    async def authorize(self, request: AuthorizationRequest) -> AuthorizationResult:
        if self.latency_ms > 0:
            await asyncio.sleep(self.latency_ms / 1000.0)

        card_number = request.card_number

        if not (card_number and request.currency and request.cvv and request.amount):
            logger.warning("bank_simulator_bad_request")
            return AuthorizationResult(status=AuthorizationStatus.BAD_REQUEST)

        last_digit = card_number[-1]

        if last_digit == "0":
            logger.warning("bank_simulator_unavailable", card_last4=card_number[-4:])
            return AuthorizationResult(status=AuthorizationStatus.UNAVAILABLE)

        if last_digit.isdigit() and int(last_digit) % 2 == 1:
            authorization_code = str(uuid.uuid4())
            logger.info(
                "bank_simulator_authorized",
                card_last4=card_number[-4:],
                authorization_code=authorization_code,
            )
            return AuthorizationResult(
                status=AuthorizationStatus.AUTHORIZED,
                authorization_code=authorization_code,
            )

        logger.info("bank_simulator_declined", card_last4=card_number[-4:])
        return AuthorizationResult(status=AuthorizationStatus.DECLINED)
