"""Create-payment flow.

Received -> Validated -> CurrencyChecked -> Authorizing
    -> {Authorized, Declined, BadRequest, Unavailable, bank error}
    -> (Persisted | NotPersisted) -> Responded
"""

import asyncio

import structlog

from payment_gateway.clients.base import AcquiringBankClient
from payment_gateway.domain.currency import (
    CurrencyService,
    is_currency_supported,
    normalize_currency,
)
from payment_gateway.domain.validation import PaymentValidator
from payment_gateway.models import (
    AuthorizationRequest,
    AuthorizationStatus,
    PaymentRequest,
    PaymentResult,
    UnsupportedCurrency,
)
from payment_gateway.repositories.base import PaymentRepository

logger = structlog.get_logger(__name__)


class CreatePaymentHandler:
    """
    Authorizes a validated payment with the acquiring bank and records it.

    Only AUTHORIZED payments are persisted and receive an id. Every other
    bank outcome is returned to the caller unchanged with no id.
    """

    def __init__(
        self,
        currency_service: CurrencyService,
        bank_client: AcquiringBankClient,
        repository: PaymentRepository,
    ) -> None:
        self.currency_service = currency_service
        self.bank_client = bank_client
        self.repository = repository

    async def handle(self, request: PaymentRequest) -> PaymentResult[str]:
        """
        Run the authorization pipeline for a request that passed validation.

        Raises:
            UnsupportedCurrency: If the currency is not in the reference set.
                The bank is not called.
            AcquiringBankError: If the bank call fails at the transport level.
        """
        currency = normalize_currency(request.currency)
        if not is_currency_supported(self.currency_service, currency):
            raise UnsupportedCurrency(request.currency)

        authorization_request = AuthorizationRequest(
            card_number=request.normalized_card_number,
            expiry_month=request.expiry_month,
            expiry_year=request.expiry_year,
            currency=currency,
            amount=request.amount,
            cvv=request.cvv or "",
        )

        result = await self.bank_client.authorize(authorization_request)

        if result.status != AuthorizationStatus.AUTHORIZED:
            logger.info(
                "payment_not_authorized",
                status=result.status.value,
                card_last4=authorization_request.card_number[-4:],
            )
            return PaymentResult(status=result.status)

        payment_id = await asyncio.to_thread(self.repository.save, request, result.status)

        logger.info(
            "payment_authorized",
            payment_id=payment_id,
            amount=request.amount,
            currency=currency,
            card_last4=authorization_request.card_number[-4:],
        )
        return PaymentResult(status=result.status, value=payment_id)


class ValidatedCreatePaymentHandler:
    """
    Validation gate in front of CreatePaymentHandler.

    An invalid request short-circuits to REJECTED with the field errors;
    nothing downstream runs.
    """

    def __init__(self, validator: PaymentValidator, handler: CreatePaymentHandler) -> None:
        self.validator = validator
        self.handler = handler

    async def handle(self, request: PaymentRequest) -> PaymentResult[str]:
        validation = self.validator.validate(request)

        if not validation.is_valid:
            logger.info(
                "payment_rejected",
                fields=[error.field for error in validation.errors],
            )
            return PaymentResult(
                status=AuthorizationStatus.REJECTED,
                errors=validation.errors,
            )

        return await self.handler.handle(request)
