"""FastAPI dependencies for the payment routes.

Collaborators are built once by the application lifespan and stored on
``app.state``. Tests replace them through ``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends, Request

from payment_gateway.clients.base import AcquiringBankClient
from payment_gateway.domain.currency import CurrencyService
from payment_gateway.domain.validation import PaymentValidator
from payment_gateway.handlers import (
    CreatePaymentHandler,
    GetPaymentHandler,
    ValidatedCreatePaymentHandler,
)
from payment_gateway.repositories.base import PaymentRepository


def get_currency_service(request: Request) -> CurrencyService:
    return request.app.state.currency_service


def get_bank_client(request: Request) -> AcquiringBankClient:
    return request.app.state.bank_client


def get_payment_repository(request: Request) -> PaymentRepository:
    return request.app.state.payment_repository


def get_payment_validator(request: Request) -> PaymentValidator:
    return request.app.state.payment_validator


def get_create_payment_handler(
    validator: Annotated[PaymentValidator, Depends(get_payment_validator)],
    currency_service: Annotated[CurrencyService, Depends(get_currency_service)],
    bank_client: Annotated[AcquiringBankClient, Depends(get_bank_client)],
    repository: Annotated[PaymentRepository, Depends(get_payment_repository)],
) -> ValidatedCreatePaymentHandler:
    return ValidatedCreatePaymentHandler(
        validator,
        CreatePaymentHandler(currency_service, bank_client, repository),
    )


def get_get_payment_handler(
    repository: Annotated[PaymentRepository, Depends(get_payment_repository)],
) -> GetPaymentHandler:
    return GetPaymentHandler(repository)


CreatePaymentService = Annotated[
    ValidatedCreatePaymentHandler, Depends(get_create_payment_handler)
]
GetPaymentService = Annotated[GetPaymentHandler, Depends(get_get_payment_handler)]
