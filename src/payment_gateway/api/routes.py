"""Payment endpoints.

- POST /api/payments: submit a card payment for authorization
- GET /api/payments/{payment_id}: retrieve a recorded payment

Business outcomes (Authorized, Declined, Rejected, BadRequest, Unavailable)
are always returned as 200 with the outcome in the body. Only unsupported
currencies, bank transport failures and malformed ids are HTTP errors; see
the exception handlers in main.py.
"""

import structlog
from fastapi import APIRouter

from payment_gateway.api.dependencies import CreatePaymentService, GetPaymentService
from payment_gateway.api.models import (
    CreatePaymentRequestJSON,
    CreatePaymentResponseJSON,
    FieldErrorJSON,
    GetPaymentResponseJSON,
    PaymentJSON,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/payments", tags=["payments"])


@router.post("", response_model=CreatePaymentResponseJSON)
async def create_payment(
    body: CreatePaymentRequestJSON,
    handler: CreatePaymentService,
) -> CreatePaymentResponseJSON:
    """Submit a card payment for authorization."""
    logger.info(
        "create_payment_request",
        amount=body.amount,
        currency=body.currency,
    )

    result = await handler.handle(body.to_domain())

    return CreatePaymentResponseJSON(
        status=result.status,
        value=result.value,
        errors=[FieldErrorJSON(field=e.field, message=e.message) for e in result.errors],
    )


@router.get("/{payment_id}", response_model=GetPaymentResponseJSON)
async def get_payment(
    payment_id: str,
    handler: GetPaymentService,
) -> GetPaymentResponseJSON:
    """Retrieve a recorded payment by id."""
    logger.info("get_payment_request", payment_id=payment_id)

    result = await handler.handle(payment_id)

    if result.is_empty:
        return GetPaymentResponseJSON()

    return GetPaymentResponseJSON(
        status=result.status,
        value=PaymentJSON.from_domain(result.value),
    )
