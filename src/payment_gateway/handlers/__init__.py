"""Request handlers for the Payment Gateway."""

from payment_gateway.handlers.create_payment import (
    CreatePaymentHandler,
    ValidatedCreatePaymentHandler,
)
from payment_gateway.handlers.get_payment import GetPaymentHandler, parse_payment_id

__all__ = [
    "CreatePaymentHandler",
    "GetPaymentHandler",
    "ValidatedCreatePaymentHandler",
    "parse_payment_id",
]
