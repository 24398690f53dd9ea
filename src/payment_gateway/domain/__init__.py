"""Business rules for the Payment Gateway."""

from payment_gateway.domain.clock import Clock, FixedClock, SystemClock
from payment_gateway.domain.currency import (
    DEFAULT_CURRENCIES,
    CurrencyService,
    is_currency_supported,
    normalize_currency,
)
from payment_gateway.domain.expiry import not_expired
from payment_gateway.domain.validation import PaymentValidator, ValidationResult

__all__ = [
    "DEFAULT_CURRENCIES",
    "Clock",
    "CurrencyService",
    "FixedClock",
    "PaymentValidator",
    "SystemClock",
    "ValidationResult",
    "is_currency_supported",
    "normalize_currency",
    "not_expired",
]
