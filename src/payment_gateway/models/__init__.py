"""Domain models for the Payment Gateway."""

from payment_gateway.models.exceptions import (
    AcquiringBankError,
    CurrencyNotFound,
    InvalidCurrencyCode,
    InvalidPaymentId,
    PaymentGatewayError,
    UnsupportedCurrency,
)
from payment_gateway.models.payment import (
    EMPTY_PAYMENT,
    AuthorizationRequest,
    AuthorizationResult,
    AuthorizationStatus,
    FieldError,
    Payment,
    PaymentRequest,
    PaymentResult,
    normalize_card_number,
)

__all__ = [
    "EMPTY_PAYMENT",
    "AcquiringBankError",
    "AuthorizationRequest",
    "AuthorizationResult",
    "AuthorizationStatus",
    "CurrencyNotFound",
    "FieldError",
    "InvalidCurrencyCode",
    "InvalidPaymentId",
    "Payment",
    "PaymentGatewayError",
    "PaymentRequest",
    "PaymentResult",
    "UnsupportedCurrency",
    "normalize_card_number",
]
