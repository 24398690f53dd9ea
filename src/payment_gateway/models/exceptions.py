"""Custom exceptions for the Payment Gateway."""


class PaymentGatewayError(Exception):
    """Base exception for gateway errors."""

    pass


class InvalidCurrencyCode(PaymentGatewayError, ValueError):
    """Raised when a blank currency code is passed to the currency service."""

    pass


class CurrencyNotFound(PaymentGatewayError, KeyError):
    """Raised when minor-unit precision is requested for an unknown currency."""

    def __str__(self) -> str:
        # KeyError repr-quotes its message
        return str(self.args[0]) if self.args else ""


class UnsupportedCurrency(PaymentGatewayError):
    """
    Raised when a payment is submitted in a currency the gateway does not support.

    This is a configuration/input error, not a bank decision. The bank is
    never called and nothing is persisted.
    """

    def __init__(self, currency: str | None) -> None:
        self.currency = currency
        super().__init__(f"Unsupported currency: {currency}")


class AcquiringBankError(PaymentGatewayError):
    """
    Raised when the acquiring bank cannot be reached or answers with an
    unexpected HTTP status.

    Examples:
    - HTTP 500, 502, 401, 404 ... (anything other than 2xx, 400 and 503)
    - Network timeout
    - Connection errors

    Not retried and never downgraded to a decline.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class InvalidPaymentId(PaymentGatewayError, ValueError):
    """Raised when a payment identifier is blank or not a valid UUID."""

    def __init__(self, payment_id: str | None) -> None:
        self.payment_id = payment_id
        super().__init__(f"Invalid payment id: {payment_id!r}")
