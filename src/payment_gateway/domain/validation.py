"""Validation of incoming payment requests.

Every field is checked independently so the caller gets all failures at once.
Within a single field the checks stop at the first failure (a missing card
number is reported once, not also as "not numeric").
"""

import re
from dataclasses import dataclass

from payment_gateway.domain.clock import Clock, SystemClock
from payment_gateway.domain.expiry import not_expired
from payment_gateway.models.payment import FieldError, PaymentRequest

CARD_NUMBER_PATTERN = re.compile(r"\d{14,19}", re.ASCII)
CURRENCY_PATTERN = re.compile(r"[A-Za-z]{3}")
CVV_PATTERN = re.compile(r"\d{3,4}", re.ASCII)

# Amounts travel as 32-bit signed integers on the bank wire
MAX_AMOUNT = 2_147_483_647
# Expiry is sent as MM/YYYY
MAX_EXPIRY_YEAR = 9999


@dataclass(frozen=True)
class ValidationResult:
    errors: tuple[FieldError, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors


class PaymentValidator:
    """Structural and business-rule validation for a PaymentRequest."""

    def __init__(self, clock: Clock | None = None) -> None:
        self.clock = clock or SystemClock()

    def validate(self, request: PaymentRequest) -> ValidationResult:
        errors: list[FieldError] = []

        for check in (
            self._check_card_number,
            self._check_expiry_month,
            self._check_expiry_year,
            self._check_expiry,
            self._check_currency,
            self._check_amount,
            self._check_cvv,
        ):
            error = check(request)
            if error is not None:
                errors.append(error)

        return ValidationResult(errors=tuple(errors))

    def _check_card_number(self, request: PaymentRequest) -> FieldError | None:
        # Applied to the raw value: separators are rejected here
        card_number = request.card_number
        if card_number is None:
            return FieldError("card_number", "Card Number cannot be null.")
        if not card_number.strip():
            return FieldError("card_number", "Card Number cannot be empty.")
        if not CARD_NUMBER_PATTERN.fullmatch(card_number):
            return FieldError(
                "card_number",
                "Card Number must be numeric and between 14 and 19 digits.",
            )
        return None

    def _check_expiry_month(self, request: PaymentRequest) -> FieldError | None:
        if not 1 <= request.expiry_month <= 12:
            return FieldError("expiry_month", "Expiry Month must be between 1 and 12.")
        return None

    def _check_expiry_year(self, request: PaymentRequest) -> FieldError | None:
        if request.expiry_year < self.clock.now().year:
            return FieldError(
                "expiry_year", "Expiry Year must be the current year or later."
            )
        if request.expiry_year > MAX_EXPIRY_YEAR:
            return FieldError("expiry_year", "Expiry Year must be a four-digit year.")
        return None

    def _check_expiry(self, request: PaymentRequest) -> FieldError | None:
        if not not_expired(request.expiry_month, request.expiry_year, self.clock):
            return FieldError("expiry", "Card expiry must be in the future.")
        return None

    def _check_currency(self, request: PaymentRequest) -> FieldError | None:
        currency = request.currency
        if currency is None or not currency.strip():
            return FieldError("currency", "Currency is required.")
        if not CURRENCY_PATTERN.fullmatch(currency):
            return FieldError("currency", "Currency must be a 3-letter ISO code.")
        return None

    def _check_amount(self, request: PaymentRequest) -> FieldError | None:
        if request.amount <= 0:
            return FieldError(
                "amount", "Amount must be greater than 0 (minor currency units)."
            )
        if request.amount > MAX_AMOUNT:
            return FieldError(
                "amount", f"Amount must not exceed {MAX_AMOUNT} (minor currency units)."
            )
        return None

    def _check_cvv(self, request: PaymentRequest) -> FieldError | None:
        cvv = request.cvv
        if cvv is None or not cvv.strip():
            return FieldError("cvv", "CVV is required.")
        if not CVV_PATTERN.fullmatch(cvv):
            return FieldError("cvv", "CVV must be numeric and 3 to 4 digits long.")
        return None
