"""Pydantic models for JSON API requests/responses."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from payment_gateway.models import AuthorizationStatus, Payment, PaymentRequest


class CreatePaymentRequestJSON(BaseModel):
    """JSON request model for submitting a card payment.

    Every field has a default so that missing values reach the payment
    validator and come back as a Rejected outcome instead of a 422.
    """

    card_number: Optional[str] = Field(None, description="Card number (14-19 digits)")
    expiry_month: int = Field(0, description="Expiry month (1-12)")
    expiry_year: int = Field(0, description="Expiry year (YYYY)")
    currency: Optional[str] = Field(None, description="ISO 4217 currency code")
    amount: int = Field(0, description="Amount in minor currency units")
    cvv: Optional[str] = Field(None, description="Card verification value")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "card_number": "2222405343248877",
                "expiry_month": 4,
                "expiry_year": 2030,
                "currency": "GBP",
                "amount": 100,
                "cvv": "123",
            }
        }
    )

    def to_domain(self) -> PaymentRequest:
        return PaymentRequest(
            card_number=self.card_number,
            expiry_month=self.expiry_month,
            expiry_year=self.expiry_year,
            currency=self.currency,
            amount=self.amount,
            cvv=self.cvv,
        )


class FieldErrorJSON(BaseModel):
    field: str = Field(..., description="Request field that failed validation")
    message: str = Field(..., description="Human-readable failure reason")


class CreatePaymentResponseJSON(BaseModel):
    """JSON response model for a payment submission."""

    status: Optional[AuthorizationStatus] = Field(
        None,
        description="Outcome (Authorized, Declined, Rejected, BadRequest, Unavailable)",
    )
    value: Optional[str] = Field(None, description="Payment id, only when Authorized")
    errors: list[FieldErrorJSON] = Field(
        default_factory=list, description="Validation failures when Rejected"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "Authorized",
                "value": "0b9f5c64-5a7e-4a55-9b8c-4b6f2f0f3c1e",
                "errors": [],
            }
        }
    )


class PaymentJSON(BaseModel):
    """JSON model for a stored payment."""

    id: str = Field(..., description="Payment UUID")
    status: Optional[AuthorizationStatus] = Field(None, description="Stored outcome")
    card_last4: str = Field(..., description="Last four digits of the card number")
    expiry_month: int
    expiry_year: int
    currency: str
    amount: int = Field(..., description="Amount in minor currency units")

    @classmethod
    def from_domain(cls, payment: Payment) -> "PaymentJSON":
        return cls(
            id=payment.id,
            status=payment.status,
            card_last4=payment.card_last4,
            expiry_month=payment.expiry_month,
            expiry_year=payment.expiry_year,
            currency=payment.currency,
            amount=payment.amount,
        )


class GetPaymentResponseJSON(BaseModel):
    """JSON response model for a payment lookup. Both fields are null when not found."""

    status: Optional[AuthorizationStatus] = Field(None, description="Envelope status")
    value: Optional[PaymentJSON] = Field(None, description="Payment record")
