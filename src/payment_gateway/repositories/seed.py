"""Demo payments loaded into new repositories when seeding is enabled."""

from payment_gateway.models import AuthorizationStatus, Payment

DEMO_PAYMENTS: tuple[Payment, ...] = (
    Payment(
        id="11111111-1111-1111-1111-111111111111",
        status=AuthorizationStatus.AUTHORIZED,
        card_last4="4242",
        expiry_month=12,
        expiry_year=2026,
        currency="GBP",
        amount=1050,
    ),
    Payment(
        id="22222222-2222-2222-2222-222222222222",
        status=AuthorizationStatus.DECLINED,
        card_last4="1234",
        expiry_month=6,
        expiry_year=2025,
        currency="USD",
        amount=2500,
    ),
    Payment(
        id="33333333-3333-3333-3333-333333333333",
        status=AuthorizationStatus.AUTHORIZED,
        card_last4="9876",
        expiry_month=3,
        expiry_year=2027,
        currency="EUR",
        amount=199,
    ),
)
