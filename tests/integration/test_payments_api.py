"""
Integration tests for the payments HTTP API.

The application runs with its real lifespan; the acquiring bank and the
repository are swapped through dependency overrides.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from payment_gateway.api.dependencies import get_bank_client, get_payment_repository
from payment_gateway.api.main import app
from payment_gateway.clients.base import AcquiringBankClient
from payment_gateway.models import (
    AcquiringBankError,
    AuthorizationResult,
    AuthorizationStatus,
)
from payment_gateway.repositories.memory import InMemoryPaymentRepository
from payment_gateway.repositories.seed import DEMO_PAYMENTS


pytestmark = pytest.mark.integration


def payment_body(**overrides):
    body = {
        "card_number": "2222405343248877",
        "expiry_month": 4,
        "expiry_year": datetime.now(timezone.utc).year + 1,
        "currency": "GBP",
        "amount": 100,
        "cvv": "123",
    }
    body.update(overrides)
    return body


@pytest.fixture
def fake_bank():
    bank = AsyncMock(spec=AcquiringBankClient)
    bank.authorize.return_value = AuthorizationResult(
        status=AuthorizationStatus.AUTHORIZED,
        authorization_code="0bb07405-6d44-4b50-a14f-7ae0beff13ad",
    )
    return bank


@pytest.fixture
def payment_store():
    return InMemoryPaymentRepository(seed=DEMO_PAYMENTS)


@pytest.fixture
def client(fake_bank, payment_store):
    app.dependency_overrides[get_bank_client] = lambda: fake_bank
    app.dependency_overrides[get_payment_repository] = lambda: payment_store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


class TestCreatePayment:
    """POST /api/payments"""

    def test_authorized(self, client, payment_store):
        response = client.post("/api/payments", json=payment_body())

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "Authorized"
        assert data["value"]
        assert data["errors"] == []
        assert payment_store.get_by_id(data["value"]).card_last4 == "8877"

    def test_declined(self, client, fake_bank, payment_store):
        fake_bank.authorize.return_value = AuthorizationResult(status=AuthorizationStatus.DECLINED)

        response = client.post("/api/payments", json=payment_body())

        assert response.status_code == 200
        assert response.json() == {"status": "Declined", "value": None, "errors": []}
        assert len(payment_store) == len(DEMO_PAYMENTS)

    @pytest.mark.parametrize(
        "status, wire_name",
        [
            (AuthorizationStatus.BAD_REQUEST, "BadRequest"),
            (AuthorizationStatus.UNAVAILABLE, "Unavailable"),
        ],
    )
    def test_bank_outcome_returned_as_is(self, client, fake_bank, status, wire_name):
        fake_bank.authorize.return_value = AuthorizationResult(status=status)

        response = client.post("/api/payments", json=payment_body())

        assert response.status_code == 200
        assert response.json()["status"] == wire_name
        assert response.json()["value"] is None

    def test_rejected(self, client, fake_bank):
        response = client.post("/api/payments", json=payment_body(card_number="123"))

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "Rejected"
        assert data["value"] is None
        assert data["errors"] == [
            {
                "field": "card_number",
                "message": "Card Number must be numeric and between 14 and 19 digits.",
            }
        ]
        fake_bank.authorize.assert_not_called()

    def test_oversized_amount_is_rejected(self, client, fake_bank, payment_store):
        response = client.post("/api/payments", json=payment_body(amount=2**63))

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "Rejected"
        assert [error["field"] for error in data["errors"]] == ["amount"]
        fake_bank.authorize.assert_not_called()
        assert len(payment_store) == len(DEMO_PAYMENTS)

    def test_empty_body_is_rejected(self, client, fake_bank):
        response = client.post("/api/payments", json={})

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "Rejected"
        assert {error["field"] for error in data["errors"]} == {
            "card_number",
            "expiry_month",
            "expiry_year",
            "currency",
            "amount",
            "cvv",
        }
        fake_bank.authorize.assert_not_called()

    def test_unsupported_currency(self, client, fake_bank):
        response = client.post("/api/payments", json=payment_body(currency="XYZ"))

        assert response.status_code == 422
        assert response.json() == {"detail": "Unsupported currency: XYZ"}
        fake_bank.authorize.assert_not_called()

    def test_bank_failure(self, client, fake_bank, payment_store):
        fake_bank.authorize.side_effect = AcquiringBankError(
            "Acquiring bank returned unexpected status 500", status_code=500
        )

        response = client.post("/api/payments", json=payment_body())

        assert response.status_code == 502
        assert response.json() == {"detail": "Acquiring bank unavailable"}
        assert len(payment_store) == len(DEMO_PAYMENTS)


class TestGetPayment:
    """GET /api/payments/{payment_id}"""

    def test_created_payment_is_retrievable(self, client):
        created = client.post("/api/payments", json=payment_body()).json()

        response = client.get(f"/api/payments/{created['value']}")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "Authorized"
        assert data["value"]["id"] == created["value"]
        assert data["value"]["card_last4"] == "8877"
        assert data["value"]["currency"] == "GBP"
        assert data["value"]["amount"] == 100
        assert "card_number" not in data["value"]
        assert "cvv" not in data["value"]

    def test_seeded_declined_payment(self, client):
        response = client.get("/api/payments/22222222-2222-2222-2222-222222222222")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "Authorized"
        assert data["value"]["status"] == "Declined"
        assert data["value"]["card_last4"] == "1234"

    def test_unknown_payment(self, client):
        response = client.get("/api/payments/7c9e6679-7425-40de-944b-e07fc1f90ae7")

        assert response.status_code == 200
        assert response.json() == {"status": None, "value": None}

    def test_nil_uuid(self, client):
        response = client.get("/api/payments/00000000-0000-0000-0000-000000000000")

        assert response.status_code == 200
        assert response.json() == {"status": None, "value": None}

    def test_malformed_id(self, client):
        response = client.get("/api/payments/invalid-id")

        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid payment id format"}


class TestServiceEndpoints:
    """Health and root endpoints."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["service"] == "payment-gateway"

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["service"] == "Payment Gateway"
