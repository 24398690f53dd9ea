"""Pytest configuration and shared fixtures for all tests.

This module provides shared test fixtures including:
- A clock frozen at a known date
- Sample payment requests
- Repository and bank client doubles
"""

import sys
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from payment_gateway.clients.base import AcquiringBankClient
from payment_gateway.domain.clock import FixedClock
from payment_gateway.domain.currency import CurrencyService
from payment_gateway.models import (
    AuthorizationResult,
    AuthorizationStatus,
    PaymentRequest,
)
from payment_gateway.repositories.memory import InMemoryPaymentRepository


# All clock-dependent tests run as if today were 15 June 2025
FIXED_NOW = datetime(2025, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    """Clock frozen at FIXED_NOW."""
    return FixedClock(FIXED_NOW)


@pytest.fixture
def make_request():
    """Build a valid PaymentRequest, overriding any field."""

    def _make(**overrides) -> PaymentRequest:
        fields = {
            "card_number": "1234567890123456",
            "expiry_month": 12,
            "expiry_year": datetime.now(timezone.utc).year + 1,
            "currency": "USD",
            "amount": 1000,
            "cvv": "123",
        }
        fields.update(overrides)
        return PaymentRequest(**fields)

    return _make


@pytest.fixture
def payment_request(make_request):
    """The canonical valid request used across scenarios."""
    return make_request()


@pytest.fixture
def currency_service():
    return CurrencyService()


@pytest.fixture
def repository():
    """Empty in-memory repository."""
    return InMemoryPaymentRepository()


@pytest.fixture
def bank_client():
    """Bank client double that authorizes every request."""
    client = AsyncMock(spec=AcquiringBankClient)
    client.authorize.return_value = AuthorizationResult(
        status=AuthorizationStatus.AUTHORIZED,
        authorization_code="auth-123",
    )
    return client
