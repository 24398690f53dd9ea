"""
Integration tests for SqlPaymentRepository.

Runs against an in-memory SQLite database so no external services are
needed.
"""

import uuid

import pytest
from sqlalchemy import select

from payment_gateway.config import Settings
from payment_gateway.domain.validation import PaymentValidator
from payment_gateway.handlers import CreatePaymentHandler, ValidatedCreatePaymentHandler
from payment_gateway.models import EMPTY_PAYMENT, AuthorizationStatus
from payment_gateway.repositories import (
    InMemoryPaymentRepository,
    SqlPaymentRepository,
    build_payment_repository,
)
from payment_gateway.repositories.database import (
    create_db_engine,
    create_session_factory,
    init_db,
)
from payment_gateway.repositories.models import PaymentRecord
from payment_gateway.repositories.seed import DEMO_PAYMENTS


pytestmark = pytest.mark.integration


@pytest.fixture
def session_factory():
    """Session factory bound to a fresh in-memory database."""
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield create_session_factory(engine)
    engine.dispose()


@pytest.fixture
def sql_repository(session_factory):
    return SqlPaymentRepository(session_factory)


class TestSqlPaymentRepository:
    """Tests for SqlPaymentRepository."""

    def test_save_and_get(self, sql_repository, make_request):
        request = make_request(
            card_number="2222 4053 4324 8877",
            expiry_month=4,
            expiry_year=2030,
            currency="gbp",
            amount=100,
        )

        payment_id = sql_repository.save(request, AuthorizationStatus.AUTHORIZED)
        payment = sql_repository.get_by_id(payment_id)

        assert uuid.UUID(payment_id)
        assert payment.id == payment_id
        assert payment.status == AuthorizationStatus.AUTHORIZED
        assert payment.card_last4 == "8877"
        assert payment.expiry_month == 4
        assert payment.expiry_year == 2030
        assert payment.currency == "GBP"
        assert payment.amount == 100

    def test_row_holds_only_last_four_digits(self, sql_repository, session_factory, payment_request):
        payment_id = sql_repository.save(payment_request, AuthorizationStatus.AUTHORIZED)

        with session_factory() as session:
            record = session.execute(
                select(PaymentRecord).where(PaymentRecord.id == payment_id)
            ).scalar_one()

        assert record.card_last4 == "3456"
        assert record.status == "Authorized"
        assert record.created_at is not None

    def test_missing_id_returns_empty_payment(self, sql_repository):
        assert sql_repository.get_by_id(str(uuid.uuid4())) is EMPTY_PAYMENT

    def test_ids_are_unique(self, sql_repository, payment_request):
        ids = {sql_repository.save(payment_request, AuthorizationStatus.AUTHORIZED) for _ in range(20)}

        assert len(ids) == 20


class TestOversizedValues:
    """Values the columns cannot hold are rejected before the bank is called."""

    @pytest.fixture
    def handler(self, sql_repository, currency_service, bank_client):
        return ValidatedCreatePaymentHandler(
            PaymentValidator(),
            CreatePaymentHandler(currency_service, bank_client, sql_repository),
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides, field",
        [
            ({"amount": 2**63}, "amount"),
            ({"expiry_year": 2**31}, "expiry_year"),
        ],
    )
    async def test_rejected_without_bank_call(
        self, handler, bank_client, session_factory, make_request, overrides, field
    ):
        result = await handler.handle(make_request(**overrides))

        assert result.status == AuthorizationStatus.REJECTED
        assert [error.field for error in result.errors] == [field]
        bank_client.authorize.assert_not_called()

        with session_factory() as session:
            assert session.execute(select(PaymentRecord)).first() is None


class TestSqlSeeding:
    """Tests for demo payment seeding."""

    def test_seed_is_loaded(self, session_factory):
        repository = SqlPaymentRepository(session_factory, seed=DEMO_PAYMENTS)

        declined = repository.get_by_id("22222222-2222-2222-2222-222222222222")

        assert declined == DEMO_PAYMENTS[1]

    def test_seeding_twice_does_not_duplicate(self, session_factory):
        SqlPaymentRepository(session_factory, seed=DEMO_PAYMENTS)
        SqlPaymentRepository(session_factory, seed=DEMO_PAYMENTS)

        with session_factory() as session:
            count = len(session.execute(select(PaymentRecord)).scalars().all())

        assert count == len(DEMO_PAYMENTS)


class TestBuildPaymentRepository:
    """Tests for configuration-based repository selection."""

    def test_memory_backend(self):
        repository = build_payment_repository(Settings(_env_file=None, repository_backend="memory"))

        assert isinstance(repository, InMemoryPaymentRepository)
        assert len(repository) == len(DEMO_PAYMENTS)

    def test_memory_backend_without_seed(self):
        repository = build_payment_repository(
            Settings(_env_file=None, repository_backend="memory", seed_demo_payments=False)
        )

        assert len(repository) == 0

    def test_sql_backend(self):
        repository = build_payment_repository(
            Settings(_env_file=None, repository_backend="SQL", database_url="sqlite://")
        )

        assert isinstance(repository, SqlPaymentRepository)
        assert repository.get_by_id("11111111-1111-1111-1111-111111111111").card_last4 == "4242"

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown repository backend: redis"):
            build_payment_repository(Settings(_env_file=None, repository_backend="redis"))
