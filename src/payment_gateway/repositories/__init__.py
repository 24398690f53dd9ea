"""Payment persistence."""

import structlog

from payment_gateway.config import Settings, settings as default_settings
from payment_gateway.repositories.base import PaymentRepository
from payment_gateway.repositories.database import (
    create_db_engine,
    create_session_factory,
    init_db,
)
from payment_gateway.repositories.memory import InMemoryPaymentRepository
from payment_gateway.repositories.seed import DEMO_PAYMENTS
from payment_gateway.repositories.sql import SqlPaymentRepository

logger = structlog.get_logger(__name__)


def build_payment_repository(settings: Settings | None = None) -> PaymentRepository:
    """
    Create the payment repository selected by configuration.

    Raises:
        ValueError: If repository_backend is not "memory" or "sql"
    """
    settings = settings or default_settings
    backend = settings.repository_backend.lower()
    seed = DEMO_PAYMENTS if settings.seed_demo_payments else ()

    logger.info("payment_repository_selected", backend=backend)

    if backend == "memory":
        return InMemoryPaymentRepository(seed=seed)

    if backend == "sql":
        engine = create_db_engine(settings.database_url, echo=settings.debug)
        if engine.dialect.name == "sqlite":
            init_db(engine)
        return SqlPaymentRepository(create_session_factory(engine), seed=seed)

    raise ValueError(
        f"Unknown repository backend: {settings.repository_backend}. "
        "Available backends: memory, sql"
    )


__all__ = [
    "DEMO_PAYMENTS",
    "InMemoryPaymentRepository",
    "PaymentRepository",
    "SqlPaymentRepository",
    "build_payment_repository",
]
