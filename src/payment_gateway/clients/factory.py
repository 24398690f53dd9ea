"""
Factory for acquiring bank clients.

Lets configuration pick the bank integration by name ("http" for a real
bank endpoint, "simulator" for the in-process simulator).
"""

import structlog

from payment_gateway.clients.base import AcquiringBankClient
from payment_gateway.clients.http_client import HttpAcquiringBankClient
from payment_gateway.clients.simulator import SimulatedAcquiringBankClient
from payment_gateway.config import AcquiringBankSettings, settings

logger = structlog.get_logger(__name__)


class BankClientFactory:
    """Registry of acquiring bank client implementations."""

    _CLIENTS: dict[str, type[AcquiringBankClient]] = {
        "http": HttpAcquiringBankClient,
        "simulator": SimulatedAcquiringBankClient,
    }

    @classmethod
    def create_client(
        cls,
        client_name: str,
        bank_settings: AcquiringBankSettings | None = None,
    ) -> AcquiringBankClient:
        """
        Create an acquiring bank client by name.

        Args:
            client_name: Registered client name (case-insensitive)
            bank_settings: Bank settings; defaults to the global settings

        Raises:
            ValueError: If client_name is not registered
        """
        client_name_lower = client_name.lower()

        if client_name_lower not in cls._CLIENTS:
            available = ", ".join(sorted(cls._CLIENTS))
            raise ValueError(
                f"Unknown bank client: {client_name}. "
                f"Available clients: {available}"
            )

        client_class = cls._CLIENTS[client_name_lower]
        bank_settings = bank_settings or settings.acquiring_bank

        logger.info(
            "bank_client_created",
            client_name=client_name_lower,
            client_class=client_class.__name__,
        )

        if issubclass(client_class, HttpAcquiringBankClient):
            return client_class(
                base_url=bank_settings.base_url,
                endpoint=bank_settings.endpoint,
                timeout_seconds=bank_settings.timeout_seconds,
            )
        return client_class()

    @classmethod
    def register_client(cls, name: str, client_class: type[AcquiringBankClient]) -> None:
        """Register an additional client type under a name.

        The registry is class-level, so a registration is visible to every
        caller in the process until it is removed.
        """
        if not issubclass(client_class, AcquiringBankClient):
            raise TypeError(
                f"{client_class.__name__} must inherit from AcquiringBankClient"
            )

        cls._CLIENTS[name.lower()] = client_class
        logger.info(
            "bank_client_registered",
            client_name=name.lower(),
            client_class=client_class.__name__,
        )

    @classmethod
    def list_clients(cls) -> list[str]:
        return sorted(cls._CLIENTS)


def get_bank_client(bank_settings: AcquiringBankSettings | None = None) -> AcquiringBankClient:
    """Create the acquiring bank client selected by configuration."""
    bank_settings = bank_settings or settings.acquiring_bank
    return BankClientFactory.create_client(bank_settings.client, bank_settings)
