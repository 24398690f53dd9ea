"""
Acquiring bank integrations.

- base.AcquiringBankClient: interface every bank client implements
- http_client.HttpAcquiringBankClient: JSON-over-HTTP bank integration
- simulator.SimulatedAcquiringBankClient: in-process bank for local runs
- factory: configuration-based client selection
"""

from payment_gateway.clients.base import AcquiringBankClient
from payment_gateway.clients.factory import BankClientFactory, get_bank_client
from payment_gateway.clients.http_client import HttpAcquiringBankClient
from payment_gateway.clients.simulator import SimulatedAcquiringBankClient

__all__ = [
    "AcquiringBankClient",
    "BankClientFactory",
    "HttpAcquiringBankClient",
    "SimulatedAcquiringBankClient",
    "get_bank_client",
]
