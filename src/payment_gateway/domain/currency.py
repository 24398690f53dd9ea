"""Currency reference data and the currency support rule."""

from collections.abc import Mapping

import structlog

from payment_gateway.models.exceptions import CurrencyNotFound, InvalidCurrencyCode

logger = structlog.get_logger(__name__)

DEFAULT_CURRENCIES: Mapping[str, int] = {
    "USD": 2,
    "GBP": 2,
    "EUR": 2,
}


class CurrencyService:
    """
    Authoritative mapping from ISO 4217 code to minor-unit precision.

    Lookups are trimmed and case-insensitive. The table is fixed at
    construction time.
    """

    def __init__(self, currencies: Mapping[str, int] | None = None) -> None:
        table = DEFAULT_CURRENCIES if currencies is None else currencies
        self._minor_units = {code.strip().upper(): int(units) for code, units in table.items()}

    @property
    def supported_currencies(self) -> frozenset[str]:
        return frozenset(self._minor_units)

    def is_supported(self, currency: str | None) -> bool:
        """
        Check whether a currency is in the reference set.

        Raises:
            InvalidCurrencyCode: If currency is None or blank
        """
        return self._key(currency) in self._minor_units

    def get_minor_unit(self, currency: str | None) -> int:
        """
        Return the number of minor units for a currency (2 for cents).

        Raises:
            InvalidCurrencyCode: If currency is None or blank
            CurrencyNotFound: If the currency is not supported
        """
        key = self._key(currency)
        if key not in self._minor_units:
            raise CurrencyNotFound(f"Unsupported currency: {currency}")
        return self._minor_units[key]

    @staticmethod
    def _key(currency: str | None) -> str:
        if currency is None or not currency.strip():
            raise InvalidCurrencyCode("Currency is required")
        return currency.strip().upper()


def normalize_currency(currency: str | None) -> str:
    return (currency or "").strip().upper()


def is_currency_supported(currency_service: CurrencyService, currency: str | None) -> bool:
    """
    Currency support rule applied by the create-payment flow.

    Blank codes are reported as unsupported instead of raising.
    """
    normalized = normalize_currency(currency)
    if not normalized:
        return False

    supported = currency_service.is_supported(normalized)
    if not supported:
        logger.info("currency_not_supported", currency=normalized)
    return supported
