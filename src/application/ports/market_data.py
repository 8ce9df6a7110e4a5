"""Port for exchange rates and crypto prices."""

from typing import Protocol

from src.domain.models import CryptoPrice, ExchangeRateTable


class MarketDataPort(Protocol):
    """Port exposing market data used for currency normalization."""

    def fetch_exchange_rates(self) -> ExchangeRateTable:
        """Return rates quoted as units of currency per reference unit."""

    def fetch_crypto_prices(self) -> dict[str, CryptoPrice]:
        """Return USD prices keyed by upper-case ticker."""


__all__ = ["MarketDataPort"]
