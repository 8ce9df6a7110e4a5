"""Domain models for exchange rates and crypto prices."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class CryptoPrice:
    """Latest USD price for a crypto ticker."""

    price: Decimal
    change_24h: Decimal = Decimal("0")


@dataclass(frozen=True)
class ExchangeRateTable:
    """Rates quoted as one unit of the base currency in another currency.

    Attributes:
        rates: Mapping of currency code to rate relative to the base.
        base_currency: Reference currency the rates are quoted from.
        last_updated: Provider timestamp, when known.
        status: live, stale or fallback.
    """

    rates: dict[str, Decimal] = field(default_factory=dict)
    base_currency: str = "EUR"
    last_updated: str | None = None
    status: str = "live"


__all__ = ["CryptoPrice", "ExchangeRateTable"]
