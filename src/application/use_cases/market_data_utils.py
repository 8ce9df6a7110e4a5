"""Shared helpers for loading market data in application use cases."""

from src.application.ports.market_data import MarketDataPort
from src.domain.models import CryptoPrice, ExchangeRateTable


def load_market_data(
    market_data: MarketDataPort,
    logger,
) -> tuple[ExchangeRateTable, dict[str, CryptoPrice]]:
    """Fetch exchange rates and crypto prices, logging degraded tables.

    Args:
        market_data: Port providing rates and prices.
        logger: Logger used for warnings.

    Returns:
        tuple[ExchangeRateTable, dict[str, CryptoPrice]]: Rates table and
        USD prices keyed by ticker.
    """
    rates = market_data.fetch_exchange_rates()
    if rates.status != "live":
        logger.warning(
            f"Using {rates.status} exchange rates "
            f"(last updated: {rates.last_updated or 'unknown'})"
        )
    prices = market_data.fetch_crypto_prices()
    return rates, prices


__all__ = ["load_market_data"]
