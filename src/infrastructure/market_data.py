"""Market data adapters: stored rates and prices plus an in-process cache."""

from dataclasses import replace
import time
from typing import Callable

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.market_data import MarketDataPort
from src.domain.constants import (
    FALLBACK_CRYPTO_PRICES,
    FALLBACK_EXCHANGE_RATES,
    REFERENCE_CURRENCY,
)
from src.domain.models import CryptoPrice, ExchangeRateTable
from src.domain.services.normalization import (
    normalize_currency_code,
    normalize_ticker,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class SqlAlchemyMarketDataRepository(MarketDataPort):
    """Read the latest stored exchange rates and crypto prices.

    The ``exchange_rates`` and ``crypto_prices`` tables are filled by an
    external job; only the most recent row per currency or ticker is used.
    """

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        base_currency: str = REFERENCE_CURRENCY,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the wealth engine.
            base_currency: Currency the stored rates are quoted from.
        """
        self._db_port = db_port
        self._base_currency = base_currency

    def fetch_exchange_rates(self) -> ExchangeRateTable:
        """Return the latest rate per currency.

        Raises:
            RuntimeError: If no rate is stored for the base currency.
        """
        query = text(
            """
            SELECT currency, rate, fetched_at
            FROM exchange_rates
            WHERE base_currency = :base_currency
            ORDER BY currency, fetched_at DESC
            """
        )
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                query, {"base_currency": self._base_currency}
            ).all()
        if not rows:
            raise RuntimeError(
                f"No exchange rates stored for base {self._base_currency}"
            )
        rates = {self._base_currency: coerce_decimal(1)}
        last_updated = None
        seen: set[str] = set()
        for row in rows:
            code = normalize_currency_code(row.currency)
            if code is None or code in seen:
                continue
            seen.add(code)
            rates[code] = coerce_decimal(row.rate)
            if row.fetched_at is not None and (
                last_updated is None or row.fetched_at > last_updated
            ):
                last_updated = row.fetched_at
        return ExchangeRateTable(
            rates=rates,
            base_currency=self._base_currency,
            last_updated=str(last_updated) if last_updated else None,
            status="live",
        )

    def fetch_crypto_prices(self) -> dict[str, CryptoPrice]:
        """Return the latest USD price per ticker."""
        query = text(
            """
            SELECT ticker, price_usd, change_24h, fetched_at
            FROM crypto_prices
            ORDER BY ticker, fetched_at DESC
            """
        )
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        prices: dict[str, CryptoPrice] = {}
        for row in rows:
            ticker = normalize_ticker(row.ticker)
            if ticker is None or ticker in prices:
                continue
            prices[ticker] = CryptoPrice(
                price=coerce_decimal(row.price_usd),
                change_24h=coerce_decimal(row.change_24h),
            )
        return prices


class CachedMarketDataProvider(MarketDataPort):
    """Cache market data in process with per-kind time-to-live.

    When the wrapped source fails, the last good exchange rate table is
    served with status ``stale``; without any previous success the static
    fallback tables are served with status ``fallback``.
    """

    def __init__(
        self,
        source: MarketDataPort,
        rates_ttl_seconds: int = 3600,
        crypto_ttl_seconds: int = 300,
        logger=None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._source = source
        self._rates_ttl = rates_ttl_seconds
        self._crypto_ttl = crypto_ttl_seconds
        self._logger = logger or get_app_logger()
        self._clock = clock
        self._rates: ExchangeRateTable | None = None
        self._rates_fetched_at: float | None = None
        self._prices: dict[str, CryptoPrice] | None = None
        self._prices_fetched_at: float | None = None

    def fetch_exchange_rates(self) -> ExchangeRateTable:
        if self._is_fresh(self._rates_fetched_at, self._rates_ttl):
            return self._rates
        try:
            table = self._source.fetch_exchange_rates()
        except (RuntimeError, SQLAlchemyError) as exc:
            self._logger.warning(f"Exchange rate refresh failed: {exc}")
            if self._rates is not None:
                return replace(self._rates, status="stale")
            return ExchangeRateTable(
                rates=dict(FALLBACK_EXCHANGE_RATES),
                base_currency=REFERENCE_CURRENCY,
                last_updated=None,
                status="fallback",
            )
        self._rates = table
        self._rates_fetched_at = self._clock()
        return table

    def fetch_crypto_prices(self) -> dict[str, CryptoPrice]:
        if self._is_fresh(self._prices_fetched_at, self._crypto_ttl):
            return dict(self._prices)
        try:
            prices = self._source.fetch_crypto_prices()
        except (RuntimeError, SQLAlchemyError) as exc:
            self._logger.warning(f"Crypto price refresh failed: {exc}")
            if self._prices is not None:
                return dict(self._prices)
            return {
                ticker: CryptoPrice(price=price)
                for ticker, price in FALLBACK_CRYPTO_PRICES.items()
            }
        self._prices = dict(prices)
        self._prices_fetched_at = self._clock()
        return dict(prices)

    def _is_fresh(self, fetched_at: float | None, ttl: int) -> bool:
        if fetched_at is None:
            return False
        return self._clock() - fetched_at < ttl


__all__ = ["SqlAlchemyMarketDataRepository", "CachedMarketDataProvider"]
