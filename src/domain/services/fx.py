"""Currency normalization into the reference currency."""

from collections.abc import Mapping
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    CRYPTO_QUOTE_CURRENCY,
    DIGITAL_ASSET_TYPES,
    REFERENCE_CURRENCY,
)
from src.domain.models.market import CryptoPrice
from src.domain.models.records import AssetRecord
from src.domain.services.normalization import (
    normalize_currency_code,
    normalize_ticker,
)
from src.utils.decimal_utils import coerce_decimal


def _lookup_rate(
    currency: str | None,
    rates: Mapping[str, Decimal],
    logger: Logger | None = None,
) -> Decimal | None:
    code = normalize_currency_code(currency)
    if code is None:
        return None
    rate = rates.get(code)
    if rate is not None:
        rate = coerce_decimal(rate)
    if rate is None or rate == 0:
        if logger is not None:
            logger.debug(f"No exchange rate for {code}, amount unconverted")
        return None
    return rate


def has_rate(
    currency: str | None,
    rates: Mapping[str, Decimal],
    reference_currency: str = REFERENCE_CURRENCY,
) -> bool:
    """Return True when amounts can be converted to or from ``currency``."""
    if normalize_currency_code(currency) == reference_currency:
        return True
    return _lookup_rate(currency, rates) is not None


def to_reference(
    amount: Decimal,
    currency: str | None,
    rates: Mapping[str, Decimal],
    reference_currency: str = REFERENCE_CURRENCY,
    logger: Logger | None = None,
) -> Decimal:
    """Convert an amount into the reference currency.

    Rates are quoted as reference -> other, so the amount is divided by
    the rate. Unknown currencies pass through unconverted.

    Args:
        amount: Amount in ``currency``.
        currency: ISO-4217 code of the amount.
        rates: Mapping of currency code to rate.
        reference_currency: Currency the rates are quoted from.
        logger: Optional logger told about missing rates.

    Returns:
        Decimal: Amount in the reference currency.
    """
    amount = coerce_decimal(amount)
    if normalize_currency_code(currency) == reference_currency:
        return amount
    rate = _lookup_rate(currency, rates, logger)
    if rate is None:
        return amount
    return amount / rate


def from_reference(
    amount: Decimal,
    currency: str | None,
    rates: Mapping[str, Decimal],
    reference_currency: str = REFERENCE_CURRENCY,
    logger: Logger | None = None,
) -> Decimal:
    """Convert a reference-currency amount into ``currency``.

    Args:
        amount: Amount in the reference currency.
        currency: Target ISO-4217 code.
        rates: Mapping of currency code to rate.
        reference_currency: Currency the rates are quoted from.
        logger: Optional logger told about missing rates.

    Returns:
        Decimal: Amount in the target currency, unchanged when unknown.
    """
    amount = coerce_decimal(amount)
    if normalize_currency_code(currency) == reference_currency:
        return amount
    rate = _lookup_rate(currency, rates, logger)
    if rate is None:
        return amount
    return amount * rate


def crypto_value_in_reference(
    quantity: Decimal,
    ticker: str | None,
    crypto_prices: Mapping[str, CryptoPrice],
    rates: Mapping[str, Decimal],
    reference_currency: str = REFERENCE_CURRENCY,
    logger: Logger | None = None,
) -> Decimal | None:
    """Value a crypto holding from its USD unit price.

    Returns:
        Decimal | None: Reference value, or None when no price is known.
    """
    symbol = normalize_ticker(ticker)
    if symbol is None:
        return None
    quote = crypto_prices.get(symbol)
    if quote is None:
        if logger is not None:
            logger.debug(f"No crypto price for {symbol}")
        return None
    usd_amount = coerce_decimal(quantity) * coerce_decimal(quote.price)
    return to_reference(
        usd_amount,
        CRYPTO_QUOTE_CURRENCY,
        rates,
        reference_currency,
        logger,
    )


def asset_value_in_reference(
    asset: AssetRecord,
    rates: Mapping[str, Decimal],
    crypto_prices: Mapping[str, CryptoPrice],
    reference_currency: str = REFERENCE_CURRENCY,
    logger: Logger | None = None,
) -> Decimal:
    """Value an asset in the reference currency.

    Crypto holdings with a known price are valued from the live price;
    everything else, including crypto without a price, uses the stored
    ``current_value``.
    """
    if asset.asset_type in DIGITAL_ASSET_TYPES:
        quantity = (
            asset.quantity
            if asset.quantity is not None
            else asset.current_value
        )
        live_value = crypto_value_in_reference(
            quantity,
            asset.ticker,
            crypto_prices,
            rates,
            reference_currency,
            logger,
        )
        if live_value is not None:
            return live_value
    return to_reference(
        asset.current_value,
        asset.currency,
        rates,
        reference_currency,
        logger,
    )


__all__ = [
    "has_rate",
    "to_reference",
    "from_reference",
    "crypto_value_in_reference",
    "asset_value_in_reference",
]
