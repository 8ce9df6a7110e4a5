"""Dashboard metrics derived from records and exchange rates."""

from collections.abc import Mapping, Sequence
from decimal import Decimal

from src.domain.constants import (
    DTI_THRESHOLDS,
    REAL_ESTATE_ASSET_TYPES,
    REFERENCE_CURRENCY,
)
from src.domain.models.market import CryptoPrice
from src.domain.models.metrics import (
    CurrencyShare,
    DebtToIncome,
    PropertyEquity,
)
from src.domain.models.records import (
    AssetRecord,
    CollectionRecord,
    LiabilityRecord,
)
from src.domain.services.fx import asset_value_in_reference, to_reference
from src.domain.services.normalization import normalize_currency_code
from src.utils.decimal_utils import coerce_decimal

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def percentage_of(part: Decimal, whole: Decimal) -> Decimal:
    """Return ``part`` as a percentage of ``whole``, 0 when whole is 0."""
    whole = coerce_decimal(whole)
    if whole == 0:
        return _ZERO
    return coerce_decimal(part) / whole * _HUNDRED


def compute_property_equity(
    assets: Sequence[AssetRecord],
    liabilities: Sequence[LiabilityRecord],
    rates: Mapping[str, Decimal],
    reference_currency: str = REFERENCE_CURRENCY,
) -> list[PropertyEquity]:
    """Return equity for each real-estate asset with a linked liability.

    Args:
        assets: Asset records.
        liabilities: Liability records, linked through ``linked_asset_id``.
        rates: Exchange rates quoted from the reference currency.
        reference_currency: Currency of the output amounts.

    Returns:
        list[PropertyEquity]: One entry per linked property.
    """
    properties = {
        asset.id: asset
        for asset in assets
        if asset.asset_type in REAL_ESTATE_ASSET_TYPES
    }
    equities: list[PropertyEquity] = []
    for liability in liabilities:
        asset = properties.get(liability.linked_asset_id or "")
        if asset is None:
            continue
        asset_value = asset_value_in_reference(
            asset, rates, {}, reference_currency
        )
        balance = to_reference(
            liability.current_balance,
            liability.currency,
            rates,
            reference_currency,
        )
        equity = asset_value - balance
        equities.append(
            PropertyEquity(
                asset_id=asset.id,
                asset_name=asset.name,
                asset_value=asset_value,
                liability_name=liability.name,
                liability_balance=balance,
                equity=equity,
                equity_percentage=percentage_of(equity, asset_value),
            )
        )
    return equities


def debt_to_income_status(ratio: Decimal) -> str:
    """Classify a debt-to-income ratio expressed in percent."""
    if ratio == 0:
        return "no_data"
    for limit, label in DTI_THRESHOLDS:
        if ratio <= limit:
            return label
    return "high"


def compute_debt_to_income(
    monthly_income: Decimal,
    income_currency: str,
    assets: Sequence[AssetRecord],
    liabilities: Sequence[LiabilityRecord],
    rates: Mapping[str, Decimal],
    reference_currency: str = REFERENCE_CURRENCY,
) -> DebtToIncome:
    """Compute the monthly debt-to-income ratio.

    Income is the declared monthly income plus rental income of real
    estate; debt service is the sum of liabilities' monthly payments.
    """
    income = to_reference(
        monthly_income, income_currency, rates, reference_currency
    )
    for asset in assets:
        if asset.asset_type in REAL_ESTATE_ASSET_TYPES and asset.rental_income:
            income += to_reference(
                asset.rental_income,
                asset.currency,
                rates,
                reference_currency,
            )
    debt = sum(
        (
            to_reference(
                liability.monthly_payment,
                liability.currency,
                rates,
                reference_currency,
            )
            for liability in liabilities
            if liability.monthly_payment
        ),
        _ZERO,
    )
    ratio = percentage_of(debt, income)
    return DebtToIncome(
        monthly_income=income,
        monthly_debt_payments=debt,
        ratio=ratio,
        status=debt_to_income_status(ratio),
    )


def compute_currency_breakdown(
    assets: Sequence[AssetRecord],
    collections: Sequence[CollectionRecord],
    rates: Mapping[str, Decimal],
    crypto_prices: Mapping[str, CryptoPrice] | None = None,
    reference_currency: str = REFERENCE_CURRENCY,
) -> list[CurrencyShare]:
    """Return gross asset value per original currency, largest first."""
    prices = crypto_prices or {}
    totals: dict[str, Decimal] = {}
    for asset in assets:
        code = normalize_currency_code(asset.currency) or reference_currency
        totals[code] = totals.get(code, _ZERO) + asset_value_in_reference(
            asset, rates, prices, reference_currency
        )
    for collection in collections:
        code = (
            normalize_currency_code(collection.currency) or reference_currency
        )
        totals[code] = totals.get(code, _ZERO) + to_reference(
            collection.current_value,
            collection.currency,
            rates,
            reference_currency,
        )
    grand_total = sum(totals.values(), _ZERO)
    shares = [
        CurrencyShare(
            currency=currency,
            amount=amount,
            percentage=percentage_of(amount, grand_total),
        )
        for currency, amount in totals.items()
    ]
    return sorted(shares, key=lambda share: share.amount, reverse=True)


__all__ = [
    "percentage_of",
    "compute_property_equity",
    "debt_to_income_status",
    "compute_debt_to_income",
    "compute_currency_breakdown",
]
