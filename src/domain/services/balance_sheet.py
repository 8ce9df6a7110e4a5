"""Domain service aggregating records into a balance sheet."""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import fields, replace
from datetime import date
from decimal import Decimal
from logging import Logger
from typing import TypeVar

from src.domain.constants import (
    CASH_ASSET_TYPES,
    CERTAINTY_LEVELS,
    CREDIT_CARD_LIABILITY_TYPES,
    DIGITAL_ASSET_TYPES,
    INVESTMENT_ASSET_TYPES,
    MORTGAGE_LIABILITY_TYPES,
    REAL_ESTATE_ASSET_TYPES,
    REFERENCE_CURRENCY,
    VEHICLE_COLLECTION_TYPES,
)
from src.domain.models.balance_sheet import (
    BalanceSheetCertainty,
    BalanceSheetDrillDown,
    BalanceSheetSnapshot,
    CertaintySummary,
    CurrentAssets,
    CurrentLiabilities,
    NonCurrentAssets,
    NonCurrentLiabilities,
)
from src.domain.models.market import CryptoPrice
from src.domain.models.records import (
    AssetRecord,
    CollectionRecord,
    LiabilityRecord,
    ReceivableRecord,
)
from src.domain.policies.certainty import (
    passes_certainty_filter,
    resolve_certainty,
)
from src.domain.services.fx import (
    asset_value_in_reference,
    from_reference,
    has_rate,
    to_reference,
)
from src.domain.services.normalization import normalize_currency_code
from src.domain.services.ownership import share_for

T = TypeVar("T")


def one_year_after(as_of: date) -> date:
    """Return the same calendar day one year later (Feb 29 -> Feb 28)."""
    try:
        return as_of.replace(year=as_of.year + 1)
    except ValueError:
        return as_of.replace(year=as_of.year + 1, day=28)


def compute_balance_sheet(
    assets: Sequence[AssetRecord],
    collections: Sequence[CollectionRecord],
    liabilities: Sequence[LiabilityRecord],
    receivables: Sequence[ReceivableRecord],
    *,
    rates: Mapping[str, Decimal],
    crypto_prices: Mapping[str, CryptoPrice] | None = None,
    entity_filter: str | None = None,
    certainty_filter: str = "all",
    viewer_party_id: str | None = None,
    as_of: date | None = None,
    reference_currency: str = REFERENCE_CURRENCY,
    logger: Logger | None = None,
) -> BalanceSheetSnapshot:
    """Aggregate records into a balance sheet in the reference currency.

    Args:
        assets: Asset records.
        collections: Collection records.
        liabilities: Liability records.
        receivables: Receivable records.
        rates: Exchange rates quoted from the reference currency.
        crypto_prices: USD prices per crypto ticker.
        entity_filter: Keep only records owned by this entity when set.
        certainty_filter: all, confirmed or exclude_optional.
        viewer_party_id: Party whose ownership share is applied to assets
            and collections. None means the consolidated view.
        as_of: Reference date for the one-year maturity threshold.
        reference_currency: Currency of the output amounts.
        logger: Optional logger for debug traces.

    Returns:
        BalanceSheetSnapshot: Bucket totals, drill-down and certainty summary.
    """
    as_of = as_of or date.today()
    threshold = one_year_after(as_of)
    prices = crypto_prices or {}

    def asset_value(asset: AssetRecord) -> Decimal:
        value = asset_value_in_reference(
            asset, rates, prices, reference_currency, logger
        )
        return value * _viewer_share(
            asset.ownership, viewer_party_id, logger
        )

    def collection_value(collection: CollectionRecord) -> Decimal:
        value = to_reference(
            collection.current_value,
            collection.currency,
            rates,
            reference_currency,
            logger,
        )
        return value * _viewer_share(
            collection.ownership, viewer_party_id, logger
        )

    def balance_value(record: LiabilityRecord | ReceivableRecord) -> Decimal:
        return to_reference(
            record.current_balance,
            record.currency,
            rates,
            reference_currency,
            logger,
        )

    entity_assets = _filter_by_entity(assets, entity_filter)
    entity_collections = _filter_by_entity(collections, entity_filter)
    entity_liabilities = _filter_by_entity(liabilities, entity_filter)
    entity_receivables = _filter_by_entity(receivables, entity_filter)

    kept_assets = _filter_by_certainty(
        entity_assets, "asset", certainty_filter
    )
    kept_collections = _filter_by_certainty(
        entity_collections, "collection", certainty_filter
    )
    kept_liabilities = _filter_by_certainty(
        entity_liabilities, "liability", certainty_filter
    )
    kept_receivables = _filter_by_certainty(
        entity_receivables, "receivable", certainty_filter
    )

    cash = _of_types(kept_assets, CASH_ASSET_TYPES)
    digital = _of_types(kept_assets, DIGITAL_ASSET_TYPES)
    real_estate = _of_types(kept_assets, REAL_ESTATE_ASSET_TYPES)
    investments = _of_types(kept_assets, INVESTMENT_ASSET_TYPES)

    vehicles = tuple(
        c for c in kept_collections
        if c.collection_type in VEHICLE_COLLECTION_TYPES
    )
    other_collections = tuple(
        c for c in kept_collections
        if c.collection_type not in VEHICLE_COLLECTION_TYPES
    )

    short_receivables = tuple(
        r for r in kept_receivables
        if _matures_within(r.due_date, threshold)
    )
    long_receivables = tuple(
        r for r in kept_receivables
        if not _matures_within(r.due_date, threshold)
    )

    credit_cards = tuple(
        item for item in kept_liabilities
        if item.liability_type in CREDIT_CARD_LIABILITY_TYPES
    )
    mortgages = tuple(
        item for item in kept_liabilities
        if item.liability_type in MORTGAGE_LIABILITY_TYPES
    )
    other_loans = [
        item for item in kept_liabilities
        if item.liability_type not in CREDIT_CARD_LIABILITY_TYPES
        and item.liability_type not in MORTGAGE_LIABILITY_TYPES
    ]
    short_loans = tuple(
        item for item in other_loans
        if _matures_within(item.end_date, threshold)
    )
    long_loans = tuple(
        item for item in other_loans
        if not _matures_within(item.end_date, threshold)
    )

    current_assets = CurrentAssets(
        cash_and_bank=_sum(asset_value(a) for a in cash),
        digital_assets=_sum(asset_value(a) for a in digital),
        short_term_receivables=_sum(
            balance_value(r) for r in short_receivables
        ),
    )
    non_current_assets = NonCurrentAssets(
        real_estate=_sum(asset_value(a) for a in real_estate),
        vehicles=_sum(collection_value(c) for c in vehicles),
        collections=_sum(collection_value(c) for c in other_collections),
        investments=_sum(asset_value(a) for a in investments),
        long_term_receivables=_sum(
            balance_value(r) for r in long_receivables
        ),
    )
    current_liabilities = CurrentLiabilities(
        credit_cards=_sum(balance_value(item) for item in credit_cards),
        short_term_loans=_sum(balance_value(item) for item in short_loans),
    )
    non_current_liabilities = NonCurrentLiabilities(
        mortgages=_sum(balance_value(item) for item in mortgages),
        long_term_loans=_sum(balance_value(item) for item in long_loans),
    )

    asset_levels = _empty_levels()
    for asset in entity_assets:
        _accumulate(
            asset_levels,
            resolve_certainty("asset", asset.certainty),
            asset_value(asset),
        )
    for collection in entity_collections:
        _accumulate(
            asset_levels,
            resolve_certainty("collection", collection.certainty),
            collection_value(collection),
        )
    for receivable in entity_receivables:
        _accumulate(
            asset_levels,
            resolve_certainty("receivable", receivable.certainty),
            balance_value(receivable),
        )
    liability_levels = _empty_levels()
    for liability in entity_liabilities:
        _accumulate(
            liability_levels,
            resolve_certainty("liability", liability.certainty),
            balance_value(liability),
        )

    drill_down = BalanceSheetDrillDown(
        cash_and_bank=cash,
        digital_assets=digital,
        short_term_receivables=short_receivables,
        real_estate=real_estate,
        vehicles=vehicles,
        collections=other_collections,
        investments=investments,
        long_term_receivables=long_receivables,
        credit_cards=credit_cards,
        short_term_loans=short_loans,
        mortgages=mortgages,
        long_term_loans=long_loans,
    )
    snapshot = BalanceSheetSnapshot(
        currency_code=reference_currency,
        as_of=as_of,
        current_assets=current_assets,
        non_current_assets=non_current_assets,
        current_liabilities=current_liabilities,
        non_current_liabilities=non_current_liabilities,
        drill_down=drill_down,
        certainty_summary=BalanceSheetCertainty(
            assets=CertaintySummary(**asset_levels),
            liabilities=CertaintySummary(**liability_levels),
        ),
    )
    if logger is not None:
        logger.debug(
            f"Balance sheet aggregated: assets={snapshot.total_assets}, "
            f"liabilities={snapshot.total_liabilities}, "
            f"entity={entity_filter}, certainty={certainty_filter}"
        )
    return snapshot


def convert_balance_sheet(
    sheet: BalanceSheetSnapshot,
    currency: str | None,
    rates: Mapping[str, Decimal],
    logger: Logger | None = None,
) -> BalanceSheetSnapshot:
    """Express the totals of a reference-currency sheet in ``currency``.

    Bucket and certainty totals are multiplied by the display rate, so
    shares of totals are unchanged. Drill-down records keep their own
    currencies. The sheet is returned as is when ``currency`` is empty,
    already the sheet's currency, or has no usable rate.

    Args:
        sheet: Balance sheet in its reference currency.
        currency: Display currency code.
        rates: Exchange rates quoted from the sheet's currency.
        logger: Optional logger warned when no rate is available.

    Returns:
        BalanceSheetSnapshot: Sheet labelled with the display currency.
    """
    target = normalize_currency_code(currency)
    if target is None or target == sheet.currency_code:
        return sheet
    if not has_rate(target, rates, sheet.currency_code):
        if logger is not None:
            logger.warning(
                f"No exchange rate for display currency {target}, "
                f"showing {sheet.currency_code}"
            )
        return sheet

    def convert(group: T) -> T:
        return replace(
            group,
            **{
                item.name: from_reference(
                    getattr(group, item.name),
                    target,
                    rates,
                    sheet.currency_code,
                )
                for item in fields(group)
            },
        )

    return replace(
        sheet,
        currency_code=target,
        current_assets=convert(sheet.current_assets),
        non_current_assets=convert(sheet.non_current_assets),
        current_liabilities=convert(sheet.current_liabilities),
        non_current_liabilities=convert(sheet.non_current_liabilities),
        certainty_summary=BalanceSheetCertainty(
            assets=convert(sheet.certainty_summary.assets),
            liabilities=convert(sheet.certainty_summary.liabilities),
        ),
    )


def _viewer_share(
    ownership,
    viewer_party_id: str | None,
    logger: Logger | None,
) -> Decimal:
    if viewer_party_id is None:
        return Decimal("1")
    return share_for(ownership, viewer_party_id, logger)


def _filter_by_entity(
    items: Sequence[T],
    entity_filter: str | None,
) -> list[T]:
    if not entity_filter:
        return list(items)
    return [item for item in items if item.entity_id == entity_filter]


def _filter_by_certainty(
    items: Sequence[T],
    record_kind: str,
    mode: str,
) -> list[T]:
    return [
        item for item in items
        if passes_certainty_filter(
            resolve_certainty(record_kind, item.certainty),
            mode,
        )
    ]


def _of_types(
    assets: Sequence[AssetRecord],
    asset_types: tuple[str, ...],
) -> tuple[AssetRecord, ...]:
    return tuple(a for a in assets if a.asset_type in asset_types)


def _matures_within(maturity: date | None, threshold: date) -> bool:
    # Records without a maturity date are treated as current.
    if maturity is None:
        return True
    return maturity <= threshold


def _sum(values: Iterable[Decimal]) -> Decimal:
    return sum(values, Decimal("0"))


def _empty_levels() -> dict[str, Decimal]:
    return {level: Decimal("0") for level in CERTAINTY_LEVELS}


def _accumulate(
    levels: dict[str, Decimal],
    certainty: str,
    amount: Decimal,
) -> None:
    if certainty in levels:
        levels[certainty] += amount


__all__ = [
    "compute_balance_sheet",
    "convert_balance_sheet",
    "one_year_after",
]
