"""Net worth snapshots and period-over-period comparison."""

from collections.abc import Mapping, Sequence
from datetime import date
from decimal import Decimal

from src.domain.models.balance_sheet import BalanceSheetSnapshot
from src.domain.models.history import ComparisonLine, NetWorthSnapshot
from src.domain.models.market import CryptoPrice
from src.domain.models.records import AssetRecord, CollectionRecord
from src.domain.services.metrics import compute_currency_breakdown
from src.utils.decimal_utils import coerce_decimal

_ZERO = Decimal("0")

# Comparison line label -> coarse breakdown keys that approximate it.
COMPARISON_LINES = (
    ("Cash and bank", ("bank",)),
    ("Digital assets", ("crypto",)),
    ("Receivables", ("receivables",)),
    ("Real estate", ("real-estate",)),
    ("Investments", ("investment",)),
    ("Collections and vehicles", ("collections",)),
    ("Credit cards", ("credit_card",)),
    ("Loans", ("loan",)),
    ("Mortgages", ("mortgage",)),
)


def breakdown_by_type(sheet: BalanceSheetSnapshot) -> dict[str, Decimal]:
    """Collapse a balance sheet into the coarse per-type mapping stored
    with history snapshots."""
    current = sheet.current_assets
    non_current = sheet.non_current_assets
    return {
        "bank": current.cash_and_bank,
        "crypto": current.digital_assets,
        "real-estate": non_current.real_estate,
        "investment": non_current.investments,
        "collections": non_current.vehicles + non_current.collections,
        "receivables": (
            current.short_term_receivables
            + non_current.long_term_receivables
        ),
        "credit_card": sheet.current_liabilities.credit_cards,
        "mortgage": sheet.non_current_liabilities.mortgages,
        "loan": (
            sheet.current_liabilities.short_term_loans
            + sheet.non_current_liabilities.long_term_loans
        ),
    }


def build_net_worth_snapshot(
    sheet: BalanceSheetSnapshot,
    assets: Sequence[AssetRecord],
    collections: Sequence[CollectionRecord],
    rates: Mapping[str, Decimal],
    crypto_prices: Mapping[str, CryptoPrice] | None = None,
    snapshot_date: date | None = None,
) -> NetWorthSnapshot:
    """Build the history row persisted for a day.

    Args:
        sheet: Consolidated balance sheet for the day.
        assets: Asset records used for the currency breakdown.
        collections: Collection records used for the currency breakdown.
        rates: Exchange rates in effect, stored alongside the snapshot.
        crypto_prices: USD prices per crypto ticker.
        snapshot_date: Day of the snapshot, the sheet date by default.

    Returns:
        NetWorthSnapshot: Totals plus coarse breakdowns. ``total_assets``
        already includes ``total_collections``.
    """
    currency_shares = compute_currency_breakdown(
        assets,
        collections,
        rates,
        crypto_prices,
        reference_currency=sheet.currency_code,
    )
    return NetWorthSnapshot(
        snapshot_date=snapshot_date or sheet.as_of,
        total_assets=sheet.total_assets,
        total_collections=(
            sheet.non_current_assets.vehicles
            + sheet.non_current_assets.collections
        ),
        total_liabilities=sheet.total_liabilities,
        net_worth=sheet.net_worth,
        currency_code=sheet.currency_code,
        breakdown_by_type=breakdown_by_type(sheet),
        breakdown_by_currency={
            share.currency: share.amount for share in currency_shares
        },
        exchange_rates={
            code: coerce_decimal(rate) for code, rate in rates.items()
        },
    )


def approximate_lines(breakdown: Mapping[str, Decimal]) -> dict[str, Decimal]:
    """Map a stored per-type breakdown onto comparison line labels.

    Unknown keys are ignored and missing keys count as zero.
    """
    return {
        label: sum(
            (coerce_decimal(breakdown.get(key)) for key in keys),
            _ZERO,
        )
        for label, keys in COMPARISON_LINES
    }


def compare_balance_sheets(
    current: BalanceSheetSnapshot,
    previous: NetWorthSnapshot | None,
) -> list[ComparisonLine]:
    """Compare the current sheet with an earlier history snapshot.

    Historical categories are approximated from the snapshot's coarse
    breakdown; totals come from the stored totals.

    Args:
        current: Current balance sheet.
        previous: Earlier snapshot, None to compare against zero.

    Returns:
        list[ComparisonLine]: Category lines followed by the totals.
    """
    current_values = approximate_lines(breakdown_by_type(current))
    previous_values = approximate_lines(
        previous.breakdown_by_type if previous else {}
    )
    lines = [
        ComparisonLine(
            label=label,
            current=current_values[label],
            previous=previous_values[label],
        )
        for label, _ in COMPARISON_LINES
    ]
    lines.extend(
        [
            ComparisonLine(
                label="Total assets",
                current=current.total_assets,
                previous=previous.total_assets if previous else _ZERO,
            ),
            ComparisonLine(
                label="Total liabilities",
                current=current.total_liabilities,
                previous=previous.total_liabilities if previous else _ZERO,
            ),
            ComparisonLine(
                label="Net worth",
                current=current.net_worth,
                previous=previous.net_worth if previous else _ZERO,
            ),
        ]
    )
    return lines


__all__ = [
    "COMPARISON_LINES",
    "breakdown_by_type",
    "build_net_worth_snapshot",
    "approximate_lines",
    "compare_balance_sheets",
]
