"""Domain models for the balance sheet statement."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from .records import (
    AssetRecord,
    CollectionRecord,
    LiabilityRecord,
    ReceivableRecord,
)

ZERO = Decimal("0")


@dataclass(frozen=True)
class CurrentAssets:
    """Assets expected to be available within a year."""

    cash_and_bank: Decimal = ZERO
    digital_assets: Decimal = ZERO
    short_term_receivables: Decimal = ZERO

    @property
    def total(self) -> Decimal:
        """Return the current assets subtotal."""
        return (
            self.cash_and_bank
            + self.digital_assets
            + self.short_term_receivables
        )


@dataclass(frozen=True)
class NonCurrentAssets:
    """Long-lived assets and receivables due after a year."""

    real_estate: Decimal = ZERO
    vehicles: Decimal = ZERO
    collections: Decimal = ZERO
    investments: Decimal = ZERO
    long_term_receivables: Decimal = ZERO

    @property
    def total(self) -> Decimal:
        """Return the non-current assets subtotal."""
        return (
            self.real_estate
            + self.vehicles
            + self.collections
            + self.investments
            + self.long_term_receivables
        )


@dataclass(frozen=True)
class CurrentLiabilities:
    """Debts due within a year."""

    credit_cards: Decimal = ZERO
    short_term_loans: Decimal = ZERO

    @property
    def total(self) -> Decimal:
        """Return the current liabilities subtotal."""
        return self.credit_cards + self.short_term_loans


@dataclass(frozen=True)
class NonCurrentLiabilities:
    """Debts due after a year."""

    mortgages: Decimal = ZERO
    long_term_loans: Decimal = ZERO

    @property
    def total(self) -> Decimal:
        """Return the non-current liabilities subtotal."""
        return self.mortgages + self.long_term_loans


@dataclass(frozen=True)
class CertaintySummary:
    """Values accumulated per certainty level."""

    certain: Decimal = ZERO
    contractual: Decimal = ZERO
    probable: Decimal = ZERO
    optional: Decimal = ZERO

    @property
    def total(self) -> Decimal:
        """Return the sum across all levels."""
        return self.certain + self.contractual + self.probable + self.optional

    def as_dict(self) -> dict[str, Decimal]:
        """Return the levels as an ordered mapping."""
        return {
            "certain": self.certain,
            "contractual": self.contractual,
            "probable": self.probable,
            "optional": self.optional,
        }


@dataclass(frozen=True)
class BalanceSheetCertainty:
    """Certainty breakdown for both sides of the balance sheet."""

    assets: CertaintySummary = field(default_factory=CertaintySummary)
    liabilities: CertaintySummary = field(default_factory=CertaintySummary)


@dataclass(frozen=True)
class BalanceSheetDrillDown:
    """Records contributing to each bucket, kept by reference."""

    cash_and_bank: tuple[AssetRecord, ...] = ()
    digital_assets: tuple[AssetRecord, ...] = ()
    short_term_receivables: tuple[ReceivableRecord, ...] = ()
    real_estate: tuple[AssetRecord, ...] = ()
    vehicles: tuple[CollectionRecord, ...] = ()
    collections: tuple[CollectionRecord, ...] = ()
    investments: tuple[AssetRecord, ...] = ()
    long_term_receivables: tuple[ReceivableRecord, ...] = ()
    credit_cards: tuple[LiabilityRecord, ...] = ()
    short_term_loans: tuple[LiabilityRecord, ...] = ()
    mortgages: tuple[LiabilityRecord, ...] = ()
    long_term_loans: tuple[LiabilityRecord, ...] = ()


@dataclass(frozen=True)
class BalanceSheetSnapshot:
    """Aggregated balance sheet in the reference currency.

    Attributes:
        currency_code: Currency all amounts are expressed in.
        as_of: Date used for the one-year maturity threshold.
        current_assets: Current asset buckets.
        non_current_assets: Non-current asset buckets.
        current_liabilities: Current liability buckets.
        non_current_liabilities: Non-current liability buckets.
        drill_down: Records behind each bucket.
        certainty_summary: Certainty breakdown ignoring the certainty filter.
    """

    currency_code: str
    as_of: date
    current_assets: CurrentAssets = field(default_factory=CurrentAssets)
    non_current_assets: NonCurrentAssets = field(
        default_factory=NonCurrentAssets
    )
    current_liabilities: CurrentLiabilities = field(
        default_factory=CurrentLiabilities
    )
    non_current_liabilities: NonCurrentLiabilities = field(
        default_factory=NonCurrentLiabilities
    )
    drill_down: BalanceSheetDrillDown = field(
        default_factory=BalanceSheetDrillDown
    )
    certainty_summary: BalanceSheetCertainty = field(
        default_factory=BalanceSheetCertainty
    )

    @property
    def total_assets(self) -> Decimal:
        """Return current plus non-current assets."""
        return self.current_assets.total + self.non_current_assets.total

    @property
    def total_liabilities(self) -> Decimal:
        """Return current plus non-current liabilities."""
        return (
            self.current_liabilities.total
            + self.non_current_liabilities.total
        )

    @property
    def net_worth(self) -> Decimal:
        """Return total assets minus total liabilities."""
        return self.total_assets - self.total_liabilities


__all__ = [
    "CurrentAssets",
    "NonCurrentAssets",
    "CurrentLiabilities",
    "NonCurrentLiabilities",
    "CertaintySummary",
    "BalanceSheetCertainty",
    "BalanceSheetDrillDown",
    "BalanceSheetSnapshot",
]
