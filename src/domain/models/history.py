"""Domain models for net worth history and period comparison."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class NetWorthSnapshot:
    """Coarse net worth figures stored for a given day."""

    snapshot_date: date
    total_assets: Decimal
    total_collections: Decimal
    total_liabilities: Decimal
    net_worth: Decimal
    currency_code: str
    breakdown_by_type: dict[str, Decimal] = field(default_factory=dict)
    breakdown_by_currency: dict[str, Decimal] = field(default_factory=dict)
    exchange_rates: dict[str, Decimal] = field(default_factory=dict)


@dataclass(frozen=True)
class ComparisonLine:
    """Change of one balance sheet line between two periods."""

    label: str
    current: Decimal
    previous: Decimal

    @property
    def change(self) -> Decimal:
        """Return current minus previous."""
        return self.current - self.previous

    @property
    def percent_change(self) -> Decimal:
        """Return the change relative to previous, 0 when previous is 0."""
        if self.previous == 0:
            return Decimal("0")
        return self.change / self.previous * Decimal("100")

    @property
    def trend(self) -> str:
        """Return up, down or neutral."""
        if self.change > 0:
            return "up"
        if self.change < 0:
            return "down"
        return "neutral"


__all__ = ["NetWorthSnapshot", "ComparisonLine"]
