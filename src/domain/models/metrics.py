"""Domain models for dashboard widgets."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PropertyEquity:
    """Equity held in a mortgaged property."""

    asset_id: str
    asset_name: str
    asset_value: Decimal
    liability_name: str
    liability_balance: Decimal
    equity: Decimal
    equity_percentage: Decimal


@dataclass(frozen=True)
class DebtToIncome:
    """Monthly debt service relative to monthly income."""

    monthly_income: Decimal
    monthly_debt_payments: Decimal
    ratio: Decimal
    status: str


@dataclass(frozen=True)
class CurrencyShare:
    """Value held in one original currency."""

    currency: str
    amount: Decimal
    percentage: Decimal


__all__ = ["PropertyEquity", "DebtToIncome", "CurrencyShare"]
