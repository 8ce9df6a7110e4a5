"""Domain services package."""

from .amortization import (
    break_even_months,
    calculate_payoff,
    compare_loans,
    compare_payoff,
    evaluate_scenario,
    generate_schedule,
    monthly_payment,
)
from .balance_sheet import compute_balance_sheet, convert_balance_sheet
from .fx import (
    asset_value_in_reference,
    crypto_value_in_reference,
    from_reference,
    has_rate,
    to_reference,
)
from .history import build_net_worth_snapshot, compare_balance_sheets
from .metrics import (
    compute_currency_breakdown,
    compute_debt_to_income,
    compute_property_equity,
    percentage_of,
)
from .normalization import normalize_currency_code, normalize_ticker
from .ownership import parse_ownership, share_for
from .validation import validate_allocation_total, validate_amount_sign

__all__ = [
    "break_even_months",
    "calculate_payoff",
    "compare_loans",
    "compare_payoff",
    "evaluate_scenario",
    "generate_schedule",
    "monthly_payment",
    "compute_balance_sheet",
    "convert_balance_sheet",
    "asset_value_in_reference",
    "crypto_value_in_reference",
    "from_reference",
    "has_rate",
    "to_reference",
    "build_net_worth_snapshot",
    "compare_balance_sheets",
    "compute_currency_breakdown",
    "compute_debt_to_income",
    "compute_property_equity",
    "percentage_of",
    "normalize_currency_code",
    "normalize_ticker",
    "parse_ownership",
    "share_for",
    "validate_allocation_total",
    "validate_amount_sign",
]
