"""Domain models for loan schedules and loan comparisons."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class AmortizationEntry:
    """Single scheduled payment split into principal and interest."""

    payment_number: int
    payment_date: date
    principal_amount: Decimal
    interest_amount: Decimal
    total_amount: Decimal
    remaining_principal: Decimal


@dataclass(frozen=True)
class PayoffScenario:
    """Outcome of paying a balance down month by month."""

    total_payments: Decimal
    total_interest: Decimal
    months_to_payoff: int
    payoff_date: date


@dataclass(frozen=True)
class PayoffComparison:
    """Payoff with and without an extra monthly payment.

    Either scenario is None when it does not converge within the cap.
    """

    original: PayoffScenario | None
    with_extra: PayoffScenario | None

    @property
    def months_saved(self) -> int | None:
        """Return months saved by the extra payment."""
        if self.original is None or self.with_extra is None:
            return None
        return (
            self.original.months_to_payoff
            - self.with_extra.months_to_payoff
        )

    @property
    def interest_saved(self) -> Decimal | None:
        """Return interest saved by the extra payment."""
        if self.original is None or self.with_extra is None:
            return None
        return self.original.total_interest - self.with_extra.total_interest


@dataclass(frozen=True)
class LoanScenario:
    """Loan terms entered for comparison."""

    name: str
    principal: Decimal
    annual_rate_pct: Decimal
    term_months: int
    closing_costs: Decimal = Decimal("0")
    currency: str = "EUR"


@dataclass(frozen=True)
class LoanScenarioResult:
    """Payment totals computed for a loan scenario."""

    scenario: LoanScenario
    monthly_payment: Decimal
    total_payment: Decimal
    total_interest: Decimal


@dataclass(frozen=True)
class BreakEvenAnalysis:
    """Refinance economics against the baseline scenario.

    Attributes:
        scenario_name: Name of the refinance scenario.
        monthly_savings: Baseline payment minus refinance payment.
        closing_costs: One-time cost of the refinance.
        break_even_months: Months to recover closing costs, None for never.
        lifetime_net_savings: Savings over the term minus closing costs.
        recommendation: refinance, worth_it, consider or not_recommended.
    """

    scenario_name: str
    monthly_savings: Decimal
    closing_costs: Decimal
    break_even_months: int | None
    lifetime_net_savings: Decimal
    recommendation: str


@dataclass(frozen=True)
class LoanComparison:
    """Side-by-side comparison of loan scenarios."""

    results: list[LoanScenarioResult]
    best_monthly_payment: Decimal
    best_total_interest: Decimal
    best_total_payment: Decimal
    break_even: list[BreakEvenAnalysis]


__all__ = [
    "AmortizationEntry",
    "PayoffScenario",
    "PayoffComparison",
    "LoanScenario",
    "LoanScenarioResult",
    "BreakEvenAnalysis",
    "LoanComparison",
]
