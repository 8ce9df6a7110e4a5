"""Loan amortization, payoff and refinance arithmetic."""

import math
from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from src.domain.constants import (
    CONVERGENCE_THRESHOLD,
    MONTHS_PER_PAYMENT,
    PAYOFF_MAX_MONTHS,
)
from src.domain.models.amortization import (
    AmortizationEntry,
    BreakEvenAnalysis,
    LoanComparison,
    LoanScenario,
    LoanScenarioResult,
    PayoffComparison,
    PayoffScenario,
)
from src.utils.date_utils import add_months
from src.utils.decimal_utils import coerce_decimal, round_cents

_ZERO = Decimal("0")
_ONE = Decimal("1")
_HUNDRED = Decimal("100")
_TWELVE = Decimal("12")


def _monthly_rate(annual_rate_pct: Decimal) -> Decimal:
    return coerce_decimal(annual_rate_pct) / _HUNDRED / _TWELVE


def monthly_payment(
    principal: Decimal,
    annual_rate_pct: Decimal,
    term_months: int,
) -> Decimal:
    """Return the fixed monthly payment that amortizes a loan.

    Args:
        principal: Amount borrowed.
        annual_rate_pct: Nominal annual rate in percent.
        term_months: Loan term in months.

    Returns:
        Decimal: Payment rounded to cents; principal / term for a zero rate.

    Raises:
        ValueError: If ``term_months`` is not positive.
    """
    if term_months <= 0:
        raise ValueError(f"term_months must be positive, got {term_months}")
    principal = coerce_decimal(principal)
    rate = _monthly_rate(annual_rate_pct)
    if rate == 0:
        return round_cents(principal / Decimal(term_months))
    growth = (_ONE + rate) ** term_months
    payment = principal * (rate * growth) / (growth - _ONE)
    return round_cents(payment)


def months_per_payment(frequency: str) -> int:
    """Return the number of months covered by one payment period.

    Raises:
        ValueError: If the frequency is unknown.
    """
    try:
        return MONTHS_PER_PAYMENT[frequency]
    except KeyError:
        raise ValueError(f"Unknown payment frequency: {frequency}") from None


def generate_schedule(
    principal: Decimal,
    annual_rate_pct: Decimal,
    term_months: int,
    start_date: date,
    frequency: str = "monthly",
) -> list[AmortizationEntry]:
    """Build the payment-by-payment amortization schedule.

    The period payment is the monthly payment scaled by the months per
    period, and the period rate is the monthly rate scaled the same way.
    At most ``ceil(term_months / months_per_period)`` payments are
    produced and the principal portion is capped at the remaining
    balance. Residues of a cent or less are folded into the payment that
    leaves them. Anything larger that is still owed after the last
    permitted period stays on the final entry as ``remaining_principal``.

    Args:
        principal: Amount borrowed.
        annual_rate_pct: Nominal annual rate in percent.
        term_months: Loan term in months.
        start_date: Date of the first payment.
        frequency: monthly, quarterly, semi_annual or annual.

    Returns:
        list[AmortizationEntry]: Entries numbered from 1, amounts in cents.
    """
    interval = months_per_payment(frequency)
    payment = monthly_payment(principal, annual_rate_pct, term_months)
    period_payment = payment * interval
    period_rate = _monthly_rate(annual_rate_pct) * interval
    total_periods = math.ceil(term_months / interval)

    remaining = coerce_decimal(principal)
    schedule: list[AmortizationEntry] = []
    for number in range(1, total_periods + 1):
        if remaining <= CONVERGENCE_THRESHOLD:
            break
        interest = remaining * period_rate
        principal_part = period_payment - interest
        if principal_part > remaining:
            principal_part = remaining
        remaining -= principal_part
        if remaining <= CONVERGENCE_THRESHOLD:
            principal_part += remaining
            remaining = _ZERO
        schedule.append(
            AmortizationEntry(
                payment_number=number,
                payment_date=add_months(start_date, (number - 1) * interval),
                principal_amount=round_cents(principal_part),
                interest_amount=round_cents(interest),
                total_amount=round_cents(principal_part + interest),
                remaining_principal=round_cents(max(remaining, _ZERO)),
            )
        )
    return schedule


def calculate_payoff(
    balance: Decimal,
    annual_rate_pct: Decimal,
    monthly_payment_amount: Decimal,
    extra_payment: Decimal = _ZERO,
    start_date: date | None = None,
) -> PayoffScenario | None:
    """Simulate monthly payments until the balance is repaid.

    Args:
        balance: Outstanding balance.
        annual_rate_pct: Nominal annual rate in percent.
        monthly_payment_amount: Contractual monthly payment.
        extra_payment: Additional amount paid every month.
        start_date: Date the simulation starts from, today by default.

    Returns:
        PayoffScenario | None: None when the payment is not positive or the
        balance is not repaid within the 600 month cap.
    """
    payment = coerce_decimal(monthly_payment_amount) + coerce_decimal(
        extra_payment
    )
    if payment <= 0:
        return None
    rate = _monthly_rate(annual_rate_pct)
    remaining = coerce_decimal(balance)
    total_payments = _ZERO
    total_interest = _ZERO
    months = 0
    while remaining > CONVERGENCE_THRESHOLD and months < PAYOFF_MAX_MONTHS:
        interest = remaining * rate
        paid = min(payment, remaining + interest)
        remaining -= paid - interest
        total_interest += interest
        total_payments += paid
        months += 1
    if remaining > CONVERGENCE_THRESHOLD:
        return None
    return PayoffScenario(
        total_payments=round_cents(total_payments),
        total_interest=round_cents(total_interest),
        months_to_payoff=months,
        payoff_date=add_months(start_date or date.today(), months),
    )


def compare_payoff(
    balance: Decimal,
    annual_rate_pct: Decimal,
    monthly_payment_amount: Decimal,
    extra_payment: Decimal,
    start_date: date | None = None,
) -> PayoffComparison:
    """Compare paying the contractual amount with paying extra."""
    return PayoffComparison(
        original=calculate_payoff(
            balance,
            annual_rate_pct,
            monthly_payment_amount,
            _ZERO,
            start_date,
        ),
        with_extra=calculate_payoff(
            balance,
            annual_rate_pct,
            monthly_payment_amount,
            extra_payment,
            start_date,
        ),
    )


def break_even_months(
    monthly_savings: Decimal,
    closing_cost: Decimal,
) -> int | None:
    """Return months needed for savings to cover a closing cost.

    Returns:
        int | None: None when there are no savings, 0 without closing cost.
    """
    savings = coerce_decimal(monthly_savings)
    cost = coerce_decimal(closing_cost)
    if savings <= 0:
        return None
    if cost <= 0:
        return 0
    return math.ceil(cost / savings)


def evaluate_scenario(scenario: LoanScenario) -> LoanScenarioResult:
    """Compute payment totals for a loan scenario."""
    payment = monthly_payment(
        scenario.principal,
        scenario.annual_rate_pct,
        scenario.term_months,
    )
    total_payment = payment * scenario.term_months
    return LoanScenarioResult(
        scenario=scenario,
        monthly_payment=payment,
        total_payment=total_payment,
        total_interest=total_payment - coerce_decimal(scenario.principal),
    )


def compare_loans(scenarios: Sequence[LoanScenario]) -> LoanComparison:
    """Compare loan scenarios against the first one as baseline.

    Args:
        scenarios: Baseline loan followed by refinance candidates.

    Returns:
        LoanComparison: Per-scenario totals, best values and break-even
        analysis for every candidate after the baseline.

    Raises:
        ValueError: If no scenario is given.
    """
    if not scenarios:
        raise ValueError("At least one loan scenario is required")
    results = [evaluate_scenario(scenario) for scenario in scenarios]
    baseline = results[0]
    analyses = [
        _break_even_analysis(baseline, candidate)
        for candidate in results[1:]
    ]
    return LoanComparison(
        results=results,
        best_monthly_payment=min(r.monthly_payment for r in results),
        best_total_interest=min(r.total_interest for r in results),
        best_total_payment=min(r.total_payment for r in results),
        break_even=analyses,
    )


def _break_even_analysis(
    baseline: LoanScenarioResult,
    candidate: LoanScenarioResult,
) -> BreakEvenAnalysis:
    savings = baseline.monthly_payment - candidate.monthly_payment
    closing_costs = coerce_decimal(candidate.scenario.closing_costs)
    term = candidate.scenario.term_months
    months = break_even_months(savings, closing_costs)
    net_savings = savings * term - closing_costs if savings > 0 else _ZERO

    if closing_costs == 0 and savings > 0:
        recommendation = "refinance"
    elif months is not None and 0 < months < term / 2:
        recommendation = "worth_it"
    elif months is not None and 0 < months < term:
        recommendation = "consider"
    else:
        recommendation = "not_recommended"

    return BreakEvenAnalysis(
        scenario_name=candidate.scenario.name,
        monthly_savings=savings,
        closing_costs=closing_costs,
        break_even_months=months,
        lifetime_net_savings=net_savings,
        recommendation=recommendation,
    )


__all__ = [
    "monthly_payment",
    "months_per_payment",
    "generate_schedule",
    "calculate_payoff",
    "compare_payoff",
    "break_even_months",
    "evaluate_scenario",
    "compare_loans",
]
