"""Use cases for loan comparison and payoff calculation."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from src.domain.models import LoanComparison, LoanScenario, PayoffComparison
from src.domain.services.amortization import compare_loans, compare_payoff
from src.infrastructure.logging.logger import get_app_logger


class CompareLoansUseCase:
    """Compare a baseline loan with refinance candidates."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_app_logger()

    def execute(self, scenarios: Sequence[LoanScenario]) -> LoanComparison:
        """Return totals and break-even analysis for the scenarios.

        Raises:
            ValueError: If no scenario is given.
        """
        comparison = compare_loans(scenarios)
        for analysis in comparison.break_even:
            if analysis.break_even_months is None:
                self._logger.info(
                    f"{analysis.scenario_name} never breaks even "
                    f"(monthly savings {analysis.monthly_savings})"
                )
        self._logger.info(f"Compared {len(comparison.results)} loan scenarios")
        return comparison


class PayoffCalculatorUseCase:
    """Estimate the effect of an extra monthly payment."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_app_logger()

    def execute(
        self,
        balance: Decimal,
        annual_rate_pct: Decimal,
        monthly_payment: Decimal,
        extra_payment: Decimal = Decimal("0"),
        start_date: date | None = None,
    ) -> PayoffComparison:
        """Return the payoff comparison with and without the extra payment.

        Args:
            balance: Outstanding balance.
            annual_rate_pct: Nominal annual rate in percent.
            monthly_payment: Contractual monthly payment.
            extra_payment: Additional amount paid every month.
            start_date: Date the simulation starts from.

        Returns:
            PayoffComparison: Scenarios, None for non-convergent ones.
        """
        comparison = compare_payoff(
            balance,
            annual_rate_pct,
            monthly_payment,
            extra_payment,
            start_date,
        )
        if comparison.original is None:
            self._logger.warning(
                f"Payment {monthly_payment} does not repay {balance} "
                f"at {annual_rate_pct}%"
            )
        if comparison.with_extra is None:
            self._logger.warning(
                f"Payment {monthly_payment} + {extra_payment} does not "
                f"repay {balance} at {annual_rate_pct}%"
            )
        return comparison


__all__ = ["CompareLoansUseCase", "PayoffCalculatorUseCase"]
