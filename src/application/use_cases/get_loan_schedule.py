"""Use case to build the amortization schedule of a liability."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.application.ports.records_repository import RecordsRepositoryPort
from src.domain.models import AmortizationEntry, LiabilityRecord
from src.domain.services.amortization import (
    generate_schedule,
    monthly_payment,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.date_utils import months_between
from src.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class LoanSchedule:
    """Amortization schedule with the loan terms it was built from.

    Attributes:
        name: Liability name, or a label for ad-hoc terms.
        principal: Amount amortized.
        annual_rate_pct: Nominal annual rate in percent.
        term_months: Loan term in months.
        monthly_payment: Fixed monthly payment.
        frequency: Payment frequency of the entries.
        entries: Scheduled payments.
    """

    name: str
    principal: Decimal
    annual_rate_pct: Decimal
    term_months: int
    monthly_payment: Decimal
    frequency: str
    entries: list[AmortizationEntry]

    @property
    def total_interest(self) -> Decimal:
        return sum(
            (entry.interest_amount for entry in self.entries),
            Decimal("0"),
        )

    @property
    def total_paid(self) -> Decimal:
        return sum(
            (entry.total_amount for entry in self.entries),
            Decimal("0"),
        )

    @property
    def outstanding_balance(self) -> Decimal:
        """Principal still owed after the last scheduled payment."""
        if not self.entries:
            return Decimal("0")
        return self.entries[-1].remaining_principal


class GetLoanScheduleUseCase:
    """Build schedules from stored liabilities or explicit loan terms."""

    def __init__(
        self,
        records_repository: RecordsRepositoryPort | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            records_repository: Port providing liabilities. Only required
                when schedules are requested by liability id.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._records_repository = records_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        liability_id: str | None = None,
        *,
        principal: Decimal | None = None,
        annual_rate_pct: Decimal | None = None,
        term_months: int | None = None,
        start_date: date | None = None,
        frequency: str = "monthly",
    ) -> LoanSchedule:
        """Return the amortization schedule.

        Either ``liability_id`` or the explicit terms ``principal`` and
        ``term_months`` must be given.

        Args:
            liability_id: Identifier of a stored liability.
            principal: Amount borrowed for ad-hoc terms.
            annual_rate_pct: Annual rate in percent, 0 when omitted.
            term_months: Loan term in months for ad-hoc terms.
            start_date: First payment date, today by default.
            frequency: monthly, quarterly, semi_annual or annual.

        Returns:
            LoanSchedule: Terms and generated entries.

        Raises:
            ValueError: If the liability is unknown or lacks the dates
                needed to derive its term, or the terms are incomplete.
        """
        if liability_id is not None:
            liability = self._find_liability(liability_id)
            name, principal, annual_rate_pct, term_months, start_date = (
                self._terms_from_liability(liability)
            )
        else:
            if principal is None or term_months is None:
                raise ValueError(
                    "principal and term_months are required without a "
                    "liability_id"
                )
            name = "Custom loan"
            start_date = start_date or date.today()

        principal = coerce_decimal(principal)
        annual_rate_pct = coerce_decimal(annual_rate_pct)
        entries = generate_schedule(
            principal,
            annual_rate_pct,
            term_months,
            start_date,
            frequency=frequency,
        )
        payment = monthly_payment(principal, annual_rate_pct, term_months)
        self._logger.info(
            f"Generated {len(entries)} {frequency} payments for {name}"
        )
        if entries and entries[-1].remaining_principal > 0:
            self._logger.warning(
                f"Schedule for {name} leaves "
                f"{entries[-1].remaining_principal} outstanding after "
                f"{len(entries)} {frequency} payments"
            )
        return LoanSchedule(
            name=name,
            principal=principal,
            annual_rate_pct=annual_rate_pct,
            term_months=term_months,
            monthly_payment=payment,
            frequency=frequency,
            entries=entries,
        )

    def _find_liability(self, liability_id: str) -> LiabilityRecord:
        if self._records_repository is None:
            raise ValueError("A records repository is required by id")
        for liability in self._records_repository.fetch_liabilities():
            if liability.id == liability_id:
                return liability
        raise ValueError(f"Unknown liability: {liability_id}")

    @staticmethod
    def _terms_from_liability(liability: LiabilityRecord):
        if liability.start_date is None or liability.end_date is None:
            raise ValueError(
                f"Liability {liability.id} needs start and end dates "
                "to derive its term"
            )
        principal = (
            liability.original_amount
            if liability.original_amount is not None
            else liability.current_balance
        )
        return (
            liability.name,
            principal,
            liability.interest_rate,
            months_between(liability.start_date, liability.end_date),
            liability.start_date,
        )


__all__ = ["GetLoanScheduleUseCase", "LoanSchedule"]
