"""CLI adapter printing a loan amortization schedule."""

import argparse
from datetime import date
from decimal import Decimal, InvalidOperation

from src.application.use_cases.compare_loans import PayoffCalculatorUseCase
from src.application.use_cases.get_loan_schedule import (
    GetLoanScheduleUseCase,
    LoanSchedule,
)
from src.domain.constants import MONTHS_PER_PAYMENT
from src.infrastructure.container import (
    build_database_adapter,
    build_records_repository,
)
from src.infrastructure.logging.logger import get_app_logger


def _decimal(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(
            f"Invalid amount '{value}'"
        ) from None


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        ) from None


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the schedule CLI."""
    parser = argparse.ArgumentParser(
        description="Print the amortization schedule of a loan."
    )
    parser.add_argument(
        "--liability-id",
        help="Stored liability to build the schedule from.",
    )
    parser.add_argument("--principal", type=_decimal)
    parser.add_argument(
        "--rate",
        type=_decimal,
        default=Decimal("0"),
        help="Nominal annual rate in percent.",
    )
    parser.add_argument("--term-months", type=int)
    parser.add_argument("--start-date", type=_iso_date)
    parser.add_argument(
        "--frequency",
        choices=sorted(MONTHS_PER_PAYMENT),
        default="monthly",
    )
    parser.add_argument(
        "--extra-payment",
        type=_decimal,
        help="Also print the payoff effect of this extra monthly amount.",
    )
    return parser


def format_schedule(schedule: LoanSchedule) -> list[str]:
    """Render a schedule as text lines."""
    lines = [
        f"{schedule.name}: {schedule.principal:,.2f} at "
        f"{schedule.annual_rate_pct}% over {schedule.term_months} months",
        f"Monthly payment: {schedule.monthly_payment:,.2f}",
        f"{'#':>4} {'Date':<10} {'Principal':>14} {'Interest':>12} "
        f"{'Payment':>14} {'Remaining':>16}",
    ]
    for entry in schedule.entries:
        lines.append(
            f"{entry.payment_number:>4} "
            f"{entry.payment_date.isoformat():<10} "
            f"{entry.principal_amount:>14,.2f} "
            f"{entry.interest_amount:>12,.2f} "
            f"{entry.total_amount:>14,.2f} "
            f"{entry.remaining_principal:>16,.2f}"
        )
    lines.append(
        f"Total paid: {schedule.total_paid:,.2f} "
        f"(interest {schedule.total_interest:,.2f})"
    )
    if schedule.outstanding_balance > 0:
        lines.append(
            f"Outstanding after last payment: "
            f"{schedule.outstanding_balance:,.2f}"
        )
    return lines


def main(argv: list[str] | None = None) -> None:
    """Build and print the requested schedule."""
    args = build_parser().parse_args(argv)
    logger = get_app_logger()

    try:
        records_repository = None
        if args.liability_id:
            records_repository = build_records_repository(
                build_database_adapter()
            )
        use_case = GetLoanScheduleUseCase(
            records_repository=records_repository,
            logger=logger,
        )
        schedule = use_case.execute(
            args.liability_id,
            principal=args.principal,
            annual_rate_pct=args.rate,
            term_months=args.term_months,
            start_date=args.start_date,
            frequency=args.frequency,
        )
    except (RuntimeError, ValueError) as exc:
        logger.error(str(exc))
        return

    for line in format_schedule(schedule):
        print(line)

    if args.extra_payment is not None:
        comparison = PayoffCalculatorUseCase(logger=logger).execute(
            schedule.principal,
            schedule.annual_rate_pct,
            schedule.monthly_payment,
            args.extra_payment,
            schedule.entries[0].payment_date if schedule.entries else None,
        )
        if comparison.with_extra is None:
            print("With extra payment: Insufficient payment")
        else:
            print(
                "With extra payment: paid off in "
                f"{comparison.with_extra.months_to_payoff} months "
                f"({comparison.with_extra.payoff_date.isoformat()})"
            )
        if comparison.months_saved is not None:
            print(
                f"Months saved: {comparison.months_saved}, "
                f"interest saved: {comparison.interest_saved:,.2f}"
            )


if __name__ == "__main__":  # pragma: no cover
    main()
