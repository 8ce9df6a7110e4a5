"""Tests for the GetLoanScheduleUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.get_loan_schedule import GetLoanScheduleUseCase
from src.domain.models import LiabilityRecord


def _build_repository(liabilities: list[LiabilityRecord]) -> MagicMock:
    repository = MagicMock()
    repository.fetch_liabilities.return_value = liabilities
    return repository


def test_execute_by_id_uses_original_amount_and_dates() -> None:
    """Stored liabilities should provide principal, rate and term."""
    mortgage = LiabilityRecord(
        id="m1",
        name="Mortgage",
        liability_type="mortgage",
        currency="EUR",
        current_balance=Decimal("450000"),
        start_date=date(2024, 1, 1),
        end_date=date(2044, 1, 1),
        interest_rate=Decimal("4.5"),
        original_amount=Decimal("500000"),
    )
    use_case = GetLoanScheduleUseCase(
        records_repository=_build_repository([mortgage]),
        logger=MagicMock(),
    )

    schedule = use_case.execute("m1")

    assert schedule.name == "Mortgage"
    assert schedule.principal == Decimal("500000")
    assert schedule.term_months == 240
    assert schedule.monthly_payment == Decimal("3163.25")
    assert len(schedule.entries) == 240
    assert schedule.entries[0].payment_date == date(2024, 1, 1)
    assert schedule.total_paid > schedule.principal


def test_execute_by_id_falls_back_to_current_balance() -> None:
    """Without an original amount the current balance is amortized."""
    loan = LiabilityRecord(
        id="l1",
        name="Car loan",
        liability_type="loan",
        currency="EUR",
        current_balance=Decimal("1200"),
        start_date=date(2024, 1, 1),
        end_date=date(2025, 1, 1),
    )
    use_case = GetLoanScheduleUseCase(
        records_repository=_build_repository([loan]),
        logger=MagicMock(),
    )

    schedule = use_case.execute("l1")

    assert schedule.principal == Decimal("1200")
    assert schedule.annual_rate_pct == Decimal("0")
    assert schedule.monthly_payment == Decimal("100.00")
    assert schedule.total_interest == Decimal("0")


def test_execute_by_id_requires_dates() -> None:
    """A liability without an end date cannot produce a schedule."""
    card = LiabilityRecord(
        id="c1",
        name="Card",
        liability_type="credit_card",
        currency="EUR",
        current_balance=Decimal("500"),
    )
    use_case = GetLoanScheduleUseCase(
        records_repository=_build_repository([card]),
        logger=MagicMock(),
    )

    with pytest.raises(ValueError, match="start and end dates"):
        use_case.execute("c1")


def test_execute_rejects_unknown_liability() -> None:
    use_case = GetLoanScheduleUseCase(
        records_repository=_build_repository([]),
        logger=MagicMock(),
    )

    with pytest.raises(ValueError, match="Unknown liability"):
        use_case.execute("missing")


def test_execute_with_explicit_terms() -> None:
    """Ad-hoc terms should not need a repository."""
    use_case = GetLoanScheduleUseCase(logger=MagicMock())

    schedule = use_case.execute(
        principal=Decimal("12000"),
        annual_rate_pct=Decimal("0"),
        term_months=12,
        start_date=date(2024, 1, 1),
        frequency="quarterly",
    )

    assert schedule.name == "Custom loan"
    assert schedule.frequency == "quarterly"
    assert len(schedule.entries) == 4
    assert schedule.entries[-1].remaining_principal == Decimal("0")


def test_execute_requires_principal_and_term() -> None:
    use_case = GetLoanScheduleUseCase(logger=MagicMock())

    with pytest.raises(ValueError, match="principal and term_months"):
        use_case.execute(principal=Decimal("1000"))


def test_execute_warns_when_schedule_leaves_balance() -> None:
    """Coarse frequencies can leave principal owed after the last period."""
    logger = MagicMock()
    use_case = GetLoanScheduleUseCase(logger=logger)

    schedule = use_case.execute(
        principal=Decimal("100000"),
        annual_rate_pct=Decimal("6"),
        term_months=12,
        start_date=date(2024, 1, 1),
        frequency="quarterly",
    )

    assert schedule.outstanding_balance == Decimal("509.56")
    logger.warning.assert_called_once()
    assert "509.56" in logger.warning.call_args.args[0]


def test_execute_does_not_warn_for_fully_repaid_schedule() -> None:
    logger = MagicMock()
    use_case = GetLoanScheduleUseCase(logger=logger)

    schedule = use_case.execute(
        principal=Decimal("1200"),
        term_months=12,
        start_date=date(2024, 1, 1),
    )

    assert schedule.outstanding_balance == Decimal("0")
    logger.warning.assert_not_called()
