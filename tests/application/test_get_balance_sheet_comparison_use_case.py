"""Tests for the GetBalanceSheetComparisonUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_balance_sheet_comparison import (
    GetBalanceSheetComparisonUseCase,
)
from src.domain.models import (
    BalanceSheetSnapshot,
    CurrentAssets,
    NetWorthSnapshot,
)


def _current_sheet() -> BalanceSheetSnapshot:
    return BalanceSheetSnapshot(
        currency_code="EUR",
        as_of=date(2024, 6, 30),
        current_assets=CurrentAssets(cash_and_bank=Decimal("1200")),
    )


def _snapshot(day: date, cash: str) -> NetWorthSnapshot:
    amount = Decimal(cash)
    return NetWorthSnapshot(
        snapshot_date=day,
        total_assets=amount,
        total_collections=Decimal("0"),
        total_liabilities=Decimal("0"),
        net_worth=amount,
        currency_code="EUR",
        breakdown_by_type={"bank": amount},
    )


def test_execute_uses_latest_snapshot_before_date() -> None:
    """The last snapshot returned by the repository is the baseline."""
    balance_sheet_use_case = MagicMock()
    balance_sheet_use_case.execute.return_value = _current_sheet()
    snapshot_repository = MagicMock()
    snapshot_repository.fetch_snapshots.return_value = [
        _snapshot(date(2024, 1, 1), "800"),
        _snapshot(date(2024, 1, 31), "1000"),
    ]
    use_case = GetBalanceSheetComparisonUseCase(
        balance_sheet_use_case,
        snapshot_repository,
        logger=MagicMock(),
    )

    result = use_case.execute(compare_date=date(2024, 2, 1))

    snapshot_repository.fetch_snapshots.assert_called_once_with(
        end_date=date(2024, 2, 1)
    )
    assert result.previous.snapshot_date == date(2024, 1, 31)
    lines = {line.label: line for line in result.lines}
    assert lines["Cash and bank"].change == Decimal("200")
    assert lines["Cash and bank"].percent_change == Decimal("20")
    assert lines["Net worth"].trend == "up"


def test_execute_without_history_warns() -> None:
    balance_sheet_use_case = MagicMock()
    balance_sheet_use_case.execute.return_value = _current_sheet()
    snapshot_repository = MagicMock()
    snapshot_repository.fetch_snapshots.return_value = []
    logger = MagicMock()
    use_case = GetBalanceSheetComparisonUseCase(
        balance_sheet_use_case,
        snapshot_repository,
        logger=logger,
    )

    result = use_case.execute(compare_date=date(2024, 2, 1))

    assert result.previous is None
    assert all(line.previous == 0 for line in result.lines)
    logger.warning.assert_called_once()
