"""Use case to compare the current balance sheet with stored history."""

from dataclasses import dataclass
from datetime import date

from src.application.ports.snapshot_repository import (
    NetWorthSnapshotRepositoryPort,
)
from src.application.use_cases.get_balance_sheet import GetBalanceSheetUseCase
from src.domain.models import (
    BalanceSheetSnapshot,
    ComparisonLine,
    NetWorthSnapshot,
)
from src.domain.services.history import compare_balance_sheets
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class BalanceSheetComparison:
    """Current balance sheet compared with an earlier snapshot.

    Attributes:
        current: Consolidated balance sheet as of today.
        previous: Latest snapshot on or before the comparison date, if any.
        lines: Per-category and total comparison lines.
    """

    current: BalanceSheetSnapshot
    previous: NetWorthSnapshot | None
    lines: list[ComparisonLine]


class GetBalanceSheetComparisonUseCase:
    """Compare the consolidated balance sheet with the latest snapshot."""

    def __init__(
        self,
        balance_sheet_use_case: GetBalanceSheetUseCase,
        snapshot_repository: NetWorthSnapshotRepositoryPort,
        logger=None,
    ) -> None:
        self._balance_sheet_use_case = balance_sheet_use_case
        self._snapshot_repository = snapshot_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        compare_date: date,
        as_of: date | None = None,
    ) -> BalanceSheetComparison:
        """Return comparison lines against the snapshot at ``compare_date``.

        Args:
            compare_date: Use the latest snapshot on or before this date.
            as_of: Reference date of the current balance sheet.

        Returns:
            BalanceSheetComparison: Current sheet, snapshot and lines.
        """
        current = self._balance_sheet_use_case.execute(as_of=as_of)
        snapshots = self._snapshot_repository.fetch_snapshots(
            end_date=compare_date
        )
        previous = snapshots[-1] if snapshots else None
        if previous is None:
            self._logger.warning(
                f"No net worth snapshot on or before {compare_date}"
            )
        return BalanceSheetComparison(
            current=current,
            previous=previous,
            lines=compare_balance_sheets(current, previous),
        )


__all__ = ["GetBalanceSheetComparisonUseCase", "BalanceSheetComparison"]
