"""Application use cases package."""

from .compare_loans import CompareLoansUseCase, PayoffCalculatorUseCase
from .get_balance_sheet import GetBalanceSheetUseCase
from .get_balance_sheet_comparison import (
    BalanceSheetComparison,
    GetBalanceSheetComparisonUseCase,
)
from .get_dashboard_metrics import DashboardMetrics, GetDashboardMetricsUseCase
from .get_loan_schedule import GetLoanScheduleUseCase, LoanSchedule
from .save_net_worth_snapshot import SaveNetWorthSnapshotUseCase

__all__ = [
    "CompareLoansUseCase",
    "PayoffCalculatorUseCase",
    "GetBalanceSheetUseCase",
    "BalanceSheetComparison",
    "GetBalanceSheetComparisonUseCase",
    "DashboardMetrics",
    "GetDashboardMetricsUseCase",
    "GetLoanScheduleUseCase",
    "LoanSchedule",
    "SaveNetWorthSnapshotUseCase",
]
