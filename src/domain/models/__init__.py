"""Domain models package."""

from .amortization import (
    AmortizationEntry,
    BreakEvenAnalysis,
    LoanComparison,
    LoanScenario,
    LoanScenarioResult,
    PayoffComparison,
    PayoffScenario,
)
from .balance_sheet import (
    BalanceSheetCertainty,
    BalanceSheetDrillDown,
    BalanceSheetSnapshot,
    CertaintySummary,
    CurrentAssets,
    CurrentLiabilities,
    NonCurrentAssets,
    NonCurrentLiabilities,
)
from .history import ComparisonLine, NetWorthSnapshot
from .market import CryptoPrice, ExchangeRateTable
from .metrics import CurrencyShare, DebtToIncome, PropertyEquity
from .ownership import (
    AllocationEntry,
    Ownership,
    SharedOwnership,
    SingleOwner,
)
from .records import (
    AssetRecord,
    CollectionRecord,
    LiabilityRecord,
    ReceivableRecord,
)

__all__ = [
    "AmortizationEntry",
    "BreakEvenAnalysis",
    "LoanComparison",
    "LoanScenario",
    "LoanScenarioResult",
    "PayoffComparison",
    "PayoffScenario",
    "BalanceSheetCertainty",
    "BalanceSheetDrillDown",
    "BalanceSheetSnapshot",
    "CertaintySummary",
    "CurrentAssets",
    "CurrentLiabilities",
    "NonCurrentAssets",
    "NonCurrentLiabilities",
    "ComparisonLine",
    "NetWorthSnapshot",
    "CryptoPrice",
    "ExchangeRateTable",
    "CurrencyShare",
    "DebtToIncome",
    "PropertyEquity",
    "AllocationEntry",
    "Ownership",
    "SharedOwnership",
    "SingleOwner",
    "AssetRecord",
    "CollectionRecord",
    "LiabilityRecord",
    "ReceivableRecord",
]
