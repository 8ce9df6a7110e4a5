"""Application ports package."""

from .database import DatabaseEnginePort
from .market_data import MarketDataPort
from .records_repository import RecordsRepositoryPort
from .snapshot_repository import NetWorthSnapshotRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "MarketDataPort",
    "RecordsRepositoryPort",
    "NetWorthSnapshotRepositoryPort",
]
