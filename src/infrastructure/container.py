"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.market_data import MarketDataPort
from src.application.ports.records_repository import RecordsRepositoryPort
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.market_data import (
    CachedMarketDataProvider,
    SqlAlchemyMarketDataRepository,
)
from src.infrastructure.records_repository import SqlAlchemyRecordsRepository
from src.infrastructure.settings import WealthSettings
from src.infrastructure.snapshot_repository import (
    SqlAlchemyNetWorthSnapshotRepository,
)

_market_data_provider: CachedMarketDataProvider | None = None


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_settings() -> WealthSettings:
    """Return settings read from the environment."""
    return WealthSettings.from_env()


def build_records_repository(
    db_port: DatabaseEnginePort | None = None,
) -> RecordsRepositoryPort:
    """Return the records repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyRecordsRepository(resolved_db, logger=get_app_logger())


def build_market_data(
    db_port: DatabaseEnginePort | None = None,
    settings: WealthSettings | None = None,
) -> MarketDataPort:
    """Return the process-wide cached market data provider."""
    global _market_data_provider
    if _market_data_provider is None:
        resolved_db = db_port or build_database_adapter()
        resolved_settings = settings or build_settings()
        _market_data_provider = CachedMarketDataProvider(
            SqlAlchemyMarketDataRepository(
                resolved_db,
                base_currency=resolved_settings.reference_currency,
            ),
            rates_ttl_seconds=resolved_settings.rates_ttl_seconds,
            crypto_ttl_seconds=resolved_settings.crypto_ttl_seconds,
            logger=get_app_logger(),
        )
    return _market_data_provider


def build_snapshot_repository(
    db_port: DatabaseEnginePort | None = None,
) -> SqlAlchemyNetWorthSnapshotRepository:
    """Return the net worth snapshot repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyNetWorthSnapshotRepository(resolved_db)


__all__ = [
    "build_database_adapter",
    "build_settings",
    "build_records_repository",
    "build_market_data",
    "build_snapshot_repository",
]
