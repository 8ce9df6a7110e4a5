"""Use case to persist the consolidated net worth for a day."""

from datetime import date

from src.application.ports.market_data import MarketDataPort
from src.application.ports.records_repository import RecordsRepositoryPort
from src.application.ports.snapshot_repository import (
    NetWorthSnapshotRepositoryPort,
)
from src.application.use_cases.market_data_utils import load_market_data
from src.domain.constants import REFERENCE_CURRENCY
from src.domain.models import NetWorthSnapshot
from src.domain.services.balance_sheet import compute_balance_sheet
from src.domain.services.history import build_net_worth_snapshot
from src.infrastructure.logging.logger import get_app_logger


class SaveNetWorthSnapshotUseCase:
    """Compute the consolidated balance sheet and store it as history."""

    def __init__(
        self,
        records_repository: RecordsRepositoryPort,
        market_data: MarketDataPort,
        snapshot_repository: NetWorthSnapshotRepositoryPort,
        logger=None,
        reference_currency: str = REFERENCE_CURRENCY,
    ) -> None:
        """Initialize the use case.

        Args:
            records_repository: Port providing the records.
            market_data: Port providing exchange rates and crypto prices.
            snapshot_repository: Port storing snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
            reference_currency: Currency of the stored amounts.
        """
        self._records_repository = records_repository
        self._market_data = market_data
        self._snapshot_repository = snapshot_repository
        self._logger = logger or get_app_logger()
        self._reference_currency = reference_currency

    def execute(self, snapshot_date: date | None = None) -> NetWorthSnapshot:
        """Compute and store the snapshot for ``snapshot_date``.

        An existing snapshot for the same day is replaced.

        Returns:
            NetWorthSnapshot: Stored snapshot.
        """
        snapshot_date = snapshot_date or date.today()
        assets = self._records_repository.fetch_assets()
        collections = self._records_repository.fetch_collections()
        rates, prices = load_market_data(self._market_data, self._logger)
        sheet = compute_balance_sheet(
            assets,
            collections,
            self._records_repository.fetch_liabilities(),
            self._records_repository.fetch_receivables(),
            rates=rates.rates,
            crypto_prices=prices,
            as_of=snapshot_date,
            reference_currency=self._reference_currency,
            logger=self._logger,
        )
        snapshot = build_net_worth_snapshot(
            sheet,
            assets,
            collections,
            rates.rates,
            prices,
            snapshot_date=snapshot_date,
        )
        self._snapshot_repository.save_snapshot(snapshot)
        self._logger.info(
            f"Saved net worth snapshot for {snapshot_date}: "
            f"{snapshot.net_worth} {snapshot.currency_code}"
        )
        return snapshot


__all__ = ["SaveNetWorthSnapshotUseCase"]
