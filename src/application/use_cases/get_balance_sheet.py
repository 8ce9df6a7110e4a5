"""Use case to compute the balance sheet from stored records."""

from datetime import date

from src.application.ports.market_data import MarketDataPort
from src.application.ports.records_repository import RecordsRepositoryPort
from src.application.use_cases.market_data_utils import load_market_data
from src.domain.constants import CERTAINTY_FILTERS, REFERENCE_CURRENCY
from src.domain.models import BalanceSheetSnapshot
from src.domain.services.balance_sheet import (
    compute_balance_sheet,
    convert_balance_sheet,
)
from src.infrastructure.logging.logger import get_app_logger


class GetBalanceSheetUseCase:
    """Compute a filtered balance sheet in the reference currency."""

    def __init__(
        self,
        records_repository: RecordsRepositoryPort,
        market_data: MarketDataPort,
        logger=None,
        reference_currency: str = REFERENCE_CURRENCY,
    ) -> None:
        """Initialize the use case.

        Args:
            records_repository: Port providing assets, collections,
                liabilities and receivables.
            market_data: Port providing exchange rates and crypto prices.
            logger: Optional logger compatible with logging.Logger-like API.
            reference_currency: Currency of the computed amounts.
        """
        self._records_repository = records_repository
        self._market_data = market_data
        self._logger = logger or get_app_logger()
        self._reference_currency = reference_currency

    def execute(
        self,
        entity_filter: str | None = None,
        certainty_filter: str = "all",
        viewer_party_id: str | None = None,
        as_of: date | None = None,
        display_currency: str | None = None,
    ) -> BalanceSheetSnapshot:
        """Return the balance sheet for the given view.

        Args:
            entity_filter: Keep only records owned by this entity when set.
            certainty_filter: all, confirmed or exclude_optional.
            viewer_party_id: Party whose ownership share is applied to
                assets and collections. None means the consolidated view.
            as_of: Reference date for short/long-term classification.
            display_currency: Currency the totals are expressed in. None
                keeps the reference currency.

        Returns:
            BalanceSheetSnapshot: Computed balance sheet.

        Raises:
            ValueError: If ``certainty_filter`` is not a known mode.
        """
        if certainty_filter not in CERTAINTY_FILTERS:
            raise ValueError(
                f"Unknown certainty filter: {certainty_filter}. "
                f"Expected one of {', '.join(CERTAINTY_FILTERS)}"
            )
        assets = self._records_repository.fetch_assets()
        collections = self._records_repository.fetch_collections()
        liabilities = self._records_repository.fetch_liabilities()
        receivables = self._records_repository.fetch_receivables()
        self._logger.info(
            f"Fetched {len(assets)} assets, {len(collections)} collections, "
            f"{len(liabilities)} liabilities, {len(receivables)} receivables"
        )
        rates, prices = load_market_data(self._market_data, self._logger)

        sheet = compute_balance_sheet(
            assets,
            collections,
            liabilities,
            receivables,
            rates=rates.rates,
            crypto_prices=prices,
            entity_filter=entity_filter,
            certainty_filter=certainty_filter,
            viewer_party_id=viewer_party_id,
            as_of=as_of,
            reference_currency=self._reference_currency,
            logger=self._logger,
        )
        self._logger.info(
            f"Balance sheet computed: assets={sheet.total_assets}, "
            f"liabilities={sheet.total_liabilities}, "
            f"net_worth={sheet.net_worth} {sheet.currency_code}"
        )
        return convert_balance_sheet(
            sheet,
            display_currency,
            rates.rates,
            logger=self._logger,
        )


__all__ = ["GetBalanceSheetUseCase"]
