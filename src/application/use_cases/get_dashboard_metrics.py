"""Use case to compute the dashboard's secondary metrics."""

from dataclasses import dataclass
from decimal import Decimal

from src.application.ports.market_data import MarketDataPort
from src.application.ports.records_repository import RecordsRepositoryPort
from src.application.use_cases.market_data_utils import load_market_data
from src.domain.constants import REFERENCE_CURRENCY
from src.domain.models import CurrencyShare, DebtToIncome, PropertyEquity
from src.domain.services.metrics import (
    compute_currency_breakdown,
    compute_debt_to_income,
    compute_property_equity,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DashboardMetrics:
    """Property equity, debt-to-income and currency exposure."""

    property_equity: list[PropertyEquity]
    debt_to_income: DebtToIncome
    currency_breakdown: list[CurrencyShare]


class GetDashboardMetricsUseCase:
    """Compute equity, debt-to-income and currency exposure."""

    def __init__(
        self,
        records_repository: RecordsRepositoryPort,
        market_data: MarketDataPort,
        logger=None,
        reference_currency: str = REFERENCE_CURRENCY,
    ) -> None:
        self._records_repository = records_repository
        self._market_data = market_data
        self._logger = logger or get_app_logger()
        self._reference_currency = reference_currency

    def execute(
        self,
        monthly_income: Decimal = Decimal("0"),
        income_currency: str = REFERENCE_CURRENCY,
    ) -> DashboardMetrics:
        """Return the metrics for the declared monthly income.

        Args:
            monthly_income: Declared monthly income before rental income.
            income_currency: Currency of ``monthly_income``.

        Returns:
            DashboardMetrics: Computed metrics in the reference currency.
        """
        assets = self._records_repository.fetch_assets()
        collections = self._records_repository.fetch_collections()
        liabilities = self._records_repository.fetch_liabilities()
        rates, prices = load_market_data(self._market_data, self._logger)

        debt_to_income = compute_debt_to_income(
            monthly_income,
            income_currency,
            assets,
            liabilities,
            rates.rates,
            self._reference_currency,
        )
        self._logger.info(
            f"Debt-to-income ratio {debt_to_income.ratio:.2f}% "
            f"({debt_to_income.status})"
        )
        return DashboardMetrics(
            property_equity=compute_property_equity(
                assets,
                liabilities,
                rates.rates,
                self._reference_currency,
            ),
            debt_to_income=debt_to_income,
            currency_breakdown=compute_currency_breakdown(
                assets,
                collections,
                rates.rates,
                prices,
                self._reference_currency,
            ),
        )


__all__ = ["GetDashboardMetricsUseCase", "DashboardMetrics"]
