"""Tests for the GetDashboardMetricsUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_dashboard_metrics import (
    GetDashboardMetricsUseCase,
)
from src.domain.models import AssetRecord, ExchangeRateTable, LiabilityRecord


def test_execute_returns_all_metrics() -> None:
    """Use case should combine equity, ratio and currency exposure."""
    repository = MagicMock()
    repository.fetch_assets.return_value = [
        AssetRecord(
            id="flat",
            name="Flat",
            asset_type="real-estate",
            currency="EUR",
            current_value=Decimal("300000"),
        )
    ]
    repository.fetch_collections.return_value = []
    repository.fetch_liabilities.return_value = [
        LiabilityRecord(
            id="m1",
            name="Mortgage",
            liability_type="mortgage",
            currency="EUR",
            current_balance=Decimal("200000"),
            monthly_payment=Decimal("1500"),
            linked_asset_id="flat",
        )
    ]
    market_data = MagicMock()
    market_data.fetch_exchange_rates.return_value = ExchangeRateTable(
        rates={"EUR": Decimal("1"), "USD": Decimal("1.25")}
    )
    market_data.fetch_crypto_prices.return_value = {}
    use_case = GetDashboardMetricsUseCase(
        records_repository=repository,
        market_data=market_data,
        logger=MagicMock(),
    )

    metrics = use_case.execute(
        monthly_income=Decimal("6250"), income_currency="USD"
    )

    assert metrics.property_equity[0].equity == Decimal("100000")
    assert metrics.debt_to_income.monthly_income == Decimal("5000")
    assert metrics.debt_to_income.ratio == Decimal("30")
    assert metrics.currency_breakdown[0].currency == "EUR"
    repository.fetch_receivables.assert_not_called()
