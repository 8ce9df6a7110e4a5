"""Tests for the GetBalanceSheetUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.get_balance_sheet import GetBalanceSheetUseCase
from src.domain.models import (
    AllocationEntry,
    AssetRecord,
    CryptoPrice,
    ExchangeRateTable,
    LiabilityRecord,
    ReceivableRecord,
    SharedOwnership,
)


def _build_repository() -> MagicMock:
    repository = MagicMock()
    repository.fetch_assets.return_value = [
        AssetRecord(
            id="a1",
            name="Joint account",
            asset_type="bank",
            currency="USD",
            current_value=Decimal("2500"),
            ownership=SharedOwnership(
                allocations=(
                    AllocationEntry("p1", Decimal("60")),
                    AllocationEntry("p2", Decimal("40")),
                )
            ),
        ),
        AssetRecord(
            id="a2",
            name="Wallet",
            asset_type="crypto",
            currency="USD",
            current_value=Decimal("0"),
            ticker="btc",
            quantity=Decimal("0.1"),
        ),
    ]
    repository.fetch_collections.return_value = []
    repository.fetch_liabilities.return_value = [
        LiabilityRecord(
            id="l1",
            name="Card",
            liability_type="credit_card",
            currency="EUR",
            current_balance=Decimal("500"),
        )
    ]
    repository.fetch_receivables.return_value = [
        ReceivableRecord(
            id="r1",
            name="Loan to friend",
            currency="EUR",
            current_balance=Decimal("300"),
            certainty="optional",
            due_date=date(2024, 6, 1),
        )
    ]
    return repository


def _build_market_data(status: str = "live") -> MagicMock:
    market_data = MagicMock()
    market_data.fetch_exchange_rates.return_value = ExchangeRateTable(
        rates={"EUR": Decimal("1"), "USD": Decimal("1.25")},
        status=status,
    )
    market_data.fetch_crypto_prices.return_value = {
        "BTC": CryptoPrice(price=Decimal("50000"))
    }
    return market_data


def test_execute_returns_consolidated_sheet() -> None:
    """Use case should convert and aggregate every record."""
    use_case = GetBalanceSheetUseCase(
        records_repository=_build_repository(),
        market_data=_build_market_data(),
        logger=MagicMock(),
    )

    sheet = use_case.execute(as_of=date(2024, 1, 15))

    assert sheet.current_assets.cash_and_bank == Decimal("2000")
    assert sheet.current_assets.digital_assets == Decimal("4000")
    assert sheet.current_assets.short_term_receivables == Decimal("300")
    assert sheet.total_liabilities == Decimal("500")
    assert sheet.net_worth == Decimal("5800")
    assert sheet.currency_code == "EUR"


def test_execute_applies_viewer_and_certainty_filter() -> None:
    """Use case should forward the view options to the aggregator."""
    use_case = GetBalanceSheetUseCase(
        records_repository=_build_repository(),
        market_data=_build_market_data(),
        logger=MagicMock(),
    )

    sheet = use_case.execute(
        certainty_filter="exclude_optional",
        viewer_party_id="p2",
        as_of=date(2024, 1, 15),
    )

    assert sheet.current_assets.cash_and_bank == Decimal("800")
    assert sheet.current_assets.short_term_receivables == Decimal("0")


def test_execute_rejects_unknown_certainty_filter() -> None:
    """Use case should fail before touching the repository."""
    repository = _build_repository()
    use_case = GetBalanceSheetUseCase(
        records_repository=repository,
        market_data=_build_market_data(),
        logger=MagicMock(),
    )

    with pytest.raises(ValueError, match="Unknown certainty filter"):
        use_case.execute(certainty_filter="maybe")

    repository.fetch_assets.assert_not_called()


def test_execute_warns_on_degraded_rates() -> None:
    """Use case should log a warning when rates are not live."""
    logger = MagicMock()
    use_case = GetBalanceSheetUseCase(
        records_repository=_build_repository(),
        market_data=_build_market_data(status="fallback"),
        logger=logger,
    )

    use_case.execute(as_of=date(2024, 1, 15))

    warning = logger.warning.call_args_list[0].args[0]
    assert "fallback" in warning


def test_execute_expresses_totals_in_display_currency() -> None:
    use_case = GetBalanceSheetUseCase(
        records_repository=_build_repository(),
        market_data=_build_market_data(),
        logger=MagicMock(),
    )

    sheet = use_case.execute(
        as_of=date(2024, 1, 15),
        display_currency="USD",
    )

    assert sheet.currency_code == "USD"
    assert sheet.current_assets.cash_and_bank == Decimal("2500")
    assert sheet.total_liabilities == Decimal("625")
    assert sheet.net_worth == Decimal("7250")
