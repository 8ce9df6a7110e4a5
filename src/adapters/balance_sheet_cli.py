"""CLI adapter printing the balance sheet statement."""

from datetime import date
import os

from src.application.use_cases.get_balance_sheet import GetBalanceSheetUseCase
from src.domain.models import BalanceSheetSnapshot
from src.domain.services.metrics import percentage_of
from src.infrastructure.container import (
    build_database_adapter,
    build_market_data,
    build_records_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def format_statement(sheet: BalanceSheetSnapshot) -> list[str]:
    """Render the balance sheet as aligned text lines.

    Args:
        sheet: Computed balance sheet.

    Returns:
        list[str]: Statement lines with percentage of the section total.
    """
    total_assets = sheet.total_assets
    total_liabilities = sheet.total_liabilities
    currency = sheet.currency_code

    def line(label: str, amount, total) -> str:
        pct = percentage_of(amount, total)
        return f"  {label:<28}{amount:>16,.2f} {currency}  {pct:>6.1f}%"

    current = sheet.current_assets
    non_current = sheet.non_current_assets
    current_liab = sheet.current_liabilities
    non_current_liab = sheet.non_current_liabilities
    return [
        f"Balance sheet as of {sheet.as_of.isoformat()}",
        "ASSETS",
        line("Cash and bank", current.cash_and_bank, total_assets),
        line("Digital assets", current.digital_assets, total_assets),
        line(
            "Short-term receivables",
            current.short_term_receivables,
            total_assets,
        ),
        line("Current assets", current.total, total_assets),
        line("Real estate", non_current.real_estate, total_assets),
        line("Vehicles", non_current.vehicles, total_assets),
        line("Collections", non_current.collections, total_assets),
        line("Investments", non_current.investments, total_assets),
        line(
            "Long-term receivables",
            non_current.long_term_receivables,
            total_assets,
        ),
        line("Non-current assets", non_current.total, total_assets),
        line("Total assets", total_assets, total_assets),
        "LIABILITIES",
        line("Credit cards", current_liab.credit_cards, total_liabilities),
        line(
            "Short-term loans",
            current_liab.short_term_loans,
            total_liabilities,
        ),
        line("Current liabilities", current_liab.total, total_liabilities),
        line("Mortgages", non_current_liab.mortgages, total_liabilities),
        line(
            "Long-term loans",
            non_current_liab.long_term_loans,
            total_liabilities,
        ),
        line(
            "Non-current liabilities",
            non_current_liab.total,
            total_liabilities,
        ),
        line("Total liabilities", total_liabilities, total_liabilities),
        f"NET WORTH {sheet.net_worth:,.2f} {currency}",
    ]


def main() -> None:
    """Compute and print the balance sheet."""
    logger = get_app_logger()
    settings = build_settings()
    as_of = _parse_date(os.getenv("BALANCE_SHEET_AS_OF"), logger)
    entity_filter = os.getenv("BALANCE_SHEET_ENTITY") or None
    certainty_filter = os.getenv("BALANCE_SHEET_CERTAINTY", "all")

    try:
        db_adapter = build_database_adapter()
        use_case = GetBalanceSheetUseCase(
            records_repository=build_records_repository(db_adapter),
            market_data=build_market_data(db_adapter, settings),
            logger=logger,
            reference_currency=settings.reference_currency,
        )
        sheet = use_case.execute(
            entity_filter=entity_filter,
            certainty_filter=certainty_filter,
            viewer_party_id=settings.viewer_entity_id,
            as_of=as_of,
            display_currency=settings.display_currency,
        )
    except (RuntimeError, ValueError) as exc:
        logger.error(str(exc))
        return

    for text_line in format_statement(sheet):
        print(text_line)


if __name__ == "__main__":  # pragma: no cover
    main()
