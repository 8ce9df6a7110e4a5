"""SQLAlchemy repository for the user's financial records."""

import json
from datetime import date, datetime

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.records_repository import RecordsRepositoryPort
from src.domain.models import (
    AssetRecord,
    CollectionRecord,
    LiabilityRecord,
    Ownership,
    ReceivableRecord,
)
from src.domain.services.normalization import (
    normalize_currency_code,
    normalize_ticker,
)
from src.domain.services.ownership import parse_ownership
from src.domain.services.validation import (
    validate_allocation_total,
    validate_amount_sign,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class SqlAlchemyRecordsRepository(RecordsRepositoryPort):
    """Repository reading assets, collections, liabilities and receivables."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the wealth engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_assets(self) -> list[AssetRecord]:
        query = text(
            """
            SELECT id, name, type, currency, current_value, entity_id,
                   certainty, ticker, quantity, ownership_allocation,
                   rental_income, country
            FROM assets
            ORDER BY name, id
            """
        )
        records = []
        for row in self._fetch_rows(query):
            ownership = self._ownership(row)
            record = AssetRecord(
                id=str(row.id),
                name=row.name,
                asset_type=row.type,
                currency=self._currency(row.currency),
                current_value=coerce_decimal(row.current_value),
                entity_id=self._optional_id(row.entity_id),
                certainty=row.certainty,
                ticker=normalize_ticker(row.ticker),
                quantity=(
                    coerce_decimal(row.quantity)
                    if row.quantity is not None
                    else None
                ),
                ownership=ownership,
                rental_income=(
                    coerce_decimal(row.rental_income)
                    if row.rental_income is not None
                    else None
                ),
                country=row.country,
            )
            validate_amount_sign(
                "asset", record.id, record.current_value, self._logger
            )
            records.append(record)
        return records

    def fetch_collections(self) -> list[CollectionRecord]:
        query = text(
            """
            SELECT id, name, type, currency, current_value, entity_id,
                   certainty, ownership_allocation
            FROM collections
            ORDER BY name, id
            """
        )
        records = []
        for row in self._fetch_rows(query):
            record = CollectionRecord(
                id=str(row.id),
                name=row.name,
                collection_type=row.type,
                currency=self._currency(row.currency),
                current_value=coerce_decimal(row.current_value),
                entity_id=self._optional_id(row.entity_id),
                certainty=row.certainty,
                ownership=self._ownership(row),
            )
            validate_amount_sign(
                "collection", record.id, record.current_value, self._logger
            )
            records.append(record)
        return records

    def fetch_liabilities(self) -> list[LiabilityRecord]:
        query = text(
            """
            SELECT id, name, type, currency, current_balance, entity_id,
                   certainty, start_date, end_date, interest_rate,
                   monthly_payment, original_amount, linked_asset_id
            FROM liabilities
            ORDER BY name, id
            """
        )
        records = []
        for row in self._fetch_rows(query):
            record = LiabilityRecord(
                id=str(row.id),
                name=row.name,
                liability_type=row.type,
                currency=self._currency(row.currency),
                current_balance=coerce_decimal(row.current_balance),
                entity_id=self._optional_id(row.entity_id),
                certainty=row.certainty,
                start_date=self._coerce_date(row.start_date),
                end_date=self._coerce_date(row.end_date),
                interest_rate=(
                    coerce_decimal(row.interest_rate)
                    if row.interest_rate is not None
                    else None
                ),
                monthly_payment=(
                    coerce_decimal(row.monthly_payment)
                    if row.monthly_payment is not None
                    else None
                ),
                original_amount=(
                    coerce_decimal(row.original_amount)
                    if row.original_amount is not None
                    else None
                ),
                linked_asset_id=self._optional_id(row.linked_asset_id),
            )
            validate_amount_sign(
                "liability", record.id, record.current_balance, self._logger
            )
            records.append(record)
        return records

    def fetch_receivables(self) -> list[ReceivableRecord]:
        query = text(
            """
            SELECT id, name, currency, current_balance, entity_id,
                   certainty, due_date
            FROM receivables
            ORDER BY name, id
            """
        )
        records = []
        for row in self._fetch_rows(query):
            record = ReceivableRecord(
                id=str(row.id),
                name=row.name,
                currency=self._currency(row.currency),
                current_balance=coerce_decimal(row.current_balance),
                entity_id=self._optional_id(row.entity_id),
                certainty=row.certainty,
                due_date=self._coerce_date(row.due_date),
            )
            validate_amount_sign(
                "receivable", record.id, record.current_balance, self._logger
            )
            records.append(record)
        return records

    def _fetch_rows(self, query) -> list:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            return conn.execute(query).all()

    def _ownership(self, row) -> Ownership:
        raw = row.ownership_allocation
        if isinstance(raw, str):
            try:
                raw = json.loads(raw)
            except json.JSONDecodeError:
                self._logger.warning(
                    f"Invalid ownership_allocation for id={row.id}, "
                    "treating as single owner"
                )
                raw = None
        ownership = parse_ownership(self._optional_id(row.entity_id), raw)
        validate_allocation_total(str(row.id), ownership, self._logger)
        return ownership

    @staticmethod
    def _currency(value: str | None) -> str:
        return normalize_currency_code(value) or ""

    @staticmethod
    def _optional_id(value) -> str | None:
        return str(value) if value is not None else None

    @staticmethod
    def _coerce_date(value) -> date | None:
        """Normalize SQL date values.

        Args:
            value: date, datetime, ISO string or None.

        Returns:
            date | None: Calendar date.
        """
        if value is None:
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        return date.fromisoformat(str(value)[:10])


__all__ = ["SqlAlchemyRecordsRepository"]
