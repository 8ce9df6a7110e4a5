"""SQLAlchemy persistence for net worth history."""

from datetime import date, datetime
from decimal import Decimal
import json

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.snapshot_repository import (
    NetWorthSnapshotRepositoryPort,
)
from src.domain.models import NetWorthSnapshot
from src.utils.decimal_utils import coerce_decimal


CREATE_SNAPSHOTS_SQL = """
CREATE TABLE IF NOT EXISTS net_worth_snapshots (
    snapshot_date DATE PRIMARY KEY,
    total_assets NUMERIC NOT NULL,
    total_collections NUMERIC NOT NULL,
    total_liabilities NUMERIC NOT NULL,
    net_worth NUMERIC NOT NULL,
    currency_code TEXT NOT NULL,
    breakdown_by_type TEXT,
    breakdown_by_currency TEXT,
    exchange_rates TEXT
)
"""

DELETE_SNAPSHOT_SQL = text(
    """
    DELETE FROM net_worth_snapshots
    WHERE snapshot_date = :snapshot_date
    """
)

INSERT_SNAPSHOT_SQL = text(
    """
    INSERT INTO net_worth_snapshots (
        snapshot_date,
        total_assets,
        total_collections,
        total_liabilities,
        net_worth,
        currency_code,
        breakdown_by_type,
        breakdown_by_currency,
        exchange_rates
    )
    VALUES (
        :snapshot_date,
        :total_assets,
        :total_collections,
        :total_liabilities,
        :net_worth,
        :currency_code,
        :breakdown_by_type,
        :breakdown_by_currency,
        :exchange_rates
    )
    """
)

SELECT_SNAPSHOTS_SQL = """
SELECT snapshot_date,
       total_assets,
       total_collections,
       total_liabilities,
       net_worth,
       currency_code,
       breakdown_by_type,
       breakdown_by_currency,
       exchange_rates
FROM net_worth_snapshots
WHERE 1=1
"""


def _dump_amounts(amounts: dict[str, Decimal]) -> str:
    return json.dumps({key: str(value) for key, value in amounts.items()})


def _load_amounts(raw) -> dict[str, Decimal]:
    if not raw:
        return {}
    if isinstance(raw, str):
        raw = json.loads(raw)
    return {key: coerce_decimal(value) for key, value in raw.items()}


class SqlAlchemyNetWorthSnapshotRepository(NetWorthSnapshotRepositoryPort):
    """Snapshot store keeping one row per snapshot date."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the wealth engine.
        """
        self._db_port = db_port

    def prepare(self) -> None:
        """Ensure the snapshot table exists."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_SNAPSHOTS_SQL)

    def save_snapshot(self, snapshot: NetWorthSnapshot) -> None:
        """Replace the stored snapshot for ``snapshot.snapshot_date``.

        Args:
            snapshot: Snapshot to store.
        """
        payload = {
            "snapshot_date": snapshot.snapshot_date,
            "total_assets": snapshot.total_assets,
            "total_collections": snapshot.total_collections,
            "total_liabilities": snapshot.total_liabilities,
            "net_worth": snapshot.net_worth,
            "currency_code": snapshot.currency_code,
            "breakdown_by_type": _dump_amounts(snapshot.breakdown_by_type),
            "breakdown_by_currency": _dump_amounts(
                snapshot.breakdown_by_currency
            ),
            "exchange_rates": _dump_amounts(snapshot.exchange_rates),
        }
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                DELETE_SNAPSHOT_SQL,
                {"snapshot_date": snapshot.snapshot_date},
            )
            conn.execute(INSERT_SNAPSHOT_SQL, payload)

    def fetch_snapshots(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[NetWorthSnapshot]:
        """Return snapshots within the optional date bounds, oldest first."""
        sql = SELECT_SNAPSHOTS_SQL
        params: dict[str, date] = {}
        if start_date:
            sql += " AND snapshot_date >= :start_date"
            params["start_date"] = start_date
        if end_date:
            sql += " AND snapshot_date <= :end_date"
            params["end_date"] = end_date
        sql += " ORDER BY snapshot_date"
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(text(sql), params).all()
        return [
            NetWorthSnapshot(
                snapshot_date=self._coerce_date(row.snapshot_date),
                total_assets=coerce_decimal(row.total_assets),
                total_collections=coerce_decimal(row.total_collections),
                total_liabilities=coerce_decimal(row.total_liabilities),
                net_worth=coerce_decimal(row.net_worth),
                currency_code=row.currency_code,
                breakdown_by_type=_load_amounts(row.breakdown_by_type),
                breakdown_by_currency=_load_amounts(row.breakdown_by_currency),
                exchange_rates=_load_amounts(row.exchange_rates),
            )
            for row in rows
        ]

    @staticmethod
    def _coerce_date(value) -> date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        return date.fromisoformat(str(value)[:10])


__all__ = [
    "SqlAlchemyNetWorthSnapshotRepository",
    "CREATE_SNAPSHOTS_SQL",
    "DELETE_SNAPSHOT_SQL",
    "INSERT_SNAPSHOT_SQL",
]
