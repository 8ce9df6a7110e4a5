"""Port for persisting net worth history."""

from datetime import date
from typing import Protocol

from src.domain.models import NetWorthSnapshot


class NetWorthSnapshotRepositoryPort(Protocol):
    """Port storing one net worth snapshot per day."""

    def save_snapshot(self, snapshot: NetWorthSnapshot) -> None:
        """Insert or replace the snapshot for its snapshot_date."""

    def fetch_snapshots(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[NetWorthSnapshot]:
        """Return snapshots ordered by snapshot_date ascending."""


__all__ = ["NetWorthSnapshotRepositoryPort"]
