"""Port for reading the user's financial records."""

from typing import Protocol

from src.domain.models import (
    AssetRecord,
    CollectionRecord,
    LiabilityRecord,
    ReceivableRecord,
)


class RecordsRepositoryPort(Protocol):
    """Port exposing the records the balance sheet is built from."""

    def fetch_assets(self) -> list[AssetRecord]:
        """Return every asset record."""

    def fetch_collections(self) -> list[CollectionRecord]:
        """Return every collection record."""

    def fetch_liabilities(self) -> list[LiabilityRecord]:
        """Return every liability record."""

    def fetch_receivables(self) -> list[ReceivableRecord]:
        """Return every receivable record."""


__all__ = ["RecordsRepositoryPort"]
