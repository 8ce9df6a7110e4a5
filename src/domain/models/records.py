"""Domain models for the monetary records tracked by the dashboard."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from .ownership import Ownership


@dataclass(frozen=True)
class AssetRecord:
    """Asset line such as a bank account, property or crypto holding.

    Attributes:
        id: Record identifier.
        name: Display name.
        asset_type: One of bank, crypto, real-estate, investment, business.
        currency: ISO-4217 code of ``current_value``.
        current_value: Manually stored value (quantity for crypto holdings
            without a separate quantity).
        entity_id: Direct owner reference.
        certainty: Raw certainty level, None when unset.
        ticker: Crypto ticker symbol, if any.
        quantity: Units held for crypto holdings.
        ownership: Tagged ownership structure.
        rental_income: Monthly rental income for real estate.
        country: Country of the asset.
    """

    id: str
    name: str
    asset_type: str
    currency: str
    current_value: Decimal
    entity_id: str | None = None
    certainty: str | None = None
    ticker: str | None = None
    quantity: Decimal | None = None
    ownership: Ownership | None = None
    rental_income: Decimal | None = None
    country: str | None = None


@dataclass(frozen=True)
class CollectionRecord:
    """Collectible or vehicle tracked at an estimated value."""

    id: str
    name: str
    collection_type: str
    currency: str
    current_value: Decimal
    entity_id: str | None = None
    certainty: str | None = None
    ownership: Ownership | None = None


@dataclass(frozen=True)
class LiabilityRecord:
    """Debt line such as a mortgage, loan or credit card."""

    id: str
    name: str
    liability_type: str
    currency: str
    current_balance: Decimal
    entity_id: str | None = None
    certainty: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    interest_rate: Decimal | None = None
    monthly_payment: Decimal | None = None
    original_amount: Decimal | None = None
    linked_asset_id: str | None = None


@dataclass(frozen=True)
class ReceivableRecord:
    """Amount owed to the user."""

    id: str
    name: str
    currency: str
    current_balance: Decimal
    entity_id: str | None = None
    certainty: str | None = None
    due_date: date | None = None


__all__ = [
    "AssetRecord",
    "CollectionRecord",
    "LiabilityRecord",
    "ReceivableRecord",
]
