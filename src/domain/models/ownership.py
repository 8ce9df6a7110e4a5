"""Domain models describing who owns a record."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class AllocationEntry:
    """Share of a record recorded for one party.

    Attributes:
        party_id: Identifier of the owning entity.
        percentage: Recorded share in percent (not required to sum to 100).
    """

    party_id: str
    percentage: Decimal


@dataclass(frozen=True)
class SingleOwner:
    """Record attributed entirely through its direct owner reference."""

    entity_id: str | None = None


@dataclass(frozen=True)
class SharedOwnership:
    """Record split between several parties by an allocation list."""

    allocations: tuple[AllocationEntry, ...] = ()


Ownership = SingleOwner | SharedOwnership


__all__ = [
    "AllocationEntry",
    "SingleOwner",
    "SharedOwnership",
    "Ownership",
]
