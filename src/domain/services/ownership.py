"""Ownership share resolution for multi-party records."""

from collections.abc import Sequence
from decimal import Decimal
from logging import Logger

from src.domain.models.ownership import (
    AllocationEntry,
    Ownership,
    SharedOwnership,
    SingleOwner,
)
from src.utils.decimal_utils import coerce_decimal

_ONE = Decimal("1")
_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def share_for(
    ownership: Ownership | Sequence[AllocationEntry] | None,
    party_id: str | None,
    logger: Logger | None = None,
) -> Decimal:
    """Return the fraction of a record attributable to ``party_id``.

    Args:
        ownership: Tagged ownership, a bare allocation list, or None.
        party_id: Party whose share is requested.
        logger: Optional logger told about parties missing from the list.

    Returns:
        Decimal: Share in [0, 1]. Records without an allocation list are
        fully attributed; a party missing from the list gets 0.
    """
    if ownership is None or isinstance(ownership, SingleOwner):
        return _ONE
    if isinstance(ownership, SharedOwnership):
        allocations = ownership.allocations
    else:
        allocations = tuple(ownership)
    if not allocations:
        return _ONE
    for entry in allocations:
        if entry.party_id == party_id:
            share = coerce_decimal(entry.percentage) / _HUNDRED
            return min(max(share, _ZERO), _ONE)
    if logger is not None:
        logger.debug(f"Party {party_id} not in allocation, share is 0")
    return _ZERO


def parse_ownership(
    entity_id: str | None,
    raw_allocation,
) -> Ownership:
    """Build tagged ownership from a stored JSON allocation list.

    Args:
        entity_id: Direct owner reference of the record.
        raw_allocation: List of dicts with ``entity_id`` (or ``party_id``)
            and ``percentage`` keys, or None.

    Returns:
        Ownership: SharedOwnership when entries exist, else SingleOwner.
    """
    if not raw_allocation:
        return SingleOwner(entity_id=entity_id)
    entries: list[AllocationEntry] = []
    for item in raw_allocation:
        if not isinstance(item, dict):
            continue
        party_id = item.get("entity_id") or item.get("party_id")
        if not party_id:
            continue
        entries.append(
            AllocationEntry(
                party_id=str(party_id),
                percentage=coerce_decimal(item.get("percentage")),
            )
        )
    if not entries:
        return SingleOwner(entity_id=entity_id)
    return SharedOwnership(allocations=tuple(entries))


def allocation_total(ownership: Ownership | None) -> Decimal:
    """Return the recorded percentage total of an allocation.

    Single ownership counts as 100.
    """
    if not isinstance(ownership, SharedOwnership) or not ownership.allocations:
        return _HUNDRED
    return sum(
        (coerce_decimal(entry.percentage) for entry in ownership.allocations),
        _ZERO,
    )


__all__ = ["share_for", "parse_ownership", "allocation_total"]
