"""Tests for ownership share resolution."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models import AllocationEntry, SharedOwnership, SingleOwner
from src.domain.services.ownership import (
    allocation_total,
    parse_ownership,
    share_for,
)


def _shared(*entries: tuple[str, str]) -> SharedOwnership:
    return SharedOwnership(
        allocations=tuple(
            AllocationEntry(party_id=party, percentage=Decimal(pct))
            for party, pct in entries
        )
    )


def test_share_for_defaults_to_full_share() -> None:
    """Records without an allocation list belong fully to the viewer."""
    assert share_for(None, "p1") == Decimal("1")
    assert share_for(SingleOwner(entity_id="e1"), "p1") == Decimal("1")
    assert share_for(SharedOwnership(), "p1") == Decimal("1")
    assert share_for([], "p1") == Decimal("1")


def test_share_for_returns_matching_percentage() -> None:
    ownership = _shared(("p1", "60"), ("p2", "40"))

    assert share_for(ownership, "p1") == Decimal("0.6")
    assert share_for(ownership, "p2") == Decimal("0.4")


def test_share_for_unlisted_party_gets_nothing() -> None:
    ownership = _shared(("p1", "60"), ("p2", "40"))

    assert share_for(ownership, "p3") == Decimal("0")


def test_share_for_logs_unlisted_party() -> None:
    logger = MagicMock()
    ownership = _shared(("p1", "100"))

    assert share_for(ownership, "p2", logger) == Decimal("0")
    logger.debug.assert_called_once()
    assert share_for(ownership, "p1", logger) == Decimal("1")
    assert logger.debug.call_count == 1


def test_share_for_clamps_out_of_range_percentages() -> None:
    ownership = _shared(("p1", "150"), ("p2", "-10"))

    assert share_for(ownership, "p1") == Decimal("1")
    assert share_for(ownership, "p2") == Decimal("0")


def test_share_for_accepts_bare_allocation_lists() -> None:
    entries = [AllocationEntry(party_id="p1", percentage=Decimal("25"))]

    assert share_for(entries, "p1") == Decimal("0.25")


def test_parse_ownership_builds_shared_allocation() -> None:
    ownership = parse_ownership(
        "e1",
        [
            {"entity_id": "p1", "percentage": 70},
            {"party_id": "p2", "percentage": "30"},
        ],
    )

    assert ownership == _shared(("p1", "70"), ("p2", "30"))


def test_parse_ownership_falls_back_to_single_owner() -> None:
    assert parse_ownership("e1", None) == SingleOwner(entity_id="e1")
    assert parse_ownership("e1", []) == SingleOwner(entity_id="e1")
    assert parse_ownership("e1", [{"percentage": 50}, "junk"]) == (
        SingleOwner(entity_id="e1")
    )


def test_allocation_total_sums_recorded_percentages() -> None:
    """Totals are reported as recorded, never normalized."""
    assert allocation_total(_shared(("p1", "60"), ("p2", "30"))) == Decimal(
        "90"
    )
    assert allocation_total(SingleOwner()) == Decimal("100")
