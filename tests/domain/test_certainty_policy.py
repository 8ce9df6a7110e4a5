"""Tests for certainty defaults and filter modes."""

import pytest

from src.domain.policies.certainty import (
    passes_certainty_filter,
    resolve_certainty,
)


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        ("asset", "certain"),
        ("collection", "probable"),
        ("receivable", "contractual"),
        ("liability", "certain"),
    ],
)
def test_resolve_certainty_uses_kind_default(kind, expected) -> None:
    assert resolve_certainty(kind, None) == expected
    assert resolve_certainty(kind, "") == expected


def test_resolve_certainty_keeps_explicit_value() -> None:
    assert resolve_certainty("collection", "certain") == "certain"


def test_confirmed_keeps_certain_and_contractual_only() -> None:
    assert passes_certainty_filter("certain", "confirmed")
    assert passes_certainty_filter("contractual", "confirmed")
    assert not passes_certainty_filter("probable", "confirmed")
    assert not passes_certainty_filter("optional", "confirmed")


def test_exclude_optional_drops_only_optional() -> None:
    assert passes_certainty_filter("probable", "exclude_optional")
    assert not passes_certainty_filter("optional", "exclude_optional")


def test_all_keeps_everything() -> None:
    for level in ("certain", "contractual", "probable", "optional"):
        assert passes_certainty_filter(level, "all")
