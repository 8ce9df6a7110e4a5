"""Certainty level defaults and filtering."""

from src.domain.constants import (
    CONFIRMED_CERTAINTY_LEVELS,
    DEFAULT_CERTAINTY_BY_KIND,
)


def resolve_certainty(record_kind: str, certainty: str | None) -> str:
    """Return the record's certainty or the default for its kind.

    Args:
        record_kind: asset, collection, receivable or liability.
        certainty: Raw certainty stored on the record.

    Returns:
        str: Effective certainty level.
    """
    if certainty:
        return certainty
    return DEFAULT_CERTAINTY_BY_KIND.get(record_kind, "certain")


def passes_certainty_filter(certainty: str, mode: str) -> bool:
    """Return True when a certainty level is kept by the filter mode.

    ``exclude_optional`` drops only the literal ``optional`` level.
    Unknown modes keep everything.
    """
    if mode == "confirmed":
        return certainty in CONFIRMED_CERTAINTY_LEVELS
    if mode == "exclude_optional":
        return certainty != "optional"
    return True


__all__ = [
    "resolve_certainty",
    "passes_certainty_filter",
]
