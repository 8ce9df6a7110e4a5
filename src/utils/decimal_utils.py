"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, JSON payloads or callers.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_cents(value: Decimal) -> Decimal:
    """Round a monetary amount to cents, half away from zero."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


__all__ = ["CENT", "coerce_decimal", "round_cents"]
