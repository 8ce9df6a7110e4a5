"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger

from src.domain.models.ownership import Ownership
from src.domain.services.ownership import allocation_total

_FULL_ALLOCATION = Decimal("100")


def validate_amount_sign(
    record_kind: str,
    record_id: str,
    amount: Decimal,
    logger: Logger,
) -> None:
    """Warn when a stored balance is negative.

    Signs are applied by category, so records are expected to carry
    non-negative amounts.

    Args:
        record_kind: asset, collection, liability or receivable.
        record_id: Identifier used in the warning.
        amount: Stored amount.
        logger: Logger used for warnings.
    """
    if amount < 0:
        logger.warning(
            f"Negative {record_kind} amount for id={record_id}: {amount}"
        )


def validate_allocation_total(
    record_id: str,
    ownership: Ownership | None,
    logger: Logger,
) -> None:
    """Warn when a shared allocation does not add up to 100 percent.

    The allocation is left untouched; partial allocations are legitimate
    when only some parties are tracked.

    Args:
        record_id: Identifier used in the warning.
        ownership: Ownership attached to the record.
        logger: Logger used for warnings.
    """
    total = allocation_total(ownership)
    if total != _FULL_ALLOCATION:
        logger.warning(
            f"Ownership allocation for id={record_id} sums to {total}%"
        )


__all__ = ["validate_amount_sign", "validate_allocation_total"]
