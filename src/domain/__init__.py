"""Domain package for wealth aggregation rules and core models."""

from .constants import (
    CERTAINTY_FILTERS,
    CERTAINTY_LEVELS,
    DEFAULT_CERTAINTY_BY_KIND,
    REFERENCE_CURRENCY,
)
from .models import (
    AmortizationEntry,
    AssetRecord,
    BalanceSheetSnapshot,
    CollectionRecord,
    LiabilityRecord,
    ReceivableRecord,
)
from .policies import passes_certainty_filter, resolve_certainty
from .services import (
    compute_balance_sheet,
    from_reference,
    generate_schedule,
    monthly_payment,
    share_for,
    to_reference,
)

__all__ = [
    "CERTAINTY_FILTERS",
    "CERTAINTY_LEVELS",
    "DEFAULT_CERTAINTY_BY_KIND",
    "REFERENCE_CURRENCY",
    "AmortizationEntry",
    "AssetRecord",
    "BalanceSheetSnapshot",
    "CollectionRecord",
    "LiabilityRecord",
    "ReceivableRecord",
    "passes_certainty_filter",
    "resolve_certainty",
    "compute_balance_sheet",
    "from_reference",
    "generate_schedule",
    "monthly_payment",
    "share_for",
    "to_reference",
]
