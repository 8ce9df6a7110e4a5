"""Domain policies package."""

from .certainty import (
    passes_certainty_filter,
    resolve_certainty,
)

__all__ = [
    "passes_certainty_filter",
    "resolve_certainty",
]
