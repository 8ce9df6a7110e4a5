"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional

from src.domain.constants import REFERENCE_CURRENCY
from src.domain.services.normalization import normalize_currency_code
from src.infrastructure.logging.logger import get_app_logger

DEFAULT_RATES_TTL_SECONDS = 3600
DEFAULT_CRYPTO_TTL_SECONDS = 300


@dataclass(frozen=True)
class WealthSettings:
    """Runtime settings for the wealth dashboard.

    Attributes:
        reference_currency: Currency every amount is normalized to.
        display_currency: Currency used when rendering amounts.
        viewer_entity_id: Party whose ownership share is applied, None for
            the consolidated view.
        rates_ttl_seconds: Cache lifetime of exchange rates.
        crypto_ttl_seconds: Cache lifetime of crypto prices.
    """

    reference_currency: str = REFERENCE_CURRENCY
    display_currency: str = REFERENCE_CURRENCY
    viewer_entity_id: Optional[str] = None
    rates_ttl_seconds: int = DEFAULT_RATES_TTL_SECONDS
    crypto_ttl_seconds: int = DEFAULT_CRYPTO_TTL_SECONDS

    @classmethod
    def from_env(cls) -> "WealthSettings":
        """Build settings from environment variables.

        Returns:
            WealthSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        reference = (
            normalize_currency_code(os.getenv("WEALTH_REFERENCE_CURRENCY"))
            or REFERENCE_CURRENCY
        )
        display = (
            normalize_currency_code(os.getenv("WEALTH_DISPLAY_CURRENCY"))
            or reference
        )
        viewer = (os.getenv("WEALTH_VIEWER_ENTITY_ID") or "").strip() or None
        return cls(
            reference_currency=reference,
            display_currency=display,
            viewer_entity_id=viewer,
            rates_ttl_seconds=cls._read_seconds(
                "WEALTH_RATES_TTL_SECONDS",
                DEFAULT_RATES_TTL_SECONDS,
                logger=logger,
            ),
            crypto_ttl_seconds=cls._read_seconds(
                "WEALTH_CRYPTO_TTL_SECONDS",
                DEFAULT_CRYPTO_TTL_SECONDS,
                logger=logger,
            ),
        )

    @staticmethod
    def _read_seconds(name: str, default: int, logger) -> int:
        """Read a non-negative integer, falling back to ``default``.

        Args:
            name: Environment variable name.
            default: Value used when unset or invalid.
            logger: Logger used for warnings.

        Returns:
            int: Parsed number of seconds.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError:
            logger.warning(f"Invalid {name}={raw!r}, using {default}")
            return default
        if value < 0:
            logger.warning(f"Negative {name}={raw!r}, using {default}")
            return default
        return value


__all__ = ["WealthSettings"]
