"""Domain normalization helpers."""


def normalize_currency_code(currency: str | None) -> str | None:
    """Normalize ISO-4217 currency codes.

    Args:
        currency: Raw currency value from a repository or caller.

    Returns:
        str | None: Upper-cased code, None when blank.
    """
    if not currency:
        return None
    cleaned = currency.strip()
    return cleaned.upper() if cleaned else None


def normalize_ticker(ticker: str | None) -> str | None:
    """Normalize crypto ticker symbols.

    Args:
        ticker: Raw ticker value from a repository.

    Returns:
        str | None: Upper-cased ticker, None when blank.
    """
    if not ticker:
        return None
    cleaned = ticker.strip()
    return cleaned.upper() if cleaned else None


__all__ = ["normalize_currency_code", "normalize_ticker"]
