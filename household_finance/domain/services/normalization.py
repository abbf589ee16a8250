"""Domain normalization helpers."""

from household_finance.domain.constants import DEFAULT_CURRENCY


def normalize_currency_code(currency: str | None) -> str:
    """Normalize a record currency code.

    Args:
        currency: Raw currency value from a repository row.

    Returns:
        str: Upper-case code, or DEFAULT_CURRENCY when absent.
    """
    if not currency:
        return DEFAULT_CURRENCY
    cleaned = currency.strip()
    return cleaned.upper() if cleaned else DEFAULT_CURRENCY


def normalize_frequency(frequency: str | None) -> str | None:
    """Normalize billing cycle and payout frequency labels.

    Args:
        frequency: Raw frequency value from a repository row.

    Returns:
        str | None: Lower-case label, or None when absent.
    """
    if not frequency:
        return None
    cleaned = frequency.strip()
    return cleaned.lower() if cleaned else None


__all__ = ["normalize_currency_code", "normalize_frequency"]
