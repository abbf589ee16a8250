"""Policies about supported currency codes."""

from household_finance.domain.constants import CURRENCIES


def is_known_currency(currency: str | None) -> bool:
    """Return True when the currency code has display metadata.

    Args:
        currency: Currency code to check.

    Returns:
        bool: Whether the code is part of the configured currency set.
    """
    if not currency:
        return False
    return currency.strip().upper() in CURRENCIES


__all__ = ["is_known_currency"]
