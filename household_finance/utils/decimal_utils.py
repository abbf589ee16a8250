"""Helpers for Decimal normalization of repository values."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Missing values (None or empty strings) become zero, which is how the
    aggregation treats absent optional amounts.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None or value == "":
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def coerce_optional_decimal(value) -> Decimal | None:
    """Normalize nullable numeric values, keeping None for missing data.

    Args:
        value: Raw numeric value from SQL, JSON metadata, or adapters.

    Returns:
        Decimal | None: Decimal value, or None when absent or unparseable.
    """
    if value is None or value == "":
        return None
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None


__all__ = ["coerce_decimal", "coerce_optional_decimal"]
