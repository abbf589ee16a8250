"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger


def validate_amount_sign(
    category: str,
    amount: Decimal,
    logger: Logger,
) -> None:
    """Warn when a record amount is negative.

    Negative amounts are still aggregated as-is.

    Args:
        category: Record category the amount belongs to.
        amount: Raw amount from the record.
        logger: Logger used for warnings.
    """
    if amount < 0:
        logger.warning(
            f"Negative amount in category={category}: {amount}"
        )


__all__ = ["validate_amount_sign"]
