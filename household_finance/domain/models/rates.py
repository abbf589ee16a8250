"""Domain models for currency rates."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class CurrencyRate:
    """Multiplicative rate for an ordered currency pair.

    Attributes:
        from_currency: Source currency code.
        to_currency: Target currency code.
        rate: Units of target currency per unit of source currency.
    """

    from_currency: str
    to_currency: str
    rate: Decimal


__all__ = ["CurrencyRate"]
