"""Currency conversion into a household reporting currency."""

from collections.abc import Callable
from decimal import Decimal
from logging import Logger

from household_finance.domain.models.rates import CurrencyRate
from household_finance.domain.services.normalization import (
    normalize_currency_code,
)

RateLookup = Callable[[str, str], CurrencyRate | None]


def convert_amount(amount: Decimal, rate: Decimal) -> Decimal:
    """Convert an amount with a multiplicative rate.

    No rounding is applied and the currency is not validated.

    Args:
        amount: Amount in the source currency.
        rate: Units of target currency per unit of source currency.

    Returns:
        Decimal: Converted amount.
    """
    return amount * rate


class CurrencyConverter:
    """Convert record amounts into a single target currency.

    Rates are looked up lazily per ordered currency pair and remembered for
    the lifetime of the converter, misses included. When no rate exists the
    amount is returned unconverted.
    """

    def __init__(
        self,
        target_currency: str,
        lookup_rate: RateLookup,
        logger: Logger,
    ) -> None:
        """Initialize the converter.

        Args:
            target_currency: Reporting currency code.
            lookup_rate: Callable returning the rate for (from, to) or None.
            logger: Logger used for missing-rate warnings.
        """
        self._target_currency = normalize_currency_code(target_currency)
        self._lookup_rate = lookup_rate
        self._logger = logger
        self._rates: dict[str, Decimal | None] = {}

    @property
    def target_currency(self) -> str:
        return self._target_currency

    def resolve_rate(self, currency: str | None) -> Decimal | None:
        """Return the rate from currency into the target currency.

        Args:
            currency: Record currency code; None means the default currency.

        Returns:
            Decimal | None: Rate, exactly 1 for the target currency, or None
            when the provider has no rate for the pair.
        """
        source = normalize_currency_code(currency)
        if source == self._target_currency:
            return Decimal("1")
        if source not in self._rates:
            found = self._lookup_rate(source, self._target_currency)
            if found is None:
                self._logger.warning(
                    f"Missing FX rate for {source} to {self._target_currency}"
                )
                self._rates[source] = None
            else:
                self._rates[source] = found.rate
        return self._rates[source]

    def convert(self, amount: Decimal, currency: str | None) -> Decimal:
        """Convert an amount from currency into the target currency.

        Args:
            amount: Amount in the record currency.
            currency: Record currency code.

        Returns:
            Decimal: Converted amount, or the raw amount when no rate exists.
        """
        source = normalize_currency_code(currency)
        if source == self._target_currency:
            return amount
        rate = self.resolve_rate(source)
        if rate is None:
            return amount
        return convert_amount(amount, rate)


__all__ = ["CurrencyConverter", "RateLookup", "convert_amount"]
