"""Port for currency rate lookups."""

from typing import Protocol

from household_finance.domain.models import CurrencyRate


class CurrencyRateProviderPort(Protocol):
    """Port exposing conversion rates for ordered currency pairs.

    Rates are not assumed symmetric: callers request the inverse pair
    explicitly. A missing rate is an expected outcome, not an error.
    """

    def get_rate(
        self,
        from_currency: str,
        to_currency: str,
    ) -> CurrencyRate | None:
        """Return the rate for the ordered pair, or None when unknown."""

    def list_rates(self) -> list[CurrencyRate]:
        """Return every stored rate ordered by pair."""


__all__ = ["CurrencyRateProviderPort"]
