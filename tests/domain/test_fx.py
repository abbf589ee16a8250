"""Tests for currency conversion helpers."""

from decimal import Decimal
from unittest.mock import MagicMock

from household_finance.domain.models import CurrencyRate
from household_finance.domain.services.fx import (
    CurrencyConverter,
    convert_amount,
)


def _rates(table: dict[tuple[str, str], str]):
    calls: list[tuple[str, str]] = []

    def lookup(from_currency: str, to_currency: str):
        calls.append((from_currency, to_currency))
        rate = table.get((from_currency, to_currency))
        if rate is None:
            return None
        return CurrencyRate(from_currency, to_currency, Decimal(rate))

    return lookup, calls


def test_convert_amount_multiplies_without_rounding() -> None:
    """Conversion is a plain multiplication, negatives included."""
    assert convert_amount(Decimal("100"), Decimal("1.08")) == Decimal("108.00")
    assert convert_amount(Decimal("-3.333"), Decimal("2")) == Decimal("-6.666")


def test_same_currency_skips_lookup() -> None:
    """Amounts already in the target currency are returned as-is."""
    lookup, calls = _rates({})
    converter = CurrencyConverter("USD", lookup, MagicMock())

    assert converter.convert(Decimal("12.34"), "USD") == Decimal("12.34")
    assert converter.resolve_rate("usd") == Decimal("1")
    assert calls == []


def test_missing_currency_defaults_to_usd() -> None:
    """Records without a currency are treated as USD."""
    lookup, calls = _rates({})
    converter = CurrencyConverter("USD", lookup, MagicMock())

    assert converter.convert(Decimal("5"), None) == Decimal("5")
    assert calls == []


def test_converts_with_found_rate() -> None:
    """A stored rate converts the amount into the target currency."""
    lookup, calls = _rates({("EUR", "USD"): "1.08"})
    converter = CurrencyConverter("USD", lookup, MagicMock())

    assert converter.convert(Decimal("100"), "EUR") == Decimal("108.00")
    assert calls == [("EUR", "USD")]


def test_missing_rate_falls_back_to_raw_amount() -> None:
    """Without a rate the raw amount is used and a warning is logged."""
    lookup, _ = _rates({("USD", "EUR"): "0.92"})
    logger = MagicMock()
    converter = CurrencyConverter("USD", lookup, logger)

    # Only the inverse pair exists; rates are not assumed symmetric.
    assert converter.convert(Decimal("250"), "EUR") == Decimal("250")
    logger.warning.assert_called_once_with("Missing FX rate for EUR to USD")


def test_rate_is_looked_up_once_per_pair() -> None:
    """Repeated conversions reuse the resolved rate, including misses."""
    lookup, calls = _rates({("GBP", "EUR"): "1.17"})
    converter = CurrencyConverter("EUR", lookup, MagicMock())

    converter.convert(Decimal("1"), "GBP")
    converter.convert(Decimal("2"), "GBP")
    converter.convert(Decimal("3"), "BGN")
    converter.convert(Decimal("4"), "BGN")

    assert calls == [("GBP", "EUR"), ("BGN", "EUR")]
