"""Normalization of billing cycles and payout frequencies.

Subscriptions and passive income use two separate vocabularies. Each
normalization path applies its own multiplier: the weekly and bi-weekly
monthly figures use averaged constants and are not derived from the annual
ones, so monthly x 12 and annual figures intentionally differ for them.
"""

from decimal import Decimal

from household_finance.domain.constants import (
    BIWEEKS_PER_MONTH,
    BIWEEKS_PER_YEAR,
    MONTHS_PER_QUARTER,
    MONTHS_PER_YEAR,
    QUARTERS_PER_YEAR,
    WEEKS_PER_MONTH,
    WEEKS_PER_YEAR,
)
from household_finance.domain.services.normalization import (
    normalize_frequency,
)

SUBSCRIPTION_CYCLES = ("monthly", "yearly", "weekly")
PASSIVE_INCOME_FREQUENCIES = (
    "monthly",
    "annually",
    "quarterly",
    "weekly",
    "bi-weekly",
)


def subscription_monthly_cost(price: Decimal, billing_cycle: str | None) -> Decimal:
    """Return the monthly cost of a subscription.

    Args:
        price: Price charged per billing cycle.
        billing_cycle: One of monthly, yearly, or weekly.

    Returns:
        Decimal: Monthly-equivalent cost, zero for unknown cycles.
    """
    cycle = normalize_frequency(billing_cycle)
    if cycle == "monthly":
        return price
    if cycle == "yearly":
        return price / MONTHS_PER_YEAR
    if cycle == "weekly":
        return price * WEEKS_PER_MONTH
    return Decimal("0")


def subscription_yearly_cost(price: Decimal, billing_cycle: str | None) -> Decimal:
    """Return the yearly cost of a subscription.

    Args:
        price: Price charged per billing cycle.
        billing_cycle: One of monthly, yearly, or weekly.

    Returns:
        Decimal: Yearly-equivalent cost, zero for unknown cycles.
    """
    cycle = normalize_frequency(billing_cycle)
    if cycle == "monthly":
        return price * MONTHS_PER_YEAR
    if cycle == "yearly":
        return price
    if cycle == "weekly":
        return price * WEEKS_PER_YEAR
    return Decimal("0")


def passive_income_monthly_amount(
    amount: Decimal,
    frequency: str | None,
) -> Decimal:
    """Return the monthly equivalent of a passive income payout.

    Args:
        amount: Amount paid per period.
        frequency: monthly, annually, quarterly, weekly, or bi-weekly.

    Returns:
        Decimal: Monthly-equivalent amount, zero for unknown frequencies.
    """
    normalized = normalize_frequency(frequency)
    if normalized == "monthly":
        return amount
    if normalized == "annually":
        return amount / MONTHS_PER_YEAR
    if normalized == "quarterly":
        return amount / MONTHS_PER_QUARTER
    if normalized == "weekly":
        return amount * WEEKS_PER_MONTH
    if normalized == "bi-weekly":
        return amount * BIWEEKS_PER_MONTH
    return Decimal("0")


def passive_income_annual_amount(
    amount: Decimal,
    frequency: str | None,
) -> Decimal:
    """Return the annual equivalent of a passive income payout.

    Args:
        amount: Amount paid per period.
        frequency: monthly, annually, quarterly, weekly, or bi-weekly.

    Returns:
        Decimal: Annual-equivalent amount, zero for unknown frequencies.
    """
    normalized = normalize_frequency(frequency)
    if normalized == "annually":
        return amount
    if normalized == "monthly":
        return amount * MONTHS_PER_YEAR
    if normalized == "quarterly":
        return amount * QUARTERS_PER_YEAR
    if normalized == "weekly":
        return amount * WEEKS_PER_YEAR
    if normalized == "bi-weekly":
        return amount * BIWEEKS_PER_YEAR
    return Decimal("0")


__all__ = [
    "PASSIVE_INCOME_FREQUENCIES",
    "SUBSCRIPTION_CYCLES",
    "passive_income_annual_amount",
    "passive_income_monthly_amount",
    "subscription_monthly_cost",
    "subscription_yearly_cost",
]
