"""Domain models for financial aggregates."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class AssetDistributionItem:
    """Share of total assets held in one asset category."""

    category: str
    label: str
    value: Decimal
    percentage: Decimal


@dataclass(frozen=True)
class RecordCounts:
    """Number of records per category for a household."""

    properties: int = 0
    bank_accounts: int = 0
    vehicles: int = 0
    credits: int = 0
    subscriptions: int = 0
    stocks: int = 0
    passive_incomes: int = 0
    investments: int = 0


@dataclass(frozen=True)
class FinancialSummary:
    """Household totals normalized into one reporting currency.

    Attributes:
        currency_code: Reporting currency of every amount.
        total_assets: Sum of the configured asset categories.
        total_liabilities: Sum of remaining credit balances.
        net_worth: Assets minus liabilities.
        monthly_passive_income: Monthly bank interest.
        total_passive_income: Monthly equivalent of passive income records.
        annual_passive_income: Annual equivalent of passive income records.
    """

    currency_code: str
    total_properties: Decimal
    total_bank_accounts: Decimal
    total_vehicles: Decimal
    total_stocks: Decimal
    total_investments: Decimal
    total_assets: Decimal
    total_liabilities: Decimal
    net_worth: Decimal
    monthly_payments: Decimal
    monthly_property_expenses: Decimal
    monthly_car_maintenance: Decimal
    monthly_subscriptions: Decimal
    yearly_subscriptions: Decimal
    total_monthly_expenses: Decimal
    total_annual_expenses: Decimal
    annual_dividend_income: Decimal
    monthly_dividend_income: Decimal
    monthly_passive_income: Decimal
    total_passive_income: Decimal
    annual_passive_income: Decimal
    total_monthly_passive_income: Decimal
    total_annual_passive_income: Decimal
    asset_distribution: list[AssetDistributionItem] = field(
        default_factory=list
    )
    counts: RecordCounts = field(default_factory=RecordCounts)


@dataclass(frozen=True)
class CreditProgress:
    """Repayment progress of a credit."""

    paid_amount: Decimal
    progress_percentage: Decimal


@dataclass(frozen=True)
class StockPosition:
    """Valuation of a stock position at its display price."""

    display_price: Decimal | None
    total_value: Decimal | None
    annual_dividend: Decimal | None
    gain_loss: Decimal | None
    gain_loss_percentage: Decimal | None


@dataclass(frozen=True)
class InvestmentPerformance:
    """Gain or loss of an investment against its cost basis."""

    current_value: Decimal
    gain_loss: Decimal
    gain_loss_percentage: Decimal


__all__ = [
    "AssetDistributionItem",
    "CreditProgress",
    "FinancialSummary",
    "InvestmentPerformance",
    "RecordCounts",
    "StockPosition",
]
