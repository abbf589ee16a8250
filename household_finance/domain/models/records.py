"""Domain models for household financial records."""

from dataclasses import dataclass, field
from decimal import Decimal

from household_finance.domain.models.investments import InvestmentDetails


@dataclass(frozen=True)
class PropertyRecord:
    """Real estate owned by a household.

    Attributes:
        price: Market price of the property.
        currency: Currency code of every amount on the row.
        maintenance_amount: Monthly maintenance cost.
        yearly_tax: Annual property tax.
    """

    price: Decimal
    currency: str | None = None
    maintenance_amount: Decimal = Decimal("0")
    yearly_tax: Decimal = Decimal("0")
    name: str | None = None


@dataclass(frozen=True)
class BankAccountRecord:
    """Cash held in a bank account.

    Attributes:
        amount: Account balance.
        currency: Currency code of the balance.
        interest_rate: Annual interest rate in percent, if any.
    """

    amount: Decimal
    currency: str | None = None
    interest_rate: Decimal | None = None
    name: str | None = None


@dataclass(frozen=True)
class VehicleRecord:
    """Vehicle owned by a household.

    Attributes:
        sale_price: Estimated resale value.
        currency: Currency code of the amounts.
        maintenance_costs: Annual maintenance costs.
    """

    sale_price: Decimal
    currency: str | None = None
    maintenance_costs: Decimal = Decimal("0")
    name: str | None = None


@dataclass(frozen=True)
class CreditRecord:
    """Loan or other liability.

    Attributes:
        remaining_amount: Outstanding balance counted as a liability.
        monthly_payment: Scheduled monthly repayment.
        currency: Currency code of the amounts.
        total_amount: Original principal, used for progress reporting.
    """

    remaining_amount: Decimal
    monthly_payment: Decimal = Decimal("0")
    currency: str | None = None
    total_amount: Decimal | None = None
    name: str | None = None


@dataclass(frozen=True)
class SubscriptionRecord:
    """Recurring subscription billed per cycle."""

    price: Decimal
    billing_cycle: str
    currency: str | None = None
    name: str | None = None


@dataclass(frozen=True)
class StockRecord:
    """Equity position.

    Attributes:
        shares: Number of shares held.
        purchase_price: Price paid per share.
        current_price: Latest known price per share.
        dividend_yield: Annual dividend yield in percent.
        currency: Currency the prices are quoted in.
    """

    shares: Decimal
    purchase_price: Decimal | None = None
    current_price: Decimal | None = None
    dividend_yield: Decimal | None = None
    currency: str | None = None
    symbol: str | None = None


@dataclass(frozen=True)
class PassiveIncomeRecord:
    """Recurring passive income paid per frequency."""

    amount: Decimal
    frequency: str
    currency: str | None = None
    name: str | None = None


@dataclass(frozen=True)
class InvestmentRecord:
    """Miscellaneous investment such as crypto, a business stake, or a domain.

    Attributes:
        amount: Cost basis.
        current_value: Latest valuation; the cost basis is used when absent.
        currency: Currency code of the amounts.
        investment_type: Free-form type label (cryptocurrency, business, ...).
        details: Typed details parsed from the row metadata.
    """

    amount: Decimal
    current_value: Decimal | None = None
    currency: str | None = None
    investment_type: str = "other"
    details: InvestmentDetails | None = None
    name: str | None = None


@dataclass(frozen=True)
class HouseholdRecords:
    """Every record of a household, grouped by category."""

    properties: list[PropertyRecord] = field(default_factory=list)
    bank_accounts: list[BankAccountRecord] = field(default_factory=list)
    vehicles: list[VehicleRecord] = field(default_factory=list)
    credits: list[CreditRecord] = field(default_factory=list)
    subscriptions: list[SubscriptionRecord] = field(default_factory=list)
    stocks: list[StockRecord] = field(default_factory=list)
    passive_incomes: list[PassiveIncomeRecord] = field(default_factory=list)
    investments: list[InvestmentRecord] = field(default_factory=list)


__all__ = [
    "BankAccountRecord",
    "CreditRecord",
    "HouseholdRecords",
    "InvestmentRecord",
    "PassiveIncomeRecord",
    "PropertyRecord",
    "StockRecord",
    "SubscriptionRecord",
    "VehicleRecord",
]
