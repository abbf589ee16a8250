"""Domain services for household finance aggregates."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from household_finance.domain.constants import (
    ASSET_CATEGORY_LABELS,
    BANK_ACCOUNTS,
    DEFAULT_ASSET_CATEGORIES,
    INVESTMENTS,
    MONTHS_PER_YEAR,
    PROPERTIES,
    STOCKS,
    VEHICLES,
)
from household_finance.domain.models import (
    AssetDistributionItem,
    FinancialSummary,
    HouseholdRecords,
    RecordCounts,
)
from household_finance.domain.services.frequency import (
    passive_income_annual_amount,
    passive_income_monthly_amount,
    subscription_monthly_cost,
    subscription_yearly_cost,
)
from household_finance.domain.services.fx import CurrencyConverter, RateLookup
from household_finance.domain.services.performance import (
    compute_stock_position,
    investment_current_value,
)
from household_finance.domain.services.validation import validate_amount_sign

HUNDRED = Decimal("100")
ZERO = Decimal("0")


def monthly_interest_income(amount: Decimal, annual_rate: Decimal) -> Decimal:
    """Return the monthly interest earned at an annual percentage rate."""
    return (amount * (annual_rate / HUNDRED)) / MONTHS_PER_YEAR


def compute_financial_summary(
    records: HouseholdRecords,
    *,
    target_currency: str,
    lookup_rate: RateLookup,
    logger: Logger,
    asset_categories: Iterable[str] = DEFAULT_ASSET_CATEGORIES,
) -> FinancialSummary:
    """Aggregate household records into a single reporting currency.

    Every amount is converted with the rate of its own currency. Records
    without a rate keep their raw amount, so a missing rate mixes currencies
    in the totals rather than failing the computation.

    Args:
        records: Household records grouped by category.
        target_currency: Reporting currency code.
        lookup_rate: Callable returning the rate for a (from, to) pair.
        logger: Logger used for warnings.
        asset_categories: Categories counted in total assets.

    Returns:
        FinancialSummary: Totals, expenses, passive income, and distribution.
    """
    asset_categories = tuple(asset_categories)
    unknown = [c for c in asset_categories if c not in ASSET_CATEGORY_LABELS]
    if unknown:
        raise ValueError(f"Unknown asset categories: {unknown}")
    converter = CurrencyConverter(target_currency, lookup_rate, logger)
    convert = converter.convert

    total_properties = ZERO
    monthly_property_expenses = ZERO
    for prop in records.properties:
        validate_amount_sign(PROPERTIES, prop.price, logger)
        total_properties += convert(prop.price, prop.currency)
        monthly_property_expenses += (
            convert(prop.maintenance_amount, prop.currency)
            + convert(prop.yearly_tax, prop.currency) / MONTHS_PER_YEAR
        )

    total_bank_accounts = ZERO
    monthly_passive_income = ZERO
    for account in records.bank_accounts:
        validate_amount_sign(BANK_ACCOUNTS, account.amount, logger)
        total_bank_accounts += convert(account.amount, account.currency)
        if account.interest_rate:
            monthly_passive_income += convert(
                monthly_interest_income(account.amount, account.interest_rate),
                account.currency,
            )

    total_vehicles = ZERO
    monthly_car_maintenance = ZERO
    for vehicle in records.vehicles:
        validate_amount_sign(VEHICLES, vehicle.sale_price, logger)
        total_vehicles += convert(vehicle.sale_price, vehicle.currency)
        monthly_car_maintenance += (
            convert(vehicle.maintenance_costs, vehicle.currency)
            / MONTHS_PER_YEAR
        )

    total_stocks = ZERO
    annual_dividend_income = ZERO
    for stock in records.stocks:
        position = compute_stock_position(stock)
        if position.total_value is None:
            continue
        total_stocks += convert(position.total_value, stock.currency)
        if position.annual_dividend is not None:
            annual_dividend_income += convert(
                position.annual_dividend,
                stock.currency,
            )

    total_investments = ZERO
    for investment in records.investments:
        current_value = investment_current_value(investment)
        validate_amount_sign(INVESTMENTS, current_value, logger)
        total_investments += convert(current_value, investment.currency)

    total_liabilities = ZERO
    monthly_payments = ZERO
    for credit in records.credits:
        total_liabilities += convert(credit.remaining_amount, credit.currency)
        monthly_payments += convert(credit.monthly_payment, credit.currency)

    monthly_subscriptions = ZERO
    yearly_subscriptions = ZERO
    for subscription in records.subscriptions:
        monthly_subscriptions += convert(
            subscription_monthly_cost(
                subscription.price,
                subscription.billing_cycle,
            ),
            subscription.currency,
        )
        yearly_subscriptions += convert(
            subscription_yearly_cost(
                subscription.price,
                subscription.billing_cycle,
            ),
            subscription.currency,
        )

    total_passive_income = ZERO
    annual_passive_income = ZERO
    for income in records.passive_incomes:
        total_passive_income += convert(
            passive_income_monthly_amount(income.amount, income.frequency),
            income.currency,
        )
        annual_passive_income += convert(
            passive_income_annual_amount(income.amount, income.frequency),
            income.currency,
        )

    category_totals = {
        PROPERTIES: total_properties,
        BANK_ACCOUNTS: total_bank_accounts,
        VEHICLES: total_vehicles,
        STOCKS: total_stocks,
        INVESTMENTS: total_investments,
    }
    total_assets = sum(
        (category_totals[category] for category in asset_categories),
        ZERO,
    )
    net_worth = total_assets - total_liabilities

    total_monthly_expenses = (
        monthly_payments
        + monthly_property_expenses
        + monthly_car_maintenance
        + monthly_subscriptions
    )
    total_annual_expenses = (
        (monthly_payments + monthly_property_expenses + monthly_car_maintenance)
        * MONTHS_PER_YEAR
        + yearly_subscriptions
    )
    monthly_dividend_income = annual_dividend_income / MONTHS_PER_YEAR
    total_monthly_passive_income = (
        monthly_passive_income + monthly_dividend_income + total_passive_income
    )
    total_annual_passive_income = (
        monthly_passive_income * MONTHS_PER_YEAR
        + annual_dividend_income
        + annual_passive_income
    )

    logger.info(
        f"Household summary computed in {converter.target_currency}: "
        f"assets={total_assets}, liabilities={total_liabilities}"
    )

    return FinancialSummary(
        currency_code=converter.target_currency,
        total_properties=total_properties,
        total_bank_accounts=total_bank_accounts,
        total_vehicles=total_vehicles,
        total_stocks=total_stocks,
        total_investments=total_investments,
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=net_worth,
        monthly_payments=monthly_payments,
        monthly_property_expenses=monthly_property_expenses,
        monthly_car_maintenance=monthly_car_maintenance,
        monthly_subscriptions=monthly_subscriptions,
        yearly_subscriptions=yearly_subscriptions,
        total_monthly_expenses=total_monthly_expenses,
        total_annual_expenses=total_annual_expenses,
        annual_dividend_income=annual_dividend_income,
        monthly_dividend_income=monthly_dividend_income,
        monthly_passive_income=monthly_passive_income,
        total_passive_income=total_passive_income,
        annual_passive_income=annual_passive_income,
        total_monthly_passive_income=total_monthly_passive_income,
        total_annual_passive_income=total_annual_passive_income,
        asset_distribution=build_asset_distribution(
            category_totals,
            asset_categories,
            total_assets,
        ),
        counts=count_records(records),
    )


def build_asset_distribution(
    category_totals: dict[str, Decimal],
    asset_categories: Iterable[str],
    total_assets: Decimal,
) -> list[AssetDistributionItem]:
    """Return the share of total assets held in each asset category.

    Args:
        category_totals: Converted total per asset category.
        asset_categories: Categories to include, in display order.
        total_assets: Sum of the included categories.

    Returns:
        list[AssetDistributionItem]: One entry per category; percentages are
        zero when there are no assets.
    """
    items = []
    for category in asset_categories:
        value = category_totals[category]
        percentage = (value / total_assets) * HUNDRED if total_assets else ZERO
        items.append(
            AssetDistributionItem(
                category=category,
                label=ASSET_CATEGORY_LABELS[category],
                value=value,
                percentage=percentage,
            )
        )
    return items


def count_records(records: HouseholdRecords) -> RecordCounts:
    """Return the number of records in each category."""
    return RecordCounts(
        properties=len(records.properties),
        bank_accounts=len(records.bank_accounts),
        vehicles=len(records.vehicles),
        credits=len(records.credits),
        subscriptions=len(records.subscriptions),
        stocks=len(records.stocks),
        passive_incomes=len(records.passive_incomes),
        investments=len(records.investments),
    )


__all__ = [
    "build_asset_distribution",
    "compute_financial_summary",
    "count_records",
    "monthly_interest_income",
]
