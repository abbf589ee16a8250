"""Domain services package."""

from .finance import (
    build_asset_distribution,
    compute_financial_summary,
    count_records,
    monthly_interest_income,
)
from .frequency import (
    passive_income_annual_amount,
    passive_income_monthly_amount,
    subscription_monthly_cost,
    subscription_yearly_cost,
)
from .fx import CurrencyConverter, convert_amount
from .investment_details import (
    normalize_investment_type,
    parse_investment_details,
)
from .normalization import normalize_currency_code, normalize_frequency
from .performance import (
    compute_credit_progress,
    compute_investment_performance,
    compute_stock_position,
    display_price,
)
from .validation import validate_amount_sign

__all__ = [
    "CurrencyConverter",
    "build_asset_distribution",
    "compute_credit_progress",
    "compute_financial_summary",
    "compute_investment_performance",
    "compute_stock_position",
    "convert_amount",
    "count_records",
    "display_price",
    "monthly_interest_income",
    "normalize_currency_code",
    "normalize_frequency",
    "normalize_investment_type",
    "parse_investment_details",
    "passive_income_annual_amount",
    "passive_income_monthly_amount",
    "subscription_monthly_cost",
    "subscription_yearly_cost",
    "validate_amount_sign",
]
