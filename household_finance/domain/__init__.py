"""Domain package for business rules and core models."""

from .constants import DEFAULT_ASSET_CATEGORIES, DEFAULT_CURRENCY
from .models import (
    AssetDistributionItem,
    CurrencyRate,
    FinancialSummary,
    HouseholdRecords,
    RecordCounts,
)
from .policies import is_known_currency
from .services import (
    CurrencyConverter,
    compute_financial_summary,
    convert_amount,
    normalize_currency_code,
)

__all__ = [
    "AssetDistributionItem",
    "CurrencyConverter",
    "CurrencyRate",
    "DEFAULT_ASSET_CATEGORIES",
    "DEFAULT_CURRENCY",
    "FinancialSummary",
    "HouseholdRecords",
    "RecordCounts",
    "compute_financial_summary",
    "convert_amount",
    "is_known_currency",
    "normalize_currency_code",
]
