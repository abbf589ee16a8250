"""Domain constants for household finance aggregation."""

from decimal import Decimal

DEFAULT_CURRENCY = "USD"

CURRENCIES = {
    "USD": {"symbol": "$", "name": "US Dollar"},
    "EUR": {"symbol": "€", "name": "Euro"},
    "GBP": {"symbol": "£", "name": "British Pound"},
    "BGN": {"symbol": "лв", "name": "Bulgarian Lev"},
}

# Average weeks per month and bi-weekly periods per month.
WEEKS_PER_MONTH = Decimal("4.33")
BIWEEKS_PER_MONTH = Decimal("2.17")
WEEKS_PER_YEAR = Decimal("52")
BIWEEKS_PER_YEAR = Decimal("26")
MONTHS_PER_YEAR = Decimal("12")
MONTHS_PER_QUARTER = Decimal("3")
QUARTERS_PER_YEAR = Decimal("4")

PROPERTIES = "properties"
BANK_ACCOUNTS = "bank_accounts"
VEHICLES = "vehicles"
STOCKS = "stocks"
INVESTMENTS = "investments"

ASSET_CATEGORY_LABELS = {
    PROPERTIES: "Properties",
    BANK_ACCOUNTS: "Bank Accounts",
    VEHICLES: "Vehicles",
    STOCKS: "Stocks",
    INVESTMENTS: "Investments",
}

DEFAULT_ASSET_CATEGORIES = (
    PROPERTIES,
    BANK_ACCOUNTS,
    VEHICLES,
    STOCKS,
    INVESTMENTS,
)


__all__ = [
    "ASSET_CATEGORY_LABELS",
    "BANK_ACCOUNTS",
    "BIWEEKS_PER_MONTH",
    "BIWEEKS_PER_YEAR",
    "CURRENCIES",
    "DEFAULT_ASSET_CATEGORIES",
    "DEFAULT_CURRENCY",
    "INVESTMENTS",
    "MONTHS_PER_QUARTER",
    "MONTHS_PER_YEAR",
    "PROPERTIES",
    "QUARTERS_PER_YEAR",
    "STOCKS",
    "VEHICLES",
    "WEEKS_PER_MONTH",
    "WEEKS_PER_YEAR",
]
