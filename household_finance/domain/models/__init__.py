"""Domain models package."""

from .finance import (
    AssetDistributionItem,
    CreditProgress,
    FinancialSummary,
    InvestmentPerformance,
    RecordCounts,
    StockPosition,
)
from .investments import (
    BusinessDetails,
    CollectibleDetails,
    CryptocurrencyDetails,
    DomainDetails,
    IntellectualPropertyDetails,
    InvestmentDetails,
    OtherDetails,
)
from .rates import CurrencyRate
from .records import (
    BankAccountRecord,
    CreditRecord,
    HouseholdRecords,
    InvestmentRecord,
    PassiveIncomeRecord,
    PropertyRecord,
    StockRecord,
    SubscriptionRecord,
    VehicleRecord,
)

__all__ = [
    "AssetDistributionItem",
    "BankAccountRecord",
    "BusinessDetails",
    "CollectibleDetails",
    "CreditProgress",
    "CreditRecord",
    "CurrencyRate",
    "CryptocurrencyDetails",
    "DomainDetails",
    "FinancialSummary",
    "HouseholdRecords",
    "IntellectualPropertyDetails",
    "InvestmentDetails",
    "InvestmentPerformance",
    "InvestmentRecord",
    "OtherDetails",
    "PassiveIncomeRecord",
    "PropertyRecord",
    "RecordCounts",
    "StockPosition",
    "StockRecord",
    "SubscriptionRecord",
    "VehicleRecord",
]
