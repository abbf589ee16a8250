"""Application ports package."""

from .currency_rates import CurrencyRateProviderPort
from .database import DatabaseEnginePort
from .records_repository import HouseholdRecordsRepositoryPort
from .user_preferences import UserPreferencesPort

__all__ = [
    "CurrencyRateProviderPort",
    "DatabaseEnginePort",
    "HouseholdRecordsRepositoryPort",
    "UserPreferencesPort",
]
