"""Composition root for wiring infrastructure adapters."""

from household_finance.application.ports.currency_rates import (
    CurrencyRateProviderPort,
)
from household_finance.application.ports.database import DatabaseEnginePort
from household_finance.application.ports.records_repository import (
    HouseholdRecordsRepositoryPort,
)
from household_finance.application.ports.user_preferences import (
    UserPreferencesPort,
)
from household_finance.application.use_cases.get_dashboard_summary import (
    GetDashboardSummaryUseCase,
)
from household_finance.application.use_cases.get_household_summary import (
    GetHouseholdSummaryUseCase,
)
from household_finance.infrastructure.currency_rates_repository import (
    SqlAlchemyCurrencyRateProvider,
)
from household_finance.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from household_finance.infrastructure.logging.logger import get_app_logger
from household_finance.infrastructure.records_repository import (
    SqlAlchemyHouseholdRecordsRepository,
)
from household_finance.infrastructure.settings import FinanceSettings
from household_finance.infrastructure.user_preferences_repository import (
    SqlAlchemyUserPreferencesRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_records_repository(
    db_port: DatabaseEnginePort | None = None,
) -> HouseholdRecordsRepositoryPort:
    """Return the household records repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyHouseholdRecordsRepository(
        resolved_db,
        logger=get_app_logger(),
    )


def build_rate_provider(
    db_port: DatabaseEnginePort | None = None,
) -> CurrencyRateProviderPort:
    """Return the currency rate provider."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyCurrencyRateProvider(resolved_db)


def build_user_preferences(
    db_port: DatabaseEnginePort | None = None,
    settings: FinanceSettings | None = None,
) -> UserPreferencesPort:
    """Return the user preferences repository."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or FinanceSettings.from_env()
    return SqlAlchemyUserPreferencesRepository(
        resolved_db,
        default_currency=resolved_settings.default_currency,
    )


def build_household_summary_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetHouseholdSummaryUseCase:
    """Return the household summary use case wired to SQL adapters."""
    resolved_db = db_port or build_database_adapter()
    settings = FinanceSettings.from_env()
    return GetHouseholdSummaryUseCase(
        records_repository=build_records_repository(resolved_db),
        rate_provider=build_rate_provider(resolved_db),
        preferences=build_user_preferences(resolved_db, settings),
        logger=get_app_logger(),
        asset_categories=settings.asset_categories,
        default_currency=settings.default_currency,
    )


def build_dashboard_summary_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetDashboardSummaryUseCase:
    """Return the dashboard summary use case wired to SQL adapters."""
    resolved_db = db_port or build_database_adapter()
    return GetDashboardSummaryUseCase(
        records_repository=build_records_repository(resolved_db),
        summary_use_case=build_household_summary_use_case(resolved_db),
        logger=get_app_logger(),
    )


__all__ = [
    "build_dashboard_summary_use_case",
    "build_database_adapter",
    "build_household_summary_use_case",
    "build_rate_provider",
    "build_records_repository",
    "build_user_preferences",
]
