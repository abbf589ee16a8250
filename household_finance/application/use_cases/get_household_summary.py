"""Use case to compute a household financial summary."""

from collections.abc import Iterable

from household_finance.application.errors import (
    CurrencyRateProviderError,
    RecordRepositoryError,
    UserRecordError,
)
from household_finance.application.ports.currency_rates import (
    CurrencyRateProviderPort,
)
from household_finance.application.ports.records_repository import (
    HouseholdRecordsRepositoryPort,
)
from household_finance.application.ports.user_preferences import (
    UserPreferencesPort,
)
from household_finance.domain.constants import (
    DEFAULT_ASSET_CATEGORIES,
    DEFAULT_CURRENCY,
)
from household_finance.domain.models import FinancialSummary, HouseholdRecords
from household_finance.domain.services.finance import (
    compute_financial_summary,
)
from household_finance.infrastructure.logging.logger import get_app_logger


class GetHouseholdSummaryUseCase:
    """Compute the financial summary of a household in a reporting currency."""

    def __init__(
        self,
        records_repository: HouseholdRecordsRepositoryPort,
        rate_provider: CurrencyRateProviderPort,
        preferences: UserPreferencesPort | None = None,
        logger=None,
        asset_categories: Iterable[str] | None = None,
        default_currency: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize the use case.

        Args:
            records_repository: Port returning household records.
            rate_provider: Port returning currency rates.
            preferences: Optional port resolving a user's reporting currency.
            logger: Optional logger compatible with logging.Logger-like API.
            asset_categories: Optional categories counted as assets.
            default_currency: Reporting currency when none is resolved.
        """
        self._records_repository = records_repository
        self._rate_provider = rate_provider
        self._preferences = preferences
        self._logger = logger or get_app_logger()
        self._asset_categories = tuple(
            asset_categories or DEFAULT_ASSET_CATEGORIES
        )
        self._default_currency = default_currency

    def execute(
        self,
        household_id: int,
        target_currency: str | None = None,
        user_id: int | None = None,
    ) -> FinancialSummary:
        """Return the household summary.

        Args:
            household_id: Household whose records are aggregated.
            target_currency: Reporting currency; overrides user preferences.
            user_id: Optional user whose default currency is used.

        Returns:
            FinancialSummary: Aggregated totals in the reporting currency.

        Raises:
            RecordRepositoryError: When records cannot be loaded.
            CurrencyRateProviderError: When the rate store cannot be queried.
            UserRecordError: When the user preferences cannot be read.
        """
        try:
            currency = self._resolve_currency(target_currency, user_id)
            records = self._load_records(household_id)
            return compute_financial_summary(
                records,
                target_currency=currency,
                lookup_rate=self._rate_provider.get_rate,
                logger=self._logger,
                asset_categories=self._asset_categories,
            )
        except (
            RecordRepositoryError,
            CurrencyRateProviderError,
            UserRecordError,
        ) as exc:
            self._logger.error(
                f"Household summary failed for household {household_id}: {exc}"
            )
            raise

    def _resolve_currency(
        self,
        target_currency: str | None,
        user_id: int | None,
    ) -> str:
        if target_currency:
            return target_currency
        if user_id is not None and self._preferences is not None:
            return (
                self._preferences.fetch_default_currency(user_id)
                or self._default_currency
            )
        return self._default_currency

    def _load_records(self, household_id: int) -> HouseholdRecords:
        repository = self._records_repository
        return HouseholdRecords(
            properties=repository.fetch_properties(household_id),
            bank_accounts=repository.fetch_bank_accounts(household_id),
            vehicles=repository.fetch_vehicles(household_id),
            credits=repository.fetch_credits(household_id),
            subscriptions=repository.fetch_subscriptions(household_id),
            stocks=repository.fetch_stocks(household_id),
            passive_incomes=repository.fetch_passive_incomes(household_id),
            investments=repository.fetch_investments(household_id),
        )


__all__ = ["GetHouseholdSummaryUseCase", "FinancialSummary"]
