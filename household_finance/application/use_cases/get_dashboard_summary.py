"""Use case to build the dashboard overview of a user."""

from dataclasses import dataclass

from household_finance.application.errors import UserRecordError
from household_finance.application.ports.records_repository import (
    HouseholdRecordsRepositoryPort,
)
from household_finance.application.use_cases.get_household_summary import (
    GetHouseholdSummaryUseCase,
)
from household_finance.domain.models import FinancialSummary
from household_finance.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DashboardSummary:
    """Summary of the household featured on a user's dashboard.

    Attributes:
        household_id: Featured household.
        household_count: Number of households the user belongs to.
        summary: Financial summary of the featured household.
    """

    household_id: int
    household_count: int
    summary: FinancialSummary


class GetDashboardSummaryUseCase:
    """Summarize the first household of a user in their reporting currency."""

    def __init__(
        self,
        records_repository: HouseholdRecordsRepositoryPort,
        summary_use_case: GetHouseholdSummaryUseCase,
        logger=None,
    ) -> None:
        self._records_repository = records_repository
        self._summary_use_case = summary_use_case
        self._logger = logger or get_app_logger()

    def execute(self, user_id: int) -> DashboardSummary | None:
        """Return the dashboard summary, or None for users without households.

        Args:
            user_id: User viewing the dashboard.

        Returns:
            DashboardSummary | None: Summary of the user's first household.

        Raises:
            UserRecordError: When the user's households cannot be listed.
        """
        try:
            household_ids = self._records_repository.fetch_household_ids(
                user_id
            )
        except UserRecordError as exc:
            self._logger.error(f"Dashboard failed for user {user_id}: {exc}")
            raise
        if not household_ids:
            self._logger.info(f"No households found for user {user_id}")
            return None
        household_id = household_ids[0]
        summary = self._summary_use_case.execute(
            household_id,
            user_id=user_id,
        )
        return DashboardSummary(
            household_id=household_id,
            household_count=len(household_ids),
            summary=summary,
        )


__all__ = ["DashboardSummary", "GetDashboardSummaryUseCase"]
