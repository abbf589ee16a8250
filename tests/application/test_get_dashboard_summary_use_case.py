"""Tests for the GetDashboardSummaryUseCase."""

from unittest.mock import MagicMock

import pytest

from household_finance.application.errors import UserRecordError
from household_finance.application.use_cases.get_dashboard_summary import (
    GetDashboardSummaryUseCase,
)


def test_execute_summarizes_first_household() -> None:
    repository = MagicMock()
    repository.fetch_household_ids.return_value = [3, 9]
    summary_use_case = MagicMock()
    summary_use_case.execute.return_value = "summary"

    use_case = GetDashboardSummaryUseCase(
        records_repository=repository,
        summary_use_case=summary_use_case,
        logger=MagicMock(),
    )

    result = use_case.execute(11)

    assert result.household_id == 3
    assert result.household_count == 2
    assert result.summary == "summary"
    summary_use_case.execute.assert_called_once_with(3, user_id=11)


def test_execute_returns_none_without_households() -> None:
    repository = MagicMock()
    repository.fetch_household_ids.return_value = []
    summary_use_case = MagicMock()
    logger = MagicMock()

    use_case = GetDashboardSummaryUseCase(
        records_repository=repository,
        summary_use_case=summary_use_case,
        logger=logger,
    )

    assert use_case.execute(11) is None
    summary_use_case.execute.assert_not_called()
    logger.info.assert_called_once_with("No households found for user 11")


def test_execute_logs_household_lookup_failures() -> None:
    repository = MagicMock()
    repository.fetch_household_ids.side_effect = UserRecordError(
        "households",
        11,
    )
    summary_use_case = MagicMock()
    logger = MagicMock()

    use_case = GetDashboardSummaryUseCase(
        records_repository=repository,
        summary_use_case=summary_use_case,
        logger=logger,
    )

    with pytest.raises(UserRecordError, match="households for user 11"):
        use_case.execute(11)

    logger.error.assert_called_once()
    summary_use_case.execute.assert_not_called()
