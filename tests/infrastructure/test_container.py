"""Tests for the composition root."""

from unittest.mock import MagicMock

import pytest

from household_finance.application.use_cases.get_dashboard_summary import (
    GetDashboardSummaryUseCase,
)
from household_finance.application.use_cases.get_household_summary import (
    GetHouseholdSummaryUseCase,
)
from household_finance.domain.constants import PROPERTIES
from household_finance.infrastructure import container
from household_finance.infrastructure import settings as settings_module
from household_finance.infrastructure.currency_rates_repository import (
    SqlAlchemyCurrencyRateProvider,
)
from household_finance.infrastructure.records_repository import (
    SqlAlchemyHouseholdRecordsRepository,
)


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch) -> None:
    fake = MagicMock()
    monkeypatch.setattr(container, "get_app_logger", lambda: fake)
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: fake)
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)


def test_build_repositories_share_db_port() -> None:
    db_port = MagicMock()

    repository = container.build_records_repository(db_port)
    provider = container.build_rate_provider(db_port)

    assert isinstance(repository, SqlAlchemyHouseholdRecordsRepository)
    assert isinstance(provider, SqlAlchemyCurrencyRateProvider)


def test_build_household_summary_use_case_reads_settings(monkeypatch) -> None:
    monkeypatch.setenv("DEFAULT_CURRENCY", "EUR")
    monkeypatch.setenv("ASSET_CATEGORIES", "properties")

    use_case = container.build_household_summary_use_case(MagicMock())

    assert isinstance(use_case, GetHouseholdSummaryUseCase)
    assert use_case._default_currency == "EUR"
    assert use_case._asset_categories == (PROPERTIES,)


def test_build_dashboard_summary_use_case() -> None:
    use_case = container.build_dashboard_summary_use_case(MagicMock())

    assert isinstance(use_case, GetDashboardSummaryUseCase)
