"""Tests for the Streamlit app module."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from household_finance.adapters.interface.streamlit import app
from household_finance.application.use_cases.get_dashboard_summary import (
    DashboardSummary,
)
from household_finance.domain.models import (
    BankAccountRecord,
    CurrencyRate,
    HouseholdRecords,
    PropertyRecord,
    SubscriptionRecord,
)
from household_finance.domain.services.finance import (
    compute_financial_summary,
)


def _summary(records: HouseholdRecords | None = None, currency: str = "EUR"):
    records = records or HouseholdRecords(
        properties=[PropertyRecord(price=Decimal("3000"))],
        bank_accounts=[BankAccountRecord(amount=Decimal("1000"))],
        subscriptions=[
            SubscriptionRecord(price=Decimal("10"), billing_cycle="monthly")
        ],
    )
    return compute_financial_summary(
        records,
        target_currency=currency,
        lookup_rate=lambda *_: None,
        logger=MagicMock(),
    )


def _fake_streamlit(*selections) -> MagicMock:
    fake_st = MagicMock()
    fake_st.columns.side_effect = lambda count: [
        MagicMock() for _ in range(count)
    ]
    fake_st.sidebar.selectbox.side_effect = list(selections)
    fake_st.sidebar.number_input.return_value = 4
    return fake_st


@pytest.fixture(autouse=True)
def quiet_usage_logger(monkeypatch) -> MagicMock:
    usage_logger = MagicMock()
    monkeypatch.setattr(app, "get_usage_logger", lambda: usage_logger)
    return usage_logger


def test_fetch_household_summary_invokes_use_case(monkeypatch):
    use_case = MagicMock()
    use_case.execute.return_value = "summary"
    monkeypatch.setattr(
        app,
        "build_household_summary_use_case",
        lambda: use_case,
    )

    assert app._fetch_household_summary(3, "BGN") == "summary"
    use_case.execute.assert_called_once_with(3, target_currency="BGN")


def test_fetch_currency_rates_lists_provider_rates(monkeypatch):
    provider = MagicMock()
    provider.list_rates.return_value = ["rate"]
    monkeypatch.setattr(app, "build_rate_provider", lambda: provider)

    assert app._fetch_currency_rates() == ["rate"]


def test_format_currency_uses_symbol() -> None:
    assert app._format_currency(Decimal("1234.4"), "EUR") == "€1,234"
    assert app._format_currency(Decimal("5"), "XYZ") == "XYZ5"


def test_expense_rows_include_yearly_totals() -> None:
    rows = app._expense_rows(_summary())

    assert rows[3] == {
        "Expense": "Subscriptions",
        "Monthly": "€10",
        "Yearly": "€120",
    }
    assert rows[-1]["Expense"] == "Total"


def test_distribution_chart_data_skips_empty_categories() -> None:
    data = app._prepare_distribution_chart_data(_summary())

    assert [row["category"] for row in data] == ["Properties", "Bank Accounts"]
    assert data[0]["share_label"] == "75.0%"
    assert data[1]["amount"] == 1000.0


def test_distribution_chart_reports_empty_household(monkeypatch):
    fake_st = _fake_streamlit()
    monkeypatch.setattr(app, "st", fake_st)

    app._render_asset_distribution_chart(_summary(HouseholdRecords()))

    fake_st.info.assert_called_once()
    fake_st.altair_chart.assert_not_called()


def test_distribution_chart_surfaces_dependency_errors(monkeypatch):
    fake_st = _fake_streamlit()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app,
        "_check_altair_dependencies",
        lambda: (False, "numpy is broken"),
    )

    app._render_asset_distribution_chart(_summary())

    fake_st.error.assert_called_once_with("numpy is broken")
    fake_st.altair_chart.assert_not_called()


def test_main_renders_household_page(monkeypatch, quiet_usage_logger):
    fake_st = _fake_streamlit("Household", "EUR")
    loaded = []

    def fake_load(household_id, currency_code):
        loaded.append((household_id, currency_code))
        return _summary()

    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_household_summary", fake_load)
    monkeypatch.setattr(app, "_render_asset_distribution_chart", MagicMock())

    app.main()

    assert loaded == [(4, "EUR")]
    fake_st.set_page_config.assert_called_once()
    assert fake_st.dataframe.call_count == 2
    assert "1 properties" in fake_st.caption.call_args.args[0]
    quiet_usage_logger.info.assert_called_once_with("page_view page=Household")


def test_main_renders_rates(monkeypatch):
    fake_st = _fake_streamlit("Currency Rates")
    rates = [CurrencyRate("EUR", "USD", Decimal("1.08"))]
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_currency_rates", lambda: rates)

    app.main()

    call = fake_st.dataframe.call_args
    assert call.args[0] == [{"From": "EUR", "To": "USD", "Rate": "1.0800"}]
    assert call.kwargs["hide_index"] is True
    fake_st.warning.assert_not_called()


def test_main_warns_without_rates(monkeypatch):
    fake_st = _fake_streamlit("Currency Rates")
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_currency_rates", lambda: [])

    app.main()

    fake_st.warning.assert_called_once()
    fake_st.dataframe.assert_not_called()


def test_fetch_dashboard_summary_invokes_use_case(monkeypatch):
    use_case = MagicMock()
    use_case.execute.return_value = "dashboard"
    monkeypatch.setattr(
        app,
        "build_dashboard_summary_use_case",
        lambda: use_case,
    )

    assert app._fetch_dashboard_summary(8) == "dashboard"
    use_case.execute.assert_called_once_with(8)


def test_main_renders_user_dashboard(monkeypatch):
    """The dashboard page features the first household of the user."""
    fake_st = _fake_streamlit("Dashboard")
    requested = []

    def fake_load(user_id):
        requested.append(user_id)
        return DashboardSummary(
            household_id=21,
            household_count=3,
            summary=_summary(),
        )

    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_dashboard_summary", fake_load)
    monkeypatch.setattr(app, "_render_asset_distribution_chart", MagicMock())

    app.main()

    assert requested == [4]
    captions = [call.args[0] for call in fake_st.caption.call_args_list]
    assert captions[0] == "Household 21 (1 of 3)"
    assert fake_st.dataframe.call_count == 2


def test_main_reports_user_without_households(monkeypatch):
    fake_st = _fake_streamlit("Dashboard")
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_dashboard_summary", lambda user_id: None)

    app.main()

    fake_st.info.assert_called_once_with("No households found for this user.")
    fake_st.dataframe.assert_not_called()
