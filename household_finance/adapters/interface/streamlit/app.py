"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal

import streamlit as st
import altair as alt

from household_finance.application.use_cases.get_dashboard_summary import (
    DashboardSummary,
)
from household_finance.application.use_cases.get_household_summary import (
    FinancialSummary,
)
from household_finance.domain.constants import CURRENCIES, DEFAULT_CURRENCY
from household_finance.domain.models import CurrencyRate
from household_finance.infrastructure.container import (
    build_dashboard_summary_use_case,
    build_household_summary_use_case,
    build_rate_provider,
)
from household_finance.infrastructure.logging.logger import get_usage_logger


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Verify numpy and pandas import cleanly before rendering charts.

    Returns:
        tuple[bool, str | None]: Status and an error message when broken.
    """
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Altair dependencies are missing: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "numpy import is incomplete (numpy.ndarray is missing)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas import is incomplete (pandas.Timestamp is missing)."
    return True, None


def _fetch_dashboard_summary(user_id: int) -> DashboardSummary | None:
    """Fetch the summary of the first household of a user."""
    return build_dashboard_summary_use_case().execute(user_id)


@st.cache_data(show_spinner=False, ttl=60)
def _load_dashboard_summary(
    user_id: int,
    schema_version: int = 1,
) -> DashboardSummary | None:
    """Cached wrapper around _fetch_dashboard_summary."""
    _ = schema_version
    return _fetch_dashboard_summary(user_id)


def _fetch_household_summary(
    household_id: int,
    currency_code: str,
) -> FinancialSummary:
    """Fetch the household summary in the selected currency."""
    use_case = build_household_summary_use_case()
    return use_case.execute(household_id, target_currency=currency_code)


@st.cache_data(show_spinner=False, ttl=60)
def _load_household_summary(
    household_id: int,
    currency_code: str,
    schema_version: int = 1,
) -> FinancialSummary:
    """Cached wrapper around _fetch_household_summary."""
    _ = schema_version
    return _fetch_household_summary(household_id, currency_code)


def _fetch_currency_rates() -> Sequence[CurrencyRate]:
    """Fetch every stored currency rate."""
    return build_rate_provider().list_rates()


@st.cache_data(show_spinner=False, ttl=60)
def _load_currency_rates() -> Sequence[CurrencyRate]:
    """Cached wrapper around _fetch_currency_rates."""
    return _fetch_currency_rates()


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = CURRENCIES.get(currency_code, {}).get("symbol", currency_code)
    return f"{symbol}{value:,.0f}"


def _expense_rows(summary: FinancialSummary) -> list[dict[str, str]]:
    """Return the monthly and yearly expense table rows."""
    currency = summary.currency_code
    twelve = Decimal("12")
    items = [
        ("Credit payments", summary.monthly_payments, None),
        ("Property expenses", summary.monthly_property_expenses, None),
        ("Vehicle maintenance", summary.monthly_car_maintenance, None),
        (
            "Subscriptions",
            summary.monthly_subscriptions,
            summary.yearly_subscriptions,
        ),
        (
            "Total",
            summary.total_monthly_expenses,
            summary.total_annual_expenses,
        ),
    ]
    return [
        {
            "Expense": label,
            "Monthly": _format_currency(monthly, currency),
            "Yearly": _format_currency(
                yearly if yearly is not None else monthly * twelve,
                currency,
            ),
        }
        for label, monthly, yearly in items
    ]


def _passive_income_rows(summary: FinancialSummary) -> list[dict[str, str]]:
    """Return the passive income table rows."""
    currency = summary.currency_code
    items = [
        ("Interest", summary.monthly_passive_income),
        ("Dividends", summary.monthly_dividend_income),
        ("Other passive income", summary.total_passive_income),
        ("Total", summary.total_monthly_passive_income),
    ]
    return [
        {"Source": label, "Monthly": _format_currency(value, currency)}
        for label, value in items
    ]


def _prepare_distribution_chart_data(
    summary: FinancialSummary,
) -> list[dict[str, str | float]]:
    """Prepare Altair-ready rows for the asset distribution donut.

    Categories without value are left out.
    """
    return [
        {
            "category": item.label,
            "amount": float(item.value),
            "amount_label": _format_currency(
                item.value,
                summary.currency_code,
            ),
            "share_label": f"{item.percentage:.1f}%",
        }
        for item in summary.asset_distribution
        if item.value != 0
    ]


def _render_asset_distribution_chart(
    summary: FinancialSummary,
    chart_size: int = 320,
) -> None:
    """Render a donut chart of assets by category.

    Args:
        summary: Household summary holding the asset distribution.
        chart_size: Width/height for the chart canvas.
    """
    data = _prepare_distribution_chart_data(summary)
    if not data:
        st.info("No assets recorded for this household.")
        return
    ok, message = _check_altair_dependencies()
    if not ok:
        st.error(message)
        return

    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(
                range=["#1b9aaa", "#2e7d32", "#f4a261", "#e76f51", "#457b9d"]
            ),
            legend=alt.Legend(orient="bottom", title=None, columns=3),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    chart = base.add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    )
    st.subheader("Asset Distribution")
    st.altair_chart(chart, width="stretch")


def _render_summary(summary: FinancialSummary) -> None:
    """Render the key figures of a household summary."""
    currency = summary.currency_code
    passive_col, expenses_col, net_worth_col = st.columns(3)
    passive_col.metric(
        "Monthly Passive Income",
        _format_currency(summary.total_monthly_passive_income, currency),
    )
    expenses_col.metric(
        "Monthly Expenses",
        _format_currency(summary.total_monthly_expenses, currency),
    )
    net_worth_col.metric(
        "Net Worth",
        _format_currency(summary.net_worth, currency),
    )

    assets_col, liabilities_col = st.columns(2)
    assets_col.metric(
        "Total Assets",
        _format_currency(summary.total_assets, currency),
    )
    liabilities_col.metric(
        "Total Liabilities",
        _format_currency(summary.total_liabilities, currency),
    )

    _render_asset_distribution_chart(summary)

    expenses_table, income_table = st.columns(2)
    with expenses_table:
        st.subheader("Expenses")
        st.dataframe(_expense_rows(summary), hide_index=True)
    with income_table:
        st.subheader("Passive Income")
        st.dataframe(_passive_income_rows(summary), hide_index=True)

    counts = summary.counts
    st.caption(
        f"{counts.properties} properties, {counts.bank_accounts} bank accounts, "
        f"{counts.vehicles} vehicles, {counts.credits} credits, "
        f"{counts.subscriptions} subscriptions, {counts.stocks} stocks, "
        f"{counts.passive_incomes} passive incomes, "
        f"{counts.investments} investments"
    )


def _render_dashboard(dashboard: DashboardSummary | None) -> None:
    """Render the featured household of a user, if any."""
    if dashboard is None:
        st.info("No households found for this user.")
        return
    st.caption(
        f"Household {dashboard.household_id} "
        f"(1 of {dashboard.household_count})"
    )
    _render_summary(dashboard.summary)


def _render_rates(rates: Sequence[CurrencyRate]) -> None:
    """Render the stored currency rates."""
    st.subheader("Currency Rates")
    if not rates:
        st.warning(
            "No currency rates stored. Amounts in other currencies are "
            "summed unconverted."
        )
        return
    data = [
        {
            "From": rate.from_currency,
            "To": rate.to_currency,
            "Rate": f"{rate.rate:.4f}",
        }
        for rate in rates
    ]
    st.dataframe(data, hide_index=True)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Household Finance", layout="wide")
    st.title("Household Finance")

    page = st.sidebar.selectbox(
        "Page",
        ["Dashboard", "Household", "Currency Rates"],
    )
    get_usage_logger().info(f"page_view page={page}")

    if page == "Dashboard":
        user_id = int(
            st.sidebar.number_input("User", min_value=1, step=1, value=1)
        )
        _render_dashboard(_load_dashboard_summary(user_id))
    elif page == "Household":
        household_id = int(
            st.sidebar.number_input("Household", min_value=1, step=1, value=1)
        )
        currencies = list(CURRENCIES)
        currency_code = st.sidebar.selectbox(
            "Currency",
            currencies,
            index=currencies.index(DEFAULT_CURRENCY),
        )
        summary = _load_household_summary(household_id, currency_code)
        _render_summary(summary)
    else:
        _render_rates(_load_currency_rates())


if __name__ == "__main__":  # pragma: no cover
    main()
