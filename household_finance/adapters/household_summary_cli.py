"""CLI adapter to print the financial summary of a household."""

import os

from household_finance.infrastructure.container import (
    build_household_summary_use_case,
)
from household_finance.infrastructure.logging.logger import get_app_logger


def _parse_int(name: str, value: str | None, logger) -> int | None:
    """Parse an integer environment value.

    Args:
        name: Environment variable name, used in warnings.
        value: Raw value.
        logger: Logger used for warnings.

    Returns:
        int | None: Parsed integer or None when missing or invalid.
    """
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid {name} '{value}'. Expected an integer.")
        return None


def main() -> None:
    """Compute and print the summary of HOUSEHOLD_ID."""
    logger = get_app_logger()
    household_id = _parse_int(
        "HOUSEHOLD_ID",
        os.getenv("HOUSEHOLD_ID"),
        logger,
    )
    if household_id is None:
        logger.warning("HOUSEHOLD_ID is required to print a summary.")
        return
    user_id = _parse_int("SUMMARY_USER_ID", os.getenv("SUMMARY_USER_ID"), logger)
    target_currency = os.getenv("SUMMARY_CURRENCY") or None

    use_case = build_household_summary_use_case()
    summary = use_case.execute(
        household_id,
        target_currency=target_currency,
        user_id=user_id,
    )

    currency = summary.currency_code
    print(f"Household {household_id} summary ({currency})")
    print(
        f"assets={summary.total_assets:.2f}, "
        f"liabilities={summary.total_liabilities:.2f}, "
        f"net_worth={summary.net_worth:.2f}"
    )
    print(
        f"monthly_expenses={summary.total_monthly_expenses:.2f}, "
        f"annual_expenses={summary.total_annual_expenses:.2f}"
    )
    print(
        f"monthly_passive_income={summary.total_monthly_passive_income:.2f}, "
        f"annual_passive_income={summary.total_annual_passive_income:.2f}"
    )
    for item in summary.asset_distribution:
        print(f"  {item.label}: {item.value:.2f} ({item.percentage:.1f}%)")


if __name__ == "__main__":  # pragma: no cover
    main()
