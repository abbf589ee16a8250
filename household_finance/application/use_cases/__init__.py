"""Application use cases package."""

from .get_dashboard_summary import DashboardSummary, GetDashboardSummaryUseCase
from .get_household_summary import (
    FinancialSummary,
    GetHouseholdSummaryUseCase,
)

__all__ = [
    "DashboardSummary",
    "FinancialSummary",
    "GetDashboardSummaryUseCase",
    "GetHouseholdSummaryUseCase",
]
