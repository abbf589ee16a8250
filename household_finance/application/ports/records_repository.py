"""Port for reading household financial records."""

from typing import Protocol

from household_finance.domain.models import (
    BankAccountRecord,
    CreditRecord,
    InvestmentRecord,
    PassiveIncomeRecord,
    PropertyRecord,
    StockRecord,
    SubscriptionRecord,
    VehicleRecord,
)


class HouseholdRecordsRepositoryPort(Protocol):
    """Port exposing read access to the records of a household."""

    def fetch_household_ids(self, user_id: int) -> list[int]:
        """Return the households a user belongs to, oldest first."""

    def fetch_properties(self, household_id: int) -> list[PropertyRecord]:
        """Return the properties of a household."""

    def fetch_bank_accounts(
        self,
        household_id: int,
    ) -> list[BankAccountRecord]:
        """Return the bank accounts of a household."""

    def fetch_vehicles(self, household_id: int) -> list[VehicleRecord]:
        """Return the vehicles of a household."""

    def fetch_credits(self, household_id: int) -> list[CreditRecord]:
        """Return the credits of a household."""

    def fetch_subscriptions(
        self,
        household_id: int,
    ) -> list[SubscriptionRecord]:
        """Return the subscriptions of a household."""

    def fetch_stocks(self, household_id: int) -> list[StockRecord]:
        """Return the stock positions of a household."""

    def fetch_passive_incomes(
        self,
        household_id: int,
    ) -> list[PassiveIncomeRecord]:
        """Return the passive income entries of a household."""

    def fetch_investments(self, household_id: int) -> list[InvestmentRecord]:
        """Return the miscellaneous investments of a household."""


__all__ = ["HouseholdRecordsRepositoryPort"]
