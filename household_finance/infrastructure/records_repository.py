"""SQLAlchemy repository for household financial records."""

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from household_finance.application.errors import (
    RecordRepositoryError,
    UserRecordError,
)
from household_finance.application.ports.database import DatabaseEnginePort
from household_finance.application.ports.records_repository import (
    HouseholdRecordsRepositoryPort,
)
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
from household_finance.domain.services.investment_details import (
    normalize_investment_type,
    parse_investment_details,
)
from household_finance.infrastructure.logging.logger import get_app_logger
from household_finance.utils.decimal_utils import (
    coerce_decimal,
    coerce_optional_decimal,
)

SELECT_HOUSEHOLD_IDS_SQL = text(
    """
    SELECT h.id
    FROM households h
    JOIN household_members hm ON hm.household_id = h.id
    WHERE hm.user_id = :user_id
    ORDER BY h.created_at ASC, h.id ASC
    """
)

SELECT_PROPERTIES_SQL = text(
    """
    SELECT name, price, currency, maintenance_amount, yearly_tax
    FROM properties
    WHERE household_id = :household_id
    ORDER BY created_at DESC
    """
)

SELECT_BANK_ACCOUNTS_SQL = text(
    """
    SELECT name, amount, currency, interest_rate
    FROM bank_accounts
    WHERE household_id = :household_id
    ORDER BY created_at DESC
    """
)

SELECT_VEHICLES_SQL = text(
    """
    SELECT name, sale_price, currency, maintenance_costs
    FROM vehicles
    WHERE household_id = :household_id
    ORDER BY created_at DESC
    """
)

SELECT_CREDITS_SQL = text(
    """
    SELECT name, total_amount, remaining_amount, monthly_payment, currency
    FROM credits
    WHERE household_id = :household_id
    ORDER BY created_at DESC
    """
)

SELECT_SUBSCRIPTIONS_SQL = text(
    """
    SELECT name, price, currency, billing_cycle
    FROM subscriptions
    WHERE household_id = :household_id
    ORDER BY created_at DESC
    """
)

SELECT_STOCKS_SQL = text(
    """
    SELECT symbol, shares, purchase_price, current_price, dividend_yield,
           currency
    FROM stocks
    WHERE household_id = :household_id
    ORDER BY symbol ASC
    """
)

SELECT_PASSIVE_INCOME_SQL = text(
    """
    SELECT name, amount, frequency, currency
    FROM passive_income
    WHERE household_id = :household_id
    ORDER BY created_at DESC
    """
)

SELECT_INVESTMENTS_SQL = text(
    """
    SELECT name, type, amount, current_value, currency, metadata
    FROM investments
    WHERE household_id = :household_id
    ORDER BY created_at DESC
    """
)


class SqlAlchemyHouseholdRecordsRepository(HouseholdRecordsRepositoryPort):
    """Repository reading household records with SQLAlchemy Core."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the database engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_household_ids(self, user_id: int) -> list[int]:
        engine = self._db_port.get_engine()
        try:
            with engine.connect() as conn:
                rows = conn.execute(
                    SELECT_HOUSEHOLD_IDS_SQL,
                    {"user_id": user_id},
                ).all()
        except SQLAlchemyError as exc:
            raise UserRecordError("households", user_id) from exc
        return [row.id for row in rows]

    def fetch_properties(self, household_id: int) -> list[PropertyRecord]:
        rows = self._fetch_rows("properties", SELECT_PROPERTIES_SQL, household_id)
        return [
            PropertyRecord(
                name=row.name,
                price=coerce_decimal(row.price),
                currency=row.currency,
                maintenance_amount=coerce_decimal(row.maintenance_amount),
                yearly_tax=coerce_decimal(row.yearly_tax),
            )
            for row in rows
        ]

    def fetch_bank_accounts(
        self,
        household_id: int,
    ) -> list[BankAccountRecord]:
        rows = self._fetch_rows(
            "bank_accounts",
            SELECT_BANK_ACCOUNTS_SQL,
            household_id,
        )
        return [
            BankAccountRecord(
                name=row.name,
                amount=coerce_decimal(row.amount),
                currency=row.currency,
                interest_rate=coerce_optional_decimal(row.interest_rate),
            )
            for row in rows
        ]

    def fetch_vehicles(self, household_id: int) -> list[VehicleRecord]:
        rows = self._fetch_rows("vehicles", SELECT_VEHICLES_SQL, household_id)
        return [
            VehicleRecord(
                name=row.name,
                sale_price=coerce_decimal(row.sale_price),
                currency=row.currency,
                maintenance_costs=coerce_decimal(row.maintenance_costs),
            )
            for row in rows
        ]

    def fetch_credits(self, household_id: int) -> list[CreditRecord]:
        rows = self._fetch_rows("credits", SELECT_CREDITS_SQL, household_id)
        return [
            CreditRecord(
                name=row.name,
                total_amount=coerce_optional_decimal(row.total_amount),
                remaining_amount=coerce_decimal(row.remaining_amount),
                monthly_payment=coerce_decimal(row.monthly_payment),
                currency=row.currency,
            )
            for row in rows
        ]

    def fetch_subscriptions(
        self,
        household_id: int,
    ) -> list[SubscriptionRecord]:
        rows = self._fetch_rows(
            "subscriptions",
            SELECT_SUBSCRIPTIONS_SQL,
            household_id,
        )
        return [
            SubscriptionRecord(
                name=row.name,
                price=coerce_decimal(row.price),
                currency=row.currency,
                billing_cycle=row.billing_cycle,
            )
            for row in rows
        ]

    def fetch_stocks(self, household_id: int) -> list[StockRecord]:
        rows = self._fetch_rows("stocks", SELECT_STOCKS_SQL, household_id)
        return [
            StockRecord(
                symbol=row.symbol,
                shares=coerce_decimal(row.shares),
                purchase_price=coerce_optional_decimal(row.purchase_price),
                current_price=coerce_optional_decimal(row.current_price),
                dividend_yield=coerce_optional_decimal(row.dividend_yield),
                currency=row.currency,
            )
            for row in rows
        ]

    def fetch_passive_incomes(
        self,
        household_id: int,
    ) -> list[PassiveIncomeRecord]:
        rows = self._fetch_rows(
            "passive_income",
            SELECT_PASSIVE_INCOME_SQL,
            household_id,
        )
        return [
            PassiveIncomeRecord(
                name=row.name,
                amount=coerce_decimal(row.amount),
                frequency=row.frequency,
                currency=row.currency,
            )
            for row in rows
        ]

    def fetch_investments(self, household_id: int) -> list[InvestmentRecord]:
        rows = self._fetch_rows(
            "investments",
            SELECT_INVESTMENTS_SQL,
            household_id,
        )
        return [
            InvestmentRecord(
                name=row.name,
                investment_type=normalize_investment_type(row.type),
                amount=coerce_decimal(row.amount),
                current_value=coerce_optional_decimal(row.current_value),
                currency=row.currency,
                details=parse_investment_details(
                    row.type,
                    row.metadata,
                    logger=self._logger,
                ),
            )
            for row in rows
        ]

    def _fetch_rows(self, category: str, query, household_id: int) -> list:
        engine = self._db_port.get_engine()
        try:
            with engine.connect() as conn:
                return conn.execute(
                    query,
                    {"household_id": household_id},
                ).all()
        except SQLAlchemyError as exc:
            raise RecordRepositoryError(category, household_id) from exc


__all__ = ["SqlAlchemyHouseholdRecordsRepository"]
