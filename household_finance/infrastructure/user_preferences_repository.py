"""SQLAlchemy repository for user display preferences."""

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from household_finance.application.errors import UserRecordError
from household_finance.application.ports.database import DatabaseEnginePort
from household_finance.application.ports.user_preferences import (
    UserPreferencesPort,
)
from household_finance.domain.constants import DEFAULT_CURRENCY

SELECT_DEFAULT_CURRENCY_SQL = text(
    """
    SELECT default_currency
    FROM users
    WHERE id = :user_id
    """
)


class SqlAlchemyUserPreferencesRepository(UserPreferencesPort):
    """Read user preferences from the users table."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        default_currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._db_port = db_port
        self._default_currency = default_currency

    def fetch_default_currency(self, user_id: int) -> str:
        """Return the user's reporting currency.

        Raises:
            UserRecordError: When the users table cannot be queried.
        """
        engine = self._db_port.get_engine()
        try:
            with engine.connect() as conn:
                row = conn.execute(
                    SELECT_DEFAULT_CURRENCY_SQL,
                    {"user_id": user_id},
                ).first()
        except SQLAlchemyError as exc:
            raise UserRecordError("users", user_id) from exc
        if not row or not row.default_currency:
            return self._default_currency
        return row.default_currency


__all__ = ["SqlAlchemyUserPreferencesRepository"]
