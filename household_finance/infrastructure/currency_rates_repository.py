"""SQLAlchemy provider for stored currency rates."""

from decimal import Decimal

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from household_finance.application.errors import CurrencyRateProviderError
from household_finance.application.ports.currency_rates import (
    CurrencyRateProviderPort,
)
from household_finance.application.ports.database import DatabaseEnginePort
from household_finance.domain.models import CurrencyRate
from household_finance.utils.decimal_utils import coerce_decimal

SELECT_RATE_SQL = text(
    """
    SELECT from_currency, to_currency, rate
    FROM currency_rates
    WHERE from_currency = :from_currency AND to_currency = :to_currency
    LIMIT 1
    """
)

SELECT_RATES_SQL = text(
    """
    SELECT from_currency, to_currency, rate
    FROM currency_rates
    ORDER BY from_currency, to_currency
    """
)


class SqlAlchemyCurrencyRateProvider(CurrencyRateProviderPort):
    """Currency rate provider backed by the currency_rates table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the provider.

        Args:
            db_port: Port providing access to the database engine.
        """
        self._db_port = db_port

    def get_rate(
        self,
        from_currency: str,
        to_currency: str,
    ) -> CurrencyRate | None:
        """Return the stored rate for an ordered pair.

        Args:
            from_currency: Source currency code.
            to_currency: Target currency code.

        Returns:
            CurrencyRate | None: Stored rate, exactly 1 for identical codes,
            or None when no row exists.

        Raises:
            CurrencyRateProviderError: When the query fails.
        """
        if from_currency == to_currency:
            return CurrencyRate(from_currency, to_currency, Decimal("1"))
        engine = self._db_port.get_engine()
        try:
            with engine.connect() as conn:
                row = conn.execute(
                    SELECT_RATE_SQL,
                    {
                        "from_currency": from_currency,
                        "to_currency": to_currency,
                    },
                ).first()
        except SQLAlchemyError as exc:
            raise CurrencyRateProviderError(from_currency, to_currency) from exc
        if not row:
            return None
        return CurrencyRate(
            from_currency=row.from_currency,
            to_currency=row.to_currency,
            rate=coerce_decimal(row.rate),
        )

    def list_rates(self) -> list[CurrencyRate]:
        engine = self._db_port.get_engine()
        try:
            with engine.connect() as conn:
                rows = conn.execute(SELECT_RATES_SQL).all()
        except SQLAlchemyError as exc:
            raise CurrencyRateProviderError("*", "*") from exc
        return [
            CurrencyRate(
                from_currency=row.from_currency,
                to_currency=row.to_currency,
                rate=coerce_decimal(row.rate),
            )
            for row in rows
        ]


__all__ = ["SqlAlchemyCurrencyRateProvider"]
