"""Database ports for the household finance dashboard.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide
concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the household finance database engine.

    Application use cases can depend on this protocol instead of concrete
    database drivers or configuration details.
    """

    def get_engine(self) -> Engine:
        """Get the engine for the household finance database.

        Returns:
            Engine: SQLAlchemy engine connected to the application database.
        """


__all__ = ["DatabaseEnginePort"]
