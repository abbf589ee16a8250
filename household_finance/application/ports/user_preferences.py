"""Port for per-user display preferences."""

from typing import Protocol


class UserPreferencesPort(Protocol):
    """Port exposing user preferences needed for reporting."""

    def fetch_default_currency(self, user_id: int) -> str:
        """Return the user's reporting currency, USD when unset."""


__all__ = ["UserPreferencesPort"]
