"""Errors surfaced by application ports and use cases."""


class RecordRepositoryError(RuntimeError):
    """Raised when household records cannot be read."""

    def __init__(self, category: str, household_id: int) -> None:
        super().__init__(
            f"Failed to load {category} for household {household_id}"
        )
        self.category = category
        self.household_id = household_id


class UserRecordError(RuntimeError):
    """Raised when records owned by a user cannot be read."""

    def __init__(self, category: str, user_id: int) -> None:
        super().__init__(f"Failed to load {category} for user {user_id}")
        self.category = category
        self.user_id = user_id


class CurrencyRateProviderError(RuntimeError):
    """Raised when the currency rate store cannot be queried."""

    def __init__(self, from_currency: str, to_currency: str) -> None:
        super().__init__(
            f"Failed to load FX rate for {from_currency} to {to_currency}"
        )
        self.from_currency = from_currency
        self.to_currency = to_currency


__all__ = [
    "CurrencyRateProviderError",
    "RecordRepositoryError",
    "UserRecordError",
]
