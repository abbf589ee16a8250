"""Domain policies package."""

from .currency_policies import is_known_currency

__all__ = ["is_known_currency"]
