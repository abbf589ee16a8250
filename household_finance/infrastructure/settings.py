"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from household_finance.domain.constants import (
    ASSET_CATEGORY_LABELS,
    DEFAULT_ASSET_CATEGORIES,
    DEFAULT_CURRENCY,
)
from household_finance.domain.policies import is_known_currency
from household_finance.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class FinanceSettings:
    """Settings for household summary reporting.

    Attributes:
        default_currency: Reporting currency used when a user has none.
        asset_categories: Categories counted in total assets.
    """

    default_currency: str = DEFAULT_CURRENCY
    asset_categories: tuple[str, ...] = DEFAULT_ASSET_CATEGORIES

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables.

        Returns:
            FinanceSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        currency = (
            os.getenv("DEFAULT_CURRENCY", DEFAULT_CURRENCY).strip().upper()
            or DEFAULT_CURRENCY
        )
        if not is_known_currency(currency):
            logger.warning(
                f"DEFAULT_CURRENCY={currency} has no display metadata"
            )
        raw_categories = os.getenv("ASSET_CATEGORIES")
        categories = DEFAULT_ASSET_CATEGORIES
        if raw_categories:
            categories = cls._parse_categories(raw_categories, logger=logger)
        return cls(default_currency=currency, asset_categories=categories)

    @staticmethod
    def _parse_categories(raw: str, logger) -> tuple[str, ...]:
        """Parse a comma-separated asset category list.

        Args:
            raw: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            tuple[str, ...]: Known categories in the given order, or the
            default composition when none are known.
        """
        categories = []
        for item in raw.split(","):
            category = item.strip().lower()
            if not category:
                continue
            if category not in ASSET_CATEGORY_LABELS:
                logger.warning(f"Ignoring unknown asset category: {category}")
                continue
            if category not in categories:
                categories.append(category)
        if not categories:
            return DEFAULT_ASSET_CATEGORIES
        return tuple(categories)


__all__ = ["FinanceSettings"]
