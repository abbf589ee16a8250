"""Parse untyped investment metadata into typed details."""

import json
from logging import Logger

from household_finance.domain.models import (
    BusinessDetails,
    CollectibleDetails,
    CryptocurrencyDetails,
    DomainDetails,
    IntellectualPropertyDetails,
    InvestmentDetails,
    OtherDetails,
)
from household_finance.utils.decimal_utils import coerce_optional_decimal

INVESTMENT_TYPE_ALIASES = {
    "crypto": "cryptocurrency",
    "ip": "intellectual_property",
}


def normalize_investment_type(investment_type: str | None) -> str:
    """Return the canonical investment type label.

    Args:
        investment_type: Raw type from a repository row.

    Returns:
        str: Lower-case canonical label, "other" when absent.
    """
    if not investment_type or not investment_type.strip():
        return "other"
    cleaned = investment_type.strip().lower()
    return INVESTMENT_TYPE_ALIASES.get(cleaned, cleaned)


def _load_metadata(metadata, logger: Logger | None) -> dict:
    if metadata is None:
        return {}
    if isinstance(metadata, dict):
        return metadata
    if isinstance(metadata, (str, bytes)):
        try:
            loaded = json.loads(metadata or "{}")
        except ValueError:
            if logger is not None:
                logger.warning("Ignoring unparseable investment metadata")
            return {}
        return loaded if isinstance(loaded, dict) else {}
    return {}


def _text(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is None or value == "":
        return None
    return str(value)


def parse_investment_details(
    investment_type: str | None,
    metadata,
    logger: Logger | None = None,
) -> InvestmentDetails:
    """Build the typed details variant for an investment type.

    Args:
        investment_type: Raw investment type label.
        metadata: Dict or JSON string stored alongside the investment.
        logger: Optional logger used when the metadata cannot be parsed.

    Returns:
        InvestmentDetails: Details variant matching the type.
    """
    data = _load_metadata(metadata, logger)
    kind = normalize_investment_type(investment_type)
    if kind == "cryptocurrency":
        return CryptocurrencyDetails(
            ticker=_text(data, "ticker"),
            quantity=coerce_optional_decimal(data.get("quantity")),
            platform=_text(data, "platform"),
        )
    if kind == "business":
        return BusinessDetails(
            ownership=coerce_optional_decimal(data.get("ownership")),
            industry=_text(data, "industry"),
            annual_revenue=coerce_optional_decimal(data.get("annualRevenue")),
        )
    if kind == "domain":
        return DomainDetails(
            domain_name=_text(data, "domainName"),
            registrar=_text(data, "registrar"),
            expiry_date=_text(data, "expiryDate"),
        )
    if kind == "collectible":
        return CollectibleDetails(
            category=_text(data, "category"),
            condition=_text(data, "condition"),
            authenticity=_text(data, "authenticity"),
        )
    if kind == "intellectual_property":
        return IntellectualPropertyDetails(
            ip_type=_text(data, "ipType"),
            registration_number=_text(data, "registrationNumber"),
            expiry_date=_text(data, "expiryDate"),
        )
    return OtherDetails(attributes=dict(data))


__all__ = [
    "INVESTMENT_TYPE_ALIASES",
    "normalize_investment_type",
    "parse_investment_details",
]
