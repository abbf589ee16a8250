"""Typed details for the investment categories."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class CryptocurrencyDetails:
    """Details of a cryptocurrency holding."""

    ticker: str | None = None
    quantity: Decimal | None = None
    platform: str | None = None


@dataclass(frozen=True)
class BusinessDetails:
    """Details of an ownership stake in a business."""

    ownership: Decimal | None = None
    industry: str | None = None
    annual_revenue: Decimal | None = None


@dataclass(frozen=True)
class DomainDetails:
    """Details of a registered internet domain."""

    domain_name: str | None = None
    registrar: str | None = None
    expiry_date: str | None = None


@dataclass(frozen=True)
class CollectibleDetails:
    """Details of a collectible item."""

    category: str | None = None
    condition: str | None = None
    authenticity: str | None = None


@dataclass(frozen=True)
class IntellectualPropertyDetails:
    """Details of a patent, trademark, or copyright."""

    ip_type: str | None = None
    registration_number: str | None = None
    expiry_date: str | None = None


@dataclass(frozen=True)
class OtherDetails:
    """Free-form details for investment types without a dedicated schema."""

    attributes: dict[str, object] = field(default_factory=dict)


InvestmentDetails = (
    CryptocurrencyDetails
    | BusinessDetails
    | DomainDetails
    | CollectibleDetails
    | IntellectualPropertyDetails
    | OtherDetails
)


__all__ = [
    "BusinessDetails",
    "CollectibleDetails",
    "CryptocurrencyDetails",
    "DomainDetails",
    "IntellectualPropertyDetails",
    "InvestmentDetails",
    "OtherDetails",
]
