"""Tests for investment metadata parsing."""

from decimal import Decimal
from unittest.mock import MagicMock

from household_finance.domain.models import (
    BusinessDetails,
    CollectibleDetails,
    CryptocurrencyDetails,
    DomainDetails,
    IntellectualPropertyDetails,
    OtherDetails,
)
from household_finance.domain.services.investment_details import (
    normalize_investment_type,
    parse_investment_details,
)


def test_normalize_investment_type() -> None:
    assert normalize_investment_type(None) == "other"
    assert normalize_investment_type("  ") == "other"
    assert normalize_investment_type("Crypto") == "cryptocurrency"
    assert normalize_investment_type("IP") == "intellectual_property"
    assert normalize_investment_type("Domain") == "domain"


def test_parses_cryptocurrency_metadata() -> None:
    details = parse_investment_details(
        "cryptocurrency",
        {"ticker": "BTC", "quantity": "0.5", "platform": "Kraken"},
    )

    assert details == CryptocurrencyDetails(
        ticker="BTC",
        quantity=Decimal("0.5"),
        platform="Kraken",
    )


def test_parses_json_metadata() -> None:
    details = parse_investment_details(
        "business",
        '{"ownership": 25, "industry": "Retail", "annualRevenue": "120000"}',
    )

    assert details == BusinessDetails(
        ownership=Decimal("25"),
        industry="Retail",
        annual_revenue=Decimal("120000"),
    )


def test_parses_remaining_typed_variants() -> None:
    domain = parse_investment_details(
        "domain",
        {"domainName": "example.com", "expiryDate": "2030-01-01"},
    )
    collectible = parse_investment_details(
        "collectible",
        {"category": "Coins", "condition": "Mint"},
    )
    patent = parse_investment_details(
        "ip",
        {"ipType": "patent", "registrationNumber": "US123"},
    )

    assert domain == DomainDetails(
        domain_name="example.com",
        expiry_date="2030-01-01",
    )
    assert collectible == CollectibleDetails(category="Coins", condition="Mint")
    assert patent == IntellectualPropertyDetails(
        ip_type="patent",
        registration_number="US123",
    )


def test_unknown_type_keeps_raw_attributes() -> None:
    details = parse_investment_details("art", {"artist": "Someone"})

    assert details == OtherDetails(attributes={"artist": "Someone"})


def test_invalid_json_metadata_is_ignored() -> None:
    logger = MagicMock()

    details = parse_investment_details("domain", "{not json", logger=logger)

    assert details == DomainDetails()
    logger.warning.assert_called_once()


def test_missing_metadata_yields_empty_details() -> None:
    assert parse_investment_details("cryptocurrency", None) == (
        CryptocurrencyDetails()
    )
