"""Unit tests for caseintel.normalization.fields."""

import pytest

from caseintel.normalization.fields import (
    clean_text,
    coerce_list,
    encode_list,
    joined_text,
    resolve_field,
    resolve_list,
    resolve_text,
)
from caseintel.normalization.reference_data import FIELD_SYNONYMS


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("  Claims\tbacklog\r\nacross  regions  ", "Claims backlog across regions"),
        (None, ""),
        (0, ""),
        (False, ""),
        ([], ""),
        (["Collections", None, "", "Recovery"], "Collections, Recovery"),
        (42, "42"),
    ],
)
def test_clean_text(raw, expected):
    """Whitespace is collapsed and falsy values become empty strings."""
    assert clean_text(raw) == expected


def test_joined_text_lowercases_and_skips_empty_values():
    assert joined_text("Credit Card", None, "", "  DISPUTES ") == "credit card disputes"


def test_resolve_field_uses_first_synonym_with_content():
    """Blank candidates are passed over in favour of later synonyms."""
    record = {"client_industry": "   ", "Client Industry": None, "industry": "Retail"}
    assert resolve_field(record, FIELD_SYNONYMS["client_industry"]) == "Retail"


def test_resolve_field_returns_raw_value():
    record = {"services": ["Collections", "Recovery"]}
    assert resolve_field(record, FIELD_SYNONYMS["services_provided"]) == ["Collections", "Recovery"]


@pytest.mark.parametrize("record", [None, "title", 42, ["title"]])
def test_resolve_field_non_mapping_is_missing(record):
    assert resolve_field(record, FIELD_SYNONYMS["title"]) == ""


def test_resolve_text_and_list_use_synonym_table():
    record = {"Business Challenge": " Slow\nclaims ", "tech_stack": "UiPath; Genesys"}
    assert resolve_text(record, "business_challenge") == "Slow claims"
    assert resolve_list(record, "technologies_used") == ["UiPath", "Genesys"]
    assert resolve_text(record, "title") == ""


@pytest.mark.parametrize(
    "raw,expected",
    [
        (["UiPath ", "", None, " Genesys"], ["UiPath", "Genesys"]),
        (("a", "b"), ["a", "b"]),
        ('["UiPath", "Salesforce", ""]', ["UiPath", "Salesforce"]),
        ("[1, 2]", ["1", "2"]),
        ("Collections; Recovery | Billing, Audit/KYC", ["Collections", "Recovery", "Billing", "Audit", "KYC"]),
        ("[not json]", ["[not json]"]),
        ("single value", ["single value"]),
        ("", []),
        (None, []),
        (42, []),
        (True, []),
        ({"a": 1}, []),
    ],
)
def test_coerce_list(raw, expected):
    """Array-like values of every supported shape become clean string lists."""
    assert coerce_list(raw) == expected


def test_encode_list_json_and_native():
    values = ["Finance, Accounting, & Claims"]
    assert encode_list(values) == '["Finance, Accounting, & Claims"]'
    assert encode_list([], "json") == "[]"

    native = encode_list(values, "native")
    assert native == values
    assert native is not values


def test_encode_list_rejects_unknown_encoding():
    with pytest.raises(ValueError):
        encode_list(["x"], "csv")


def test_json_encoded_commas_survive_decoding():
    """Silo names containing commas must round-trip through the JSON encoding."""
    encoded = encode_list(["Risk, Compliance, & Trust", "HR & People Services"])
    assert coerce_list(encoded) == ["Risk, Compliance, & Trust", "HR & People Services"]
