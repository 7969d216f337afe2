"""Tests for amount parsing."""

import pytest
from decimal import Decimal
from contabook.utils.amount_parser import parse_amount, parse_amount_or_default


def test_parse_plain_and_signed_amounts():
    """Test parsing plain, negative and currency-prefixed amounts."""
    assert parse_amount("123.45") == Decimal("123.45")
    assert parse_amount("-123.45") == Decimal("-123.45")
    assert parse_amount("$123.45") == Decimal("123.45")


def test_parse_strips_thousands_separators():
    """Test that commas are removed."""
    assert parse_amount("1,234,567.89") == Decimal("1234567.89")


def test_parse_parentheses_negative():
    """Test accounting notation for negatives."""
    assert parse_amount("(1,000)") == Decimal("-1000")


@pytest.mark.parametrize("value", ["", "   ", "abc", "12abc", "nan", "inf"])
def test_parse_invalid_amount_raises(value):
    """Test that unparseable strings raise ValueError."""
    with pytest.raises(ValueError):
        parse_amount(value)


def test_or_default_accepts_numbers():
    """Spreadsheet numbers are converted without float noise."""
    assert parse_amount_or_default(1190) == Decimal("1190")
    assert parse_amount_or_default(0.1) == Decimal("0.1")
    assert parse_amount_or_default(Decimal("5.50")) == Decimal("5.50")


def test_or_default_on_malformed_values():
    """Malformed cells yield the default instead of raising."""
    assert parse_amount_or_default("abc") == Decimal("0")
    assert parse_amount_or_default(None) == Decimal("0")
    assert parse_amount_or_default(True) == Decimal("0")
    assert parse_amount_or_default(float("nan")) == Decimal("0")
    assert parse_amount_or_default("abc", None) is None
