"""Tests for locale quantity parsing."""

from decimal import Decimal

import pytest

from zureo_api.errors import InvalidQuantityError
from zureo_api.quantity import parse_quantity, same_quantity


@pytest.mark.parametrize("text, expected", [
    ("10,5", Decimal("10.5")),
    ("7", Decimal("7")),
    ("1.234,5", Decimal("1234.5")),
    ("1.250.000", Decimal("1250000")),
    (" -3,25 ", Decimal("-3.25")),
    ("0,0", Decimal("0")),
])
def test_parse_quantity(text, expected):
    assert parse_quantity(text) == expected


@pytest.mark.parametrize("text", ["", "   ", None, "abc", "1,2,3", "NaN", "Infinity", "1e5", "1_000", "+5", "."])
def test_parse_quantity_rejects_garbage(text):
    with pytest.raises(InvalidQuantityError):
        parse_quantity(text)


def test_invalid_quantity_is_client_error():
    with pytest.raises(InvalidQuantityError) as info:
        parse_quantity("x")
    assert info.value.status_code == 400


def test_same_quantity_ignores_formatting():
    assert same_quantity("1.234,50", "1234,5")
    assert same_quantity("10,5", "10,50")
    assert not same_quantity("10", "10,5")


def test_same_quantity_unparsable_field_is_unequal():
    assert not same_quantity("", "10,5")
    assert not same_quantity(None, "10,5")
