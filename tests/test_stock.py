"""Tests for the stock report script."""

import pytest

from zureo_api import locators
from zureo_api.errors import ElementTimeoutError, NotFoundError
from zureo_api.login import login, resolve_credentials
from zureo_api.stock import get_stock


@pytest.fixture
def session_driver(driver, settings):
    login(driver, settings, resolve_credentials(settings))
    return driver


def test_get_stock_reads_heading_verbatim(session_driver, settings):
    assert get_stock(session_driver, settings, "XYZ789") == {"sku": "XYZ789", "stock": "1.250,75"}


def test_get_stock_is_idempotent(session_driver, settings, zureo):
    first = get_stock(session_driver, settings, "ABC123")
    second = get_stock(session_driver, settings, "ABC123")

    assert first == second == {"sku": "ABC123", "stock": "5"}
    # the second lookup had to clear the previous search first
    assert zureo.stock_input.value == "ABC123"


def test_get_stock_after_other_sku(session_driver, settings):
    get_stock(session_driver, settings, "ABC123")
    assert get_stock(session_driver, settings, "XYZ789")["stock"] == "1.250,75"


def test_unknown_sku_times_out_on_suggestion(session_driver, settings):
    with pytest.raises(ElementTimeoutError) as info:
        get_stock(session_driver, settings, "NOPE")
    assert info.value.step == "article suggestion"


def test_blank_heading_is_not_found(session_driver, settings, zureo):
    zureo.stocks["ABC123"] = "   "
    with pytest.raises(NotFoundError):
        get_stock(session_driver, settings, "ABC123")


def test_missing_query_button_names_step(session_driver, settings, zureo):
    zureo.hidden.add(locators.STOCK_QUERY_BUTTON)
    with pytest.raises(ElementTimeoutError) as info:
        get_stock(session_driver, settings, "ABC123")
    assert info.value.step == "query button"


def test_stale_suggestion_is_polled_again(session_driver, settings, zureo):
    zureo.stale_suggestions = 1
    assert get_stock(session_driver, settings, "ABC123")["stock"] == "5"
