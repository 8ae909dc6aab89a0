"""Tests for the generic wait helpers."""

import time

import pytest

from fakes import FakeElement
from zureo_api import locators
from zureo_api.errors import ElementTimeoutError, RemoteNavigationError
from zureo_api.waits import (
    clear_field,
    find_modal,
    first_of,
    navigate,
    wait_document_ready,
    wait_for_element,
    wait_until,
)


def test_wait_until_returns_predicate_value(driver):
    calls = []

    def predicate(d):
        calls.append(1)
        return "ready" if len(calls) >= 3 else False

    assert wait_until(driver, predicate, 1, "countdown", poll=0.01) == "ready"
    assert len(calls) == 3


def test_wait_until_names_step_and_respects_deadline(driver):
    start = time.monotonic()
    with pytest.raises(ElementTimeoutError) as info:
        wait_until(driver, lambda d: False, 0.2, "never", poll=0.01)
    elapsed = time.monotonic() - start

    assert info.value.step == "never"
    assert info.value.context == "never"
    assert info.value.status_code == 504
    assert "never" in str(info.value)
    assert elapsed < 1


def test_wait_for_element_clickable(driver, zureo):
    zureo.url = "https://go.zureo.test/"
    submit = wait_for_element(driver, locators.LOGIN_SUBMIT, 0.2, "submit", clickable=True, poll=0.01)
    assert submit is zureo.submit


def test_wait_for_element_disabled_times_out(driver, zureo):
    zureo.url = "https://go.zureo.test/"
    zureo.submit.enabled = False
    with pytest.raises(ElementTimeoutError):
        wait_for_element(driver, locators.LOGIN_SUBMIT, 0.1, "submit", clickable=True, poll=0.01)


def test_document_never_ready_is_navigation_error(driver, zureo):
    zureo.ready_state = "loading"
    with pytest.raises(RemoteNavigationError) as info:
        wait_document_ready(driver, 0.1, "some page", poll=0.01)
    assert info.value.context == "some page"
    assert info.value.status_code == 502


def test_navigate_loads_page(driver, zureo):
    navigate(driver, "https://go.zureo.test/", 0.2, "login page", poll=0.01)
    assert driver.visited == ["https://go.zureo.test/"]


def test_first_of_picks_the_condition_that_holds(driver):
    outcome = first_of(driver, 0.2, 0.01, first=lambda d: False, second=lambda d: True)
    assert outcome == "second"


def test_first_of_timeout_is_not_an_error(driver):
    assert first_of(driver, 0.05, 0.01, anything=lambda d: False) is None


def test_find_modal_matches_body_text(driver, zureo):
    zureo.modal = zureo._modal("Se ajustará el stock del artículo", lambda: None)
    assert find_modal(driver, locators.CONFIRM_ADJUSTMENT_TEXT) is zureo.modal
    assert find_modal(driver, locators.ACTIVE_SESSION_TEXT) is None


def test_clear_field_empties_value(driver):
    field = FakeElement(value="ABC123")
    clear_field(driver, field)
    assert field.value == ""
    assert field.clicks == 1


def test_wait_until_ignores_stale_elements(driver):
    from selenium.common.exceptions import StaleElementReferenceException

    calls = []

    def predicate(d):
        calls.append(1)
        if len(calls) == 1:
            raise StaleElementReferenceException("re-rendered")
        return "fresh"

    assert wait_until(driver, predicate, 1, "re-render", poll=0.01) == "fresh"
