from selenium.common.exceptions import StaleElementReferenceException, TimeoutException
from selenium.webdriver.common.by import By
from selenium.webdriver.common.keys import Keys
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from . import locators
from .errors import ElementTimeoutError, RemoteNavigationError
from .logger import get_logger

log = get_logger("wait")

DEFAULT_POLL = 0.25
# Angular re-renders suggestions and modals while they are polled
IGNORED = (StaleElementReferenceException,)

READY_STATE_JS = "return document.readyState;"
JS_CLICK = "arguments[0].scrollIntoView({block:'center'}); arguments[0].click();"
BLANK_FIELD_JS = "arguments[0].focus(); arguments[0].value = '';"
SET_VALUE_JS = """
    arguments[0].focus();
    arguments[0].value = arguments[1];
    arguments[0].dispatchEvent(new Event('input', { bubbles: true }));
    arguments[0].dispatchEvent(new Event('change', { bubbles: true }));
"""


def wait_until(driver, predicate, timeout, step, poll=DEFAULT_POLL):
    """Poll `predicate(driver)` until truthy and return its value.

    Raises ElementTimeoutError naming `step` once `timeout` seconds pass.
    """
    log.debug(f"Waiting up to {timeout:g}s for: {step}")
    try:
        return WebDriverWait(driver, timeout, poll_frequency=poll, ignored_exceptions=IGNORED).until(predicate)
    except TimeoutException:
        log.warning(f"Timeout after {timeout:g}s: {step}")
        raise ElementTimeoutError(step, timeout) from None


def wait_for_element(driver, css, timeout, step, clickable=False, poll=DEFAULT_POLL):
    condition = EC.element_to_be_clickable if clickable else EC.presence_of_element_located
    return wait_until(driver, condition((By.CSS_SELECTOR, css)), timeout, step, poll)


def document_ready(driver):
    return driver.execute_script(READY_STATE_JS) == "complete"


def wait_document_ready(driver, timeout, step, poll=DEFAULT_POLL):
    try:
        wait_until(driver, document_ready, timeout, step, poll)
    except ElementTimeoutError:
        raise RemoteNavigationError(
            f"La página no terminó de cargar en {timeout:g}s", context=step
        ) from None


def navigate(driver, url, timeout, step, poll=DEFAULT_POLL):
    log.info(f"Navigating to {url}")
    try:
        driver.get(url)
    except TimeoutException:
        raise RemoteNavigationError(
            f"La página no terminó de cargar en {timeout:g}s", context=step
        ) from None
    wait_document_ready(driver, timeout, step, poll)


def first_of(driver, timeout, poll=DEFAULT_POLL, **conditions):
    """Return the name of the first condition that holds, None on timeout.

    Conditions are checked in the given order on every poll.
    """
    def _any(d):
        for name, condition in conditions.items():
            if condition(d):
                return name
        return False

    try:
        return WebDriverWait(driver, timeout, poll_frequency=poll, ignored_exceptions=IGNORED).until(_any)
    except TimeoutException:
        return None


def find_modal(driver, text):
    """The modal whose body contains `text`, or None."""
    for modal in driver.find_elements(By.CSS_SELECTOR, locators.MODAL):
        for body in modal.find_elements(By.CSS_SELECTOR, locators.MODAL_BODY):
            if text in body.text:
                return modal
    return None


def js_click(driver, element):
    driver.execute_script(JS_CLICK, element)


def set_value(driver, element, value):
    driver.execute_script(SET_VALUE_JS, element, value)


def clear_field(driver, element):
    driver.execute_script(BLANK_FIELD_JS, element)
    element.click()
    element.send_keys(Keys.CONTROL, "a")
    element.send_keys(Keys.BACKSPACE)
