import time

from selenium.webdriver.common.by import By

from . import locators
from .errors import AuthenticationError, ElementTimeoutError, RemoteNavigationError
from .logger import get_logger
from .waits import (
    document_ready,
    find_modal,
    first_of,
    js_click,
    navigate,
    wait_for_element,
    wait_until,
)

log = get_logger("login")


def resolve_credentials(settings, email=None, password=None):
    """Body credentials win over the configured ones; the company code is always configured."""
    credentials = {
        "company": settings.company,
        "email": email or settings.email,
        "password": password or settings.password,
    }
    missing = [name for name, value in credentials.items() if not value]
    if missing:
        raise AuthenticationError(f"Faltan credenciales de Zureo: {', '.join(missing)}")
    return credentials


def _type_into(driver, settings, css, value, step):
    field = wait_for_element(driver, css, settings.step_timeout, step, poll=settings.poll_interval)
    field.clear()
    field.send_keys(value)


def login(driver, settings, credentials):
    poll = settings.poll_interval

    # 1️⃣ Entry page
    driver.set_page_load_timeout(settings.nav_timeout)
    navigate(driver, settings.login_url, settings.nav_timeout, "login page", poll)
    start_url = driver.current_url

    def navigated(d):
        return d.current_url != start_url

    def active_session_modal(d):
        return find_modal(d, locators.ACTIVE_SESSION_TEXT) is not None

    # 2️⃣ Identification fields
    log.info("Filling login form...")
    _type_into(driver, settings, locators.COMPANY_INPUT, credentials["company"], "company field")
    _type_into(driver, settings, locators.USER_INPUT, credentials["email"], "user field")
    _type_into(driver, settings, locators.PASSWORD_INPUT, credentials["password"], "password field")

    # 3️⃣ Submit
    submit = wait_for_element(
        driver, locators.LOGIN_SUBMIT, settings.step_timeout, "login submit", clickable=True, poll=poll
    )
    submit.click()

    # 4️⃣ Navigation vs. "session active on another device"
    # the modal may also appear after the route change
    log.info("Checking for the active session modal...")
    probe_started = time.monotonic()
    outcome = first_of(
        driver,
        settings.modal_probe_timeout,
        poll,
        navigated=navigated,
        active_session_modal=active_session_modal,
    )
    if outcome == "navigated":
        remaining = settings.modal_probe_timeout - (time.monotonic() - probe_started)
        if remaining > 0 and first_of(driver, remaining, poll, active_session_modal=active_session_modal):
            outcome = "active_session_modal"
    if outcome == "active_session_modal":
        log.info("Active session modal shown, clicking 'Continuar'...")
        modal = find_modal(driver, locators.ACTIVE_SESSION_TEXT)
        buttons = modal.find_elements(By.CSS_SELECTOR, locators.MODAL_CONTINUE) if modal else []
        if buttons:
            js_click(driver, buttons[0])
    else:
        log.info("No active session modal appeared.")

    # 5️⃣ Wait for the app to settle
    try:
        wait_until(
            driver,
            lambda d: navigated(d) and document_ready(d),
            settings.nav_timeout,
            "login navigation",
            poll,
        )
    except ElementTimeoutError:
        raise RemoteNavigationError(
            f"Zureo no completó el inicio de sesión en {settings.nav_timeout:g}s",
            context="login navigation",
        ) from None

    log.info(f"LOGIN SUCCESS ({driver.current_url})")
