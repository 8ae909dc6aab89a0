import threading
import time
from datetime import datetime, timezone

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.options import Options

from .errors import NoSessionError, RemoteNavigationError
from .logger import get_logger
from .login import login, resolve_credentials

log = get_logger("session")


def create_driver(settings):
    options = Options()
    if settings.headless:
        options.add_argument("--headless=new")
    options.add_argument("--no-sandbox")
    options.add_argument("--disable-dev-shm-usage")
    options.add_argument("--disable-gpu")
    options.add_argument("--disable-blink-features=AutomationControlled")

    if settings.selenium_remote_url:
        log.info(f"Starting remote browser at {settings.selenium_remote_url}")
        return webdriver.Remote(command_executor=settings.selenium_remote_url, options=options)
    log.info("Starting local Chrome")
    return webdriver.Chrome(options=options)


def quit_driver(driver):
    try:
        driver.quit()
    except WebDriverException as e:
        log.warning(f"Browser did not close cleanly: {e.msg}")


class ZureoSession:
    """An authenticated browser on the Zureo web app."""

    def __init__(self, driver):
        self.driver = driver
        self.created_at = datetime.now(timezone.utc)
        self.last_used = time.monotonic()
        self.closed = False

    def touch(self):
        self.last_used = time.monotonic()

    def idle_seconds(self):
        return time.monotonic() - self.last_used

    def is_alive(self):
        if self.closed:
            return False
        try:
            self.driver.current_url
        except WebDriverException:
            return False
        return True

    def close(self):
        if self.closed:
            return
        self.closed = True
        log.info("Closing browser...")
        quit_driver(self.driver)


class SessionManager:
    """
    Owns the single Zureo session of the process.

    Every operation on the session runs under one lock, so concurrent
    requests are served one at a time instead of interleaving clicks on
    the same page.
    """

    def __init__(self, settings, driver_factory=create_driver):
        self.settings = settings
        self._driver_factory = driver_factory
        self._session = None
        self._lock = threading.RLock()

    @property
    def session(self):
        return self._session

    def login(self, email=None, password=None):
        credentials = resolve_credentials(self.settings, email, password)
        with self._lock:
            self._discard()
            try:
                driver = self._driver_factory(self.settings)
            except WebDriverException as e:
                raise RemoteNavigationError(f"No se pudo iniciar el navegador: {e.msg}") from e
            try:
                login(driver, self.settings, credentials)
            except WebDriverException as e:
                quit_driver(driver)
                raise RemoteNavigationError(f"Error del navegador en login: {e.msg}", context="login") from e
            except Exception:
                quit_driver(driver)
                raise
            self._session = ZureoSession(driver)
            log.info("Session started on Zureo")
            return self._session

    def run(self, operation, *args):
        """Call `operation(driver, settings, *args)` on the current session."""
        with self._lock:
            session = self._current()
            try:
                return operation(session.driver, self.settings, *args)
            except WebDriverException as e:
                if not session.is_alive():
                    log.warning("Browser is gone, dropping session")
                    self._discard()
                raise RemoteNavigationError(f"Error del navegador: {e.msg}") from e
            finally:
                session.touch()

    def logout(self):
        with self._lock:
            if self._session is None:
                raise NoSessionError()
            self._discard()

    def status(self):
        session = self._session
        if session is None:
            return {"active": False, "created_at": None, "idle_seconds": None}
        return {
            "active": True,
            "created_at": session.created_at.isoformat(),
            "idle_seconds": round(session.idle_seconds(), 1),
        }

    def shutdown(self):
        with self._lock:
            self._discard()

    def _current(self):
        session = self._session
        if session is None:
            raise NoSessionError()
        timeout = self.settings.session_idle_timeout
        if timeout and session.idle_seconds() > timeout:
            log.info(f"Session idle for more than {timeout:g}s, closing it")
            self._discard()
            raise NoSessionError("La sesión expiró por inactividad. Usá /zureo/login de nuevo.")
        if not session.is_alive():
            log.warning("Browser is gone, dropping session")
            self._discard()
            raise NoSessionError("La sesión del navegador se cerró. Usá /zureo/login de nuevo.")
        return session

    def _discard(self):
        if self._session is not None:
            self._session.close()
            self._session = None
