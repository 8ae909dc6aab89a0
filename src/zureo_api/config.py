import os
from dataclasses import dataclass, fields
from typing import List, Optional

from .errors import MissingConfiguration
from .utils import get_env, get_env_bool

DEFAULT_BASE_URL = "https://go.zureo.com/"
DEFAULT_REMOTE_URL = "http://localhost:4444/wd/hub"

# env var -> Settings field
REQUIRED_ENV = {
    "ZUREO_COMPANY": "company",
    "ZUREO_EMAIL": "email",
    "ZUREO_PASSWORD": "password",
}


@dataclass(frozen=True)
class Settings:
    company: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

    base_url: str = DEFAULT_BASE_URL
    selenium_remote_url: Optional[str] = DEFAULT_REMOTE_URL
    headless: bool = True
    host: str = "0.0.0.0"
    port: int = 3000

    # seconds
    nav_timeout: float = 60
    step_timeout: float = 10
    short_timeout: float = 5
    modal_probe_timeout: float = 5
    quantity_check_timeout: float = 3
    poll_interval: float = 0.25
    session_idle_timeout: float = 900

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            company=get_env("ZUREO_COMPANY"),
            email=get_env("ZUREO_EMAIL"),
            password=get_env("ZUREO_PASSWORD"),
            base_url=get_env("ZUREO_BASE_URL", DEFAULT_BASE_URL),
            # an explicit empty value selects a local Chrome
            selenium_remote_url=get_env("SELENIUM_REMOTE_URL")
            if "SELENIUM_REMOTE_URL" in os.environ else DEFAULT_REMOTE_URL,
            headless=get_env_bool("HEADLESS", True),
            host=get_env("HOST", "0.0.0.0"),
            port=int(get_env("PORT", "3000")),
            nav_timeout=float(get_env("NAV_TIMEOUT_S", "60")),
            step_timeout=float(get_env("STEP_TIMEOUT_S", "10")),
            short_timeout=float(get_env("SHORT_TIMEOUT_S", "5")),
            modal_probe_timeout=float(get_env("MODAL_PROBE_TIMEOUT_S", "5")),
            quantity_check_timeout=float(get_env("QUANTITY_CHECK_TIMEOUT_S", "3")),
            poll_interval=float(get_env("POLL_INTERVAL_S", "0.25")),
            session_idle_timeout=float(get_env("SESSION_IDLE_TIMEOUT_S", "900")),
        )

    @property
    def login_url(self) -> str:
        return self.base_url

    def page_url(self, route: str) -> str:
        return f"{self.base_url.rstrip('/')}/#/{route.lstrip('/')}"

    def missing(self) -> List[str]:
        return [env for env, attr in REQUIRED_ENV.items() if not getattr(self, attr)]

    def require(self) -> "Settings":
        missing = self.missing()
        if missing:
            lines = "\n".join(f"  - {name}" for name in missing)
            raise MissingConfiguration(f"Faltan variables de entorno requeridas:\n{lines}")
        return self

    def describe(self) -> dict:
        """Settings without secrets, for startup logs."""
        return {
            f.name: ("***" if f.name == "password" and self.password else getattr(self, f.name))
            for f in fields(self)
        }
