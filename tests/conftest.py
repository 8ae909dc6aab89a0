"""Shared fixtures: a fake Zureo app, its browser factory and a TestClient."""

import pytest
from fastapi.testclient import TestClient

from fakes import BASE_URL, COMPANY, EMAIL, PASSWORD, DriverFactory, FakeDriver, FakeZureo
from zureo_api.config import Settings
from zureo_api.server import create_app
from zureo_api.session import SessionManager


@pytest.fixture
def settings():
    """Short deadlines so timeout paths finish in well under a second."""
    return Settings(
        company=COMPANY,
        email=EMAIL,
        password=PASSWORD,
        base_url=BASE_URL,
        selenium_remote_url=None,
        nav_timeout=0.5,
        step_timeout=0.3,
        short_timeout=0.3,
        modal_probe_timeout=0.2,
        quantity_check_timeout=0.2,
        poll_interval=0.01,
    )


@pytest.fixture
def zureo():
    return FakeZureo(stocks={"ABC123": "5", "XYZ789": "1.250,75"})


@pytest.fixture
def driver(zureo):
    return FakeDriver(zureo)


@pytest.fixture
def factory(zureo):
    return DriverFactory(zureo)


@pytest.fixture
def manager(settings, factory):
    return SessionManager(settings, driver_factory=factory)


@pytest.fixture
def client(settings, manager):
    with TestClient(create_app(settings, manager)) as client:
        yield client


@pytest.fixture
def logged_in(client):
    res = client.get("/zureo/login")
    assert res.status_code == 200
    return client
