"""Pytest configuration and fixtures

Provides shared fixtures for all tests: a fresh arithmetic engine, an
in-process web server and a Starlette test client bound to it. Nothing
here opens a network port.
"""

import sys
from pathlib import Path

import pytest
from starlette.testclient import TestClient

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from calculator_api.arithmetic import ArithmeticEngine  # noqa: E402 - after sys.path setup
from calculator_api.config import reset_settings  # noqa: E402
from calculator_api.web_server import CalculatorWebServer  # noqa: E402


@pytest.fixture(scope="function", autouse=True)
def clean_settings():
    """Make every test read configuration from its own environment."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def engine():
    return ArithmeticEngine()


@pytest.fixture
def web_server(engine):
    """A server object that is never bound to a port."""
    return CalculatorWebServer(engine=engine, host="127.0.0.1", port=3000)


@pytest.fixture
def client(web_server):
    """
    Provide a TestClient for the calculator app.

    Usage:
        def test_add(client):
            response = client.get("/add", params={"a": 2, "b": 3})
            assert response.json() == {"result": 5}
    """
    with TestClient(web_server.app) as test_client:
        yield test_client
