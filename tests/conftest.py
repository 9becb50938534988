"""
Pytest configuration and fixtures.
"""

import os

import pytest
from fastapi.testclient import TestClient

# Set test environment before the app module builds its settings
os.environ["ENVIRONMENT"] = "testing"
os.environ["GEMINI_API_KEY"] = "test-gemini-key"
os.environ["GOOGLE_SHEET_ID"] = "test-sheet-id"
os.environ["LOG_FORMAT"] = "console"

from app.infra.config.settings import Settings  # noqa: E402
from tests._helpers.fakes import FakeLLMClient, FakeSpreadsheetClient  # noqa: E402


SAMPLE_TASKS = "write report, call client, review PR"
SAMPLE_MODEL_OUTPUT = (
    "1. Write report\n2. Call client\n3. Review PR"
    "---EMAIL---"
    "Hi team, status update: ..."
)


def make_settings(**overrides) -> Settings:
    """Settings isolated from the developer's .env and Google env vars."""
    values = {
        "ENVIRONMENT": "testing",
        "GEMINI_API_KEY": "test-gemini-key",
        "GOOGLE_SHEET_ID": "test-sheet-id",
        "GOOGLE_APPLICATION_CREDENTIALS": None,
        "GOOGLE_SERVICE_ACCOUNT_JSON": None,
        "GOOGLE_CLIENT_EMAIL": None,
        "GOOGLE_PRIVATE_KEY": None,
        "GOOGLE_USE_DEFAULT_CREDENTIALS": False,
        "SHEETS_APPEND_BEST_EFFORT": False,
        "LOG_FORMAT": "console",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def sample_tasks() -> str:
    return SAMPLE_TASKS


@pytest.fixture
def fake_llm() -> FakeLLMClient:
    return FakeLLMClient(response=SAMPLE_MODEL_OUTPUT)


@pytest.fixture
def fake_sheets() -> FakeSpreadsheetClient:
    return FakeSpreadsheetClient()


# ---------- API TESTING FIXTURES ----------


@pytest.fixture
def app(settings, fake_llm, fake_sheets):
    """FastAPI application wired to fake clients."""
    from app.main import create_app

    return create_app(settings=settings, llm_client=fake_llm, sheets_client=fake_sheets)


@pytest.fixture
def client(app):
    """FastAPI test client."""
    with TestClient(app) as test_client:
        yield test_client


def pytest_configure(config):
    """Configure pytest with custom markers."""
    markers = [
        "unit: Unit tests (fast, isolated)",
        "api: HTTP API tests against fake clients",
    ]

    for marker in markers:
        config.addinivalue_line("markers", marker)


def pytest_collection_modifyitems(config, items):
    """Add markers based on test location."""
    for item in items:
        path = str(item.fspath)
        if f"{os.sep}unit{os.sep}" in path:
            item.add_marker(pytest.mark.unit)
        if f"{os.sep}api{os.sep}" in path:
            item.add_marker(pytest.mark.api)
