"""Pytest fixtures for auth portal unit tests."""

import pytest

from globpath.config import GlobPathSettings, reset_globpath_config
from globpath.core.auth_flow import AuthFlow
from tests.unit.globpath.fakes import FakeAuthAPI, RecordingNavigator


@pytest.fixture(autouse=True)
def reset_config():
    """Reset portal config before each test to ensure clean state."""
    reset_globpath_config()
    yield
    reset_globpath_config()


@pytest.fixture
def settings(tmp_path) -> GlobPathSettings:
    return GlobPathSettings(LOG_DIR=str(tmp_path / "logs"))


@pytest.fixture
def api() -> FakeAuthAPI:
    return FakeAuthAPI()


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def flow(api, navigator, settings) -> AuthFlow:
    return AuthFlow(api, navigator, settings=settings)


@pytest.fixture
def valid_login() -> dict:
    return {"email": "tech@lab.com", "password": "secret"}


@pytest.fixture
def valid_registration() -> dict:
    return {
        "name": "Jane Doe",
        "email": "jane@lab.com",
        "phone_number": "",
        "password": "Abcdef1!",
        "confirm_password": "Abcdef1!",
    }
