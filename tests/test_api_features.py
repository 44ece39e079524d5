"""The API feature files, run end to end against the in-process mock API."""
from pathlib import Path

import pytest
from pytest_bdd import scenarios

import mock_api

FEATURES_DIR = Path(__file__).resolve().parents[1] / "features"


@pytest.fixture(autouse=True)
def route_api_to_mock(api_settings):
    yield api_settings
    # Every user a scenario created has been deleted by its cleanup action
    assert not [user_id for user_id in mock_api.USERS if user_id not in mock_api.SEED_USERS]


scenarios(str(FEATURES_DIR / "api"))
