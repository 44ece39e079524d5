"""Fixtures for the framework's own tests."""
import threading

import pytest
from werkzeug.serving import make_server

from mock_api import create_mock_api_app, reset_mock_state
from vulcan_qa.config import CONFIG_PATH_ENV, settings
from vulcan_qa.shared.context import ScenarioContext

TEST_PROPERTIES = """\
# framework tests
ui.baseUrl=http://ui.invalid
ui.browser=chrome
ui.headless=true
ui.implicitWait=5
api.baseUrl=http://api.invalid
api.timeout=5000
log.level=DEBUG
"""


@pytest.fixture(autouse=True)
def test_settings(tmp_path, monkeypatch):
    """Point the shared settings at a throwaway properties file."""
    config_file = tmp_path / "config.properties"
    config_file.write_text(TEST_PROPERTIES, encoding="utf-8")
    monkeypatch.setenv(CONFIG_PATH_ENV, str(config_file))
    for name in ("UI_BASE_URL", "UI_BROWSER", "API_BASE_URL", "API_TIMEOUT", "API_KEY"):
        monkeypatch.delenv(name, raising=False)
    settings.reload()
    yield config_file
    settings.reload()


@pytest.fixture(autouse=True)
def clean_scenario_context():
    """No scenario state survives a test."""
    ScenarioContext.clear()
    yield
    ScenarioContext.clear()


class MockApiServer:
    """Wrapper for running the mock API in a background thread."""

    def __init__(self, host='127.0.0.1'):
        self.host = host
        self.app = create_mock_api_app()
        self.server = None
        self.thread = None

    def start(self):
        # Port 0 lets the OS pick a free port
        self.server = make_server(self.host, 0, self.app, threaded=True)
        self.thread = threading.Thread(target=self.server.serve_forever, daemon=True)
        self.thread.start()

    def stop(self):
        if self.server:
            self.server.shutdown()
            self.thread.join(timeout=5)

    @property
    def url(self):
        return f"http://{self.host}:{self.server.server_port}"


@pytest.fixture(scope='function')
def mock_api_server():
    """A running mock API with freshly seeded users."""
    reset_mock_state()
    server = MockApiServer()
    server.start()

    yield server

    server.stop()
    reset_mock_state()


@pytest.fixture
def api_settings(mock_api_server):
    """Route every API client created during the test to the mock server."""
    with settings.override({"api.baseUrl": mock_api_server.url}):
        yield mock_api_server
