"""
Pytest fixtures for percy_playwright tests
"""
import pytest
from unittest.mock import MagicMock

from percy_playwright.client.transport import Transport
from percy_playwright.utils.cache import Cache

HEALTHCHECK_PATH = "/percy/healthcheck"
DOM_SCRIPT_PATH = "/percy/dom.js"


def make_response(status_code=200, headers=None, json_body=None, text=""):
    """A stand-in for requests.Response with just what the client reads."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.headers = headers if headers is not None else {}
    if isinstance(json_body, Exception):
        resp.json.side_effect = json_body
    else:
        resp.json.return_value = json_body
    resp.text = text
    return resp


def healthy_response(session_type=None, version="1.30.0"):
    body = {"success": True}
    if session_type is not None:
        body["type"] = session_type
    return make_response(headers={"x-percy-core-version": version}, json_body=body)


@pytest.fixture
def cache():
    return Cache()


@pytest.fixture
def make_transport():
    """Builds a mock Transport whose GETs are answered per path."""
    def _make(session_type=None, dom_script="window.PercyDOM = {};", responses=None):
        routes = {
            HEALTHCHECK_PATH: healthy_response(session_type),
            DOM_SCRIPT_PATH: make_response(text=dom_script),
        }
        routes.update(responses or {})

        def get(path):
            answer = routes[path]
            if isinstance(answer, Exception):
                raise answer
            return answer

        transport = MagicMock(spec=Transport)
        transport.get.side_effect = get
        transport.post.return_value = {"success": True}
        return transport

    return _make


@pytest.fixture
def mock_page():
    page = MagicMock()
    page.url = "http://localhost:8000/"
    return page


@pytest.fixture
def browser_session():
    """A real headless Chromium session; skipped when no browser is installed."""
    from percy_playwright.browser_interaction.session_manager import SessionManager

    manager = SessionManager(headless=True)
    try:
        manager.start()
    except Exception as e:
        manager.close()
        pytest.skip(f"Browser not available: {e}")
    yield manager
    manager.close()
