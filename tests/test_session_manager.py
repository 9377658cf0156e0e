import pytest

from percy_playwright.browser_interaction.page_identity import PlaywrightPageIdentity
from percy_playwright.browser_interaction.page_metadata import PageMetadata
from percy_playwright.browser_interaction.session_manager import SessionManager


def test_session_lifecycle(browser_session):
    """Test that the session manager can start and stop a browser."""
    assert browser_session.page is not None
    assert browser_session.browser is not None
    assert browser_session.context is not None

    browser_session.close()
    assert browser_session.page is None
    assert browser_session.browser is None


def test_unknown_browser_type():
    with pytest.raises(ValueError):
        SessionManager(browser_type="netscape")


def test_real_page_identity(browser_session):
    """Guids come straight from Playwright's implementation objects."""
    browser_session.navigate("data:text/html,<h1>Identity</h1>")
    identity = PlaywrightPageIdentity(browser_session.page)

    page_guid = identity.page_guid()
    frame_guid = identity.frame_guid()
    browser_guid = identity.browser_guid()

    assert page_guid.startswith("page@")
    assert frame_guid.startswith("frame@")
    assert browser_guid.startswith("browser@")

    metadata = PageMetadata(browser_session.page)
    assert metadata.page_guid == page_guid
    assert metadata.frame_guid == frame_guid
    assert metadata.browser_guid == browser_guid
