from typing import Protocol

from playwright.sync_api import Page


class PageIdentity(Protocol):
    """Stable opaque identifiers for a page, its main frame and its browser."""

    def page_guid(self) -> str: ...

    def frame_guid(self) -> str: ...

    def browser_guid(self) -> str: ...


class PlaywrightPageIdentity:
    """
    Reads the guids Playwright assigns to its remote objects.
    The public sync API does not expose them, so this is the one place that
    reaches into the private implementation objects.
    """
    def __init__(self, page: Page):
        self.page = page

    @staticmethod
    def _guid(api_object) -> str:
        guid = api_object._impl_obj._guid
        if not isinstance(guid, str) or not guid:
            raise ValueError(f"No guid on {type(api_object).__name__}")
        return guid

    def page_guid(self) -> str:
        return self._guid(self.page)

    def frame_guid(self) -> str:
        return self._guid(self.page.main_frame)

    def browser_guid(self) -> str:
        browser = self.page.context.browser
        if browser is None:
            raise ValueError("Page context is not owned by a browser")
        return self._guid(browser)
