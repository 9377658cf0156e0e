from playwright.sync_api import sync_playwright, Browser, BrowserContext, Page, Playwright
from typing import Optional

BROWSER_TYPES = ("chromium", "firefox", "webkit")


class SessionManager:
    """Owns a local Playwright browser for command line snapshots."""
    def __init__(self, headless: bool = True, browser_type: str = "chromium"):
        if browser_type not in BROWSER_TYPES:
            raise ValueError(f"Unknown browser type: {browser_type}")
        self.headless = headless
        self.browser_type = browser_type
        self.playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None
        self.page: Optional[Page] = None

    def start(self) -> Page:
        """Starts a new browser session and returns a page."""
        if self.page:
            return self.page

        self.playwright = sync_playwright().start()
        launcher = getattr(self.playwright, self.browser_type)
        self.browser = launcher.launch(headless=self.headless)
        self.context = self.browser.new_context()
        self.page = self.context.new_page()
        return self.page

    def navigate(self, url: str):
        """Navigates the current page and waits for the network to settle."""
        if not self.page:
            self.start()
        if self.page:
            self.page.goto(url, wait_until="networkidle")

    def close(self):
        """Closes the browser session and releases resources."""
        if self.context:
            self.context.close()
            self.context = None
        if self.browser:
            self.browser.close()
            self.browser = None
        if self.playwright:
            self.playwright.stop()
            self.playwright = None
        self.page = None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
