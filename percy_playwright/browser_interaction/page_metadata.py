import json
import logging
from typing import Any, Dict, Optional

from playwright.sync_api import Page

from percy_playwright.browser_interaction.page_identity import PageIdentity, PlaywrightPageIdentity
from percy_playwright.errors import MetadataUnavailableError
from percy_playwright.utils.cache import Cache, process_cache

logger = logging.getLogger(__name__)

FRAMEWORK = "playwright"
SESSION_DETAILS_KEY_PREFIX = "sessionDetails_"
SESSION_DETAILS_COMMAND = 'browserstack_executor: {"action": "getSessionDetails"}'


class PageMetadata:
    """
    Identifiers that tie a screenshot to a recorded BrowserStack Automate session.
    Each id is looked up once per instance; session details once per browser
    in the shared cache.
    """
    def __init__(self, page: Page, identity: Optional[PageIdentity] = None, cache: Optional[Cache] = None):
        self.page = page
        self.identity = identity or PlaywrightPageIdentity(page)
        self.cache = cache if cache is not None else process_cache()
        self._page_guid: Optional[str] = None
        self._frame_guid: Optional[str] = None
        self._browser_guid: Optional[str] = None
        self._session_id: Optional[str] = None

    @property
    def framework(self) -> str:
        return FRAMEWORK

    def _resolve(self, label: str, lookup) -> str:
        try:
            return lookup()
        except Exception as e:
            logger.info(f"Failed to fetch {label}, error: {e}")
            raise MetadataUnavailableError(f"Failed to fetch {label}") from e

    @property
    def page_guid(self) -> str:
        if self._page_guid is None:
            self._page_guid = self._resolve("PageGuid", self.identity.page_guid)
        return self._page_guid

    @property
    def frame_guid(self) -> str:
        if self._frame_guid is None:
            self._frame_guid = self._resolve("FrameGuid", self.identity.frame_guid)
        return self._frame_guid

    @property
    def browser_guid(self) -> str:
        if self._browser_guid is None:
            self._browser_guid = self._resolve("BrowserGuid", self.identity.browser_guid)
        return self._browser_guid

    @property
    def session_details(self) -> Dict[str, Any]:
        """Automate session capabilities, fetched from the remote browser once per browser id."""
        key = SESSION_DETAILS_KEY_PREFIX + self.browser_guid
        details = self.cache.get(key)
        if details is not None:
            return details

        try:
            response = self.page.evaluate("_ => {}", SESSION_DETAILS_COMMAND)
            details = json.loads(response)
            if not isinstance(details, dict):
                raise ValueError(f"Expected a JSON object, got {type(details).__name__}")
        except Exception as e:
            logger.info(f"Failed to fetch SessionCapabilities, error: {e}")
            raise MetadataUnavailableError("Failed to fetch SessionCapabilities") from e

        self.cache.put(key, details)
        return details

    @property
    def session_id(self) -> str:
        try:
            hashed_id = self.session_details.get("hashed_id")
            if hashed_id is None:
                raise KeyError("hashed_id")
            self._session_id = str(hashed_id)
        except (MetadataUnavailableError, KeyError) as e:
            logger.info(f"Failed to fetch SessionId, error: {e}")
            raise MetadataUnavailableError("Failed to fetch SessionId") from e
        return self._session_id
