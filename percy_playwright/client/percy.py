import logging
from typing import Any, Dict, Optional

from playwright.sync_api import Page

from percy_playwright.browser_interaction.page_metadata import PageMetadata
from percy_playwright.client.healthcheck import healthcheck
from percy_playwright.client.transport import Transport
from percy_playwright.errors import TransportError, WrongCaptureModeError
from percy_playwright.observation.dom_snapshotter import DOMSnapshotter
from percy_playwright.shared.region import build_region
from percy_playwright.shared.schemas import AutomateScreenshotRequest, SessionType, SnapshotRequest
from percy_playwright.utils.cache import Cache, process_cache
from percy_playwright.utils.config import PercyConfig
from percy_playwright.utils.environment import Environment
from percy_playwright.utils.log import configure_logging

logger = logging.getLogger(__name__)

SNAPSHOT_PATH = "/percy/snapshot"
AUTOMATE_SCREENSHOT_PATH = "/percy/automateScreenshot"

# Python keyword -> option key understood by the Percy CLI
OPTION_ALIASES = {
    "widths": "widths",
    "min_height": "minHeight",
    "enable_javascript": "enableJavaScript",
    "percy_css": "percyCSS",
    "scope": "scope",
    "sync": "sync",
    "dom_transformation": "domTransformation",
}

SNAPSHOT_IN_AUTOMATE_MESSAGE = (
    "Invalid function call - snapshot(). Please use screenshot() function while using Percy with Automate. "
    "For more information on usage of PercyScreenshot, refer "
    "https://www.browserstack.com/docs/percy/integrate/functional-and-visual"
)
SCREENSHOT_IN_WEB_MESSAGE = (
    "Invalid function call - screenshot(). Please use snapshot() function for taking screenshot. "
    "screenshot() should be used only while using Percy with Automate. "
    "For more information on usage of snapshot(), refer doc for your language "
    "https://www.browserstack.com/docs/percy/integrate/overview"
)


def build_options(options: Optional[Dict[str, Any]] = None, **kwargs) -> Dict[str, Any]:
    """Merges an options mapping with keyword shortcuts (``min_height=`` -> ``minHeight``)."""
    merged = dict(options or {})
    for key, value in kwargs.items():
        if key not in OPTION_ALIASES:
            raise TypeError(f"Unknown snapshot option: {key}")
        if value is not None:
            merged[OPTION_ALIASES[key]] = value
    return merged


class Percy:
    """
    Percy client for visual testing of one Playwright page.

    Creating the client probes the local Percy CLI once. If the CLI is missing
    or incompatible every capture call becomes a no-op that returns None.
    """
    def __init__(
        self,
        page: Page,
        config: Optional[PercyConfig] = None,
        transport: Optional[Transport] = None,
        cache: Optional[Cache] = None,
        environment: Optional[Environment] = None,
    ):
        self.page = page
        self.config = config or PercyConfig.from_env()
        configure_logging(self.config.debug)

        self.transport = transport or Transport(
            self.config.server_address,
            timeout=self.config.request_timeout,
            debug=self.config.debug,
        )
        self.cache = cache if cache is not None else process_cache()
        self.env = environment or Environment(self.config.client_name)
        self.dom_snapshotter = DOMSnapshotter(page, self.transport)
        self.page_metadata: Optional[PageMetadata] = None

        capabilities = healthcheck(self.transport, debug=self.config.debug)
        self.enabled = capabilities.enabled
        self.session_type = capabilities.session_type
        self.core_version = capabilities.core_version

    def create_region(self, params: Optional[Dict[str, Any]] = None, **kwargs) -> Dict[str, Any]:
        return build_region(params, **kwargs)

    def snapshot(self, name: str, options: Optional[Dict[str, Any]] = None, **kwargs) -> Optional[Dict[str, Any]]:
        """
        Take a DOM snapshot of the page and upload it to Percy.

        Args:
            name: Human-readable snapshot name. Should be unique.
            options: Extra snapshot options (widths, minHeight, percyCSS, ...).
            **kwargs: Shortcuts for common options, e.g. ``widths=[768, 1280]``.

        Returns:
            The ``data`` object of the CLI's reply, or None.
        """
        if not self.enabled:
            return None
        if self.session_type is SessionType.AUTOMATE:
            raise WrongCaptureModeError(SNAPSHOT_IN_AUTOMATE_MESSAGE)

        options = build_options(options, **kwargs)
        dom_snapshot = self.dom_snapshotter.serialize(self._fetch_dom_script(), options, debug=self.config.debug)
        return self._post_snapshot(dom_snapshot, name, self.page.url, options)

    def screenshot(self, name: str, options: Optional[Dict[str, Any]] = None, **kwargs) -> Optional[Dict[str, Any]]:
        """
        Ask Percy to take an Automate screenshot of the page.

        Only valid while the test runs on BrowserStack Automate. Raises
        MetadataUnavailableError when the session ids cannot be resolved.
        """
        if not self.enabled:
            return None
        if self.session_type is SessionType.WEB:
            raise WrongCaptureModeError(SCREENSHOT_IN_WEB_MESSAGE)

        options = build_options(options, **kwargs)
        metadata = self._get_page_metadata()
        request = AutomateScreenshotRequest(
            sessionId=metadata.session_id,
            pageGuid=metadata.page_guid,
            frameGuid=metadata.frame_guid,
            framework=metadata.framework,
            snapshotName=name,
            options=options,
            clientInfo=self.env.get_client_info(),
            environmentInfo=self.env.get_environment_info(),
        )
        return self.request(AUTOMATE_SCREENSHOT_PATH, request.model_dump(), name)

    def request(self, path: str, body: Dict[str, Any], name: str) -> Optional[Dict[str, Any]]:
        return self.transport.post(path, body, name)

    def _get_page_metadata(self) -> PageMetadata:
        if self.page_metadata is None:
            self.page_metadata = PageMetadata(self.page, cache=self.cache)
        return self.page_metadata

    def _fetch_dom_script(self) -> str:
        try:
            return self.dom_snapshotter.fetch_script()
        except TransportError as e:
            # A broken dom.js fetch disables the client for good
            self.enabled = False
            if self.config.debug:
                logger.error(f"{e}")
            return ""

    def _post_snapshot(
        self,
        dom_snapshot: Optional[Any],
        name: str,
        url: str,
        options: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        if not self.enabled:
            return None

        request = SnapshotRequest(
            **{
                **options,
                "url": url,
                "name": name,
                "domSnapshot": dom_snapshot,
                "clientInfo": self.env.get_client_info(),
                "environmentInfo": self.env.get_environment_info(),
            }
        )
        return self.request(SNAPSHOT_PATH, request.model_dump(), name)
