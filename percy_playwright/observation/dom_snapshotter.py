import json
import logging
from typing import Any, Dict, Optional

from playwright.sync_api import Page

from percy_playwright.client.transport import Transport
from percy_playwright.errors import TransportError

logger = logging.getLogger(__name__)

DOM_SCRIPT_PATH = "/percy/dom.js"


class DOMSnapshotter:
    def __init__(self, page: Page, transport: Transport):
        self.page = page
        self.transport = transport
        self.dom_script = ""

    def fetch_script(self) -> str:
        """Loads dom.js from the Percy CLI once and keeps it for every later snapshot.

        The script defines ``PercyDOM`` in the page; without it no DOM can be captured.
        """
        if self.dom_script.strip():
            return self.dom_script

        try:
            resp = self.transport.get(DOM_SCRIPT_PATH)
        except Exception as e:
            raise TransportError(f"Could not fetch {DOM_SCRIPT_PATH}: {e}") from e
        if resp.status_code != 200:
            raise TransportError(
                f"Failed with HTTP error code: {resp.status_code}", status_code=resp.status_code
            )

        self.dom_script = resp.text
        return self.dom_script

    @staticmethod
    def build_serialize_js(options: Dict[str, Any]) -> str:
        return f"PercyDOM.serialize({json.dumps(options)})\n"

    def serialize(self, dom_script: str, options: Dict[str, Any], debug: bool = False) -> Optional[Any]:
        """Serializes the current DOM inside the page. Returns None when that fails."""
        if not dom_script.strip():
            return None
        try:
            self.page.evaluate(dom_script)
            return self.page.evaluate(self.build_serialize_js(options))
        except Exception as e:
            if debug:
                logger.error(f"{e}")
            return None
