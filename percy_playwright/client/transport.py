import logging
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)


class Transport:
    """Plain HTTP calls against the local Percy CLI. One request per call, no pooling."""
    def __init__(self, base_url: str, timeout: Optional[float] = None, debug: bool = False):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.debug = debug

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def get(self, path: str) -> requests.Response:
        """GETs ``path``. Errors propagate; callers decide how to degrade."""
        return requests.get(self.url(path), timeout=self.timeout)

    def post(self, path: str, body: Dict[str, Any], name: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """POSTs ``body`` as JSON and returns the ``data`` field of the reply.

        Returns None when the exchange fails for any reason.
        """
        try:
            resp = requests.post(self.url(path), json=body, timeout=self.timeout)
            resp.raise_for_status()
            payload = resp.json()
            if isinstance(payload, dict):
                return payload.get("data")
            return None
        except Exception as e:
            if self.debug:
                logger.error(f"{e}")
            logger.info(f"Could not post snapshot {name}")
            return None
