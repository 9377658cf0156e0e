"""Percy visual testing for Playwright (Python)."""

from percy_playwright.version import __version__
from percy_playwright.client.percy import Percy
from percy_playwright.errors import (
    PercyError,
    AgentUnavailableError,
    UnsupportedAgentVersionError,
    WrongCaptureModeError,
    MetadataUnavailableError,
    TransportError,
)
from percy_playwright.shared.region import build_region as create_region
from percy_playwright.shared.schemas import SessionType

__all__ = [
    "__version__",
    "Percy",
    "create_region",
    "SessionType",
    "PercyError",
    "AgentUnavailableError",
    "UnsupportedAgentVersionError",
    "WrongCaptureModeError",
    "MetadataUnavailableError",
    "TransportError",
]
