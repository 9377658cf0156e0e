"""One-time capability probe against the local Percy CLI."""

import logging
from dataclasses import dataclass
from typing import Optional

from percy_playwright.client.transport import Transport
from percy_playwright.errors import AgentUnavailableError, UnsupportedAgentVersionError
from percy_playwright.shared.schemas import HealthcheckResponse, SessionType

logger = logging.getLogger(__name__)

HEALTHCHECK_PATH = "/percy/healthcheck"
VERSION_HEADER = "x-percy-core-version"
SUPPORTED_MAJOR_VERSION = "1"

MIGRATION_NOTICE = (
    "You may be using @percy/agent "
    "which is no longer supported by this SDK. "
    "Please uninstall @percy/agent and install @percy/cli instead. "
    "https://www.browserstack.com/docs/percy/migration/migrate-to-cli"
)


@dataclass
class Capabilities:
    enabled: bool
    session_type: SessionType = SessionType.UNKNOWN
    core_version: Optional[str] = None


def probe(transport: Transport) -> Capabilities:
    """Asks the CLI for its version and session type.

    Raises AgentUnavailableError or UnsupportedAgentVersionError instead of
    returning a disabled result.
    """
    try:
        resp = transport.get(HEALTHCHECK_PATH)
    except Exception as e:
        raise AgentUnavailableError(str(e)) from e

    if resp.status_code != 200:
        raise AgentUnavailableError(f"Failed with HTTP error code : {resp.status_code}")

    version = resp.headers.get(VERSION_HEADER)
    if not version:
        raise UnsupportedAgentVersionError()
    if version.split(".")[0] != SUPPORTED_MAJOR_VERSION:
        raise UnsupportedAgentVersionError(version)

    try:
        body = HealthcheckResponse.model_validate(resp.json())
    except Exception as e:
        raise AgentUnavailableError(f"Invalid healthcheck response: {e}") from e

    return Capabilities(
        enabled=True,
        session_type=SessionType.from_value(body.type),
        core_version=version,
    )


def healthcheck(transport: Transport, debug: bool = False) -> Capabilities:
    """Runs the probe and folds every failure into a disabled result."""
    try:
        return probe(transport)
    except UnsupportedAgentVersionError as e:
        if e.version is None:
            logger.info(MIGRATION_NOTICE)
        else:
            logger.info(str(e))
        return Capabilities(enabled=False, core_version=e.version)
    except AgentUnavailableError as e:
        logger.info("Percy is not running, disabling snapshots")
        if debug:
            logger.error(f"{e}")
        return Capabilities(enabled=False)
