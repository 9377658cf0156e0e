"""Talking to the local Percy CLI: capability probe, transport and the Percy client."""

from percy_playwright.client.healthcheck import Capabilities, healthcheck
from percy_playwright.client.transport import Transport

__all__ = ["Capabilities", "healthcheck", "Transport"]
