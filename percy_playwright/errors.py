"""Exceptions raised by the Percy Playwright client."""


class PercyError(RuntimeError):
    """Base class for every error raised by this package."""


class AgentUnavailableError(PercyError):
    """The local Percy CLI could not be reached or answered with an error."""


class UnsupportedAgentVersionError(PercyError):
    """The local Percy CLI is too old or speaks a different major version."""

    def __init__(self, version=None):
        self.version = version
        if version is None:
            super().__init__("Percy CLI did not report a core version")
        else:
            super().__init__(f"Unsupported Percy CLI version, {version}")


class WrongCaptureModeError(PercyError):
    """snapshot() was called in an automate session or screenshot() in a web session."""


class MetadataUnavailableError(PercyError):
    """A page, frame, browser or session identifier could not be resolved."""


class TransportError(PercyError):
    """An HTTP exchange with the Percy CLI failed."""

    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code
