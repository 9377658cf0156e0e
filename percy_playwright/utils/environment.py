from importlib.metadata import PackageNotFoundError, version

from percy_playwright.version import __version__

ENGINE_NAME = "playwright-python"


class Environment:
    """Describes the SDK and the automation engine for every request sent to Percy."""
    def __init__(self, client_name: str = "percy-playwright-python"):
        self.client_name = client_name

    def get_client_info(self) -> str:
        return f"{self.client_name}/{__version__}"

    def get_environment_info(self) -> str:
        return f"{ENGINE_NAME}; {self._engine_version()}"

    @staticmethod
    def _engine_version() -> str:
        try:
            return version("playwright")
        except PackageNotFoundError:
            return "unknown"
