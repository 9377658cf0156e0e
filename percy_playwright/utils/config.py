import os
import yaml
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_SERVER_ADDRESS = "http://localhost:5338"
DEFAULT_REQUEST_TIMEOUT = 30.0


@dataclass
class PercyConfig:
    # Local Percy CLI
    server_address: str = DEFAULT_SERVER_ADDRESS
    request_timeout: Optional[float] = DEFAULT_REQUEST_TIMEOUT # seconds, None waits forever

    # Logging
    log_level: str = "info" # "debug" turns on verbose error output

    # Reported as clientInfo
    client_name: str = "percy-playwright-python"

    @property
    def debug(self) -> bool:
        return self.log_level == "debug"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PercyConfig":
        """Builds a config from PERCY_* environment variables."""
        env = os.environ if environ is None else environ
        config = cls(
            server_address=env.get("PERCY_SERVER_ADDRESS", DEFAULT_SERVER_ADDRESS),
            log_level=env.get("PERCY_LOGLEVEL", "info"),
        )
        timeout = env.get("PERCY_REQUEST_TIMEOUT")
        if timeout:
            config.request_timeout = float(timeout)
        return config

    @classmethod
    def load(cls, path: Optional[str] = None) -> "PercyConfig":
        config = cls.from_env()
        if not path:
            return config

        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")

        merged = {
            "server_address": config.server_address,
            "request_timeout": config.request_timeout,
            "log_level": config.log_level,
            "client_name": config.client_name,
        }
        merged.update(data)
        return cls(**merged)
