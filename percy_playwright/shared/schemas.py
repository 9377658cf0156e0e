from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class SessionType(str, Enum):
    UNKNOWN = "unknown"
    WEB = "web"
    AUTOMATE = "automate"

    @classmethod
    def from_value(cls, value: Any) -> "SessionType":
        if value is None:
            return cls.UNKNOWN
        value = str(value)
        if value == cls.WEB.value:
            return cls.WEB
        if value == cls.AUTOMATE.value:
            return cls.AUTOMATE
        return cls.UNKNOWN


class HealthcheckResponse(BaseModel):
    # Fields are read leniently; an odd value never disables the client
    model_config = ConfigDict(extra="allow")

    success: Optional[Any] = None
    type: Optional[Any] = None


class SnapshotRequest(BaseModel):
    # Caller options are merged in as extra top-level keys
    model_config = ConfigDict(extra="allow")

    url: str
    name: str
    domSnapshot: Optional[Any] = None
    clientInfo: str
    environmentInfo: str


class AutomateScreenshotRequest(BaseModel):
    sessionId: str
    pageGuid: str
    frameGuid: str
    framework: str
    snapshotName: str
    options: Dict[str, Any]
    clientInfo: str
    environmentInfo: str


class ElementSelector(BaseModel):
    boundingBox: Any = None
    elementXpath: Any = None
    elementCSS: Any = None


class RegionConfiguration(BaseModel):
    diffSensitivity: Any = None
    imageIgnoreThreshold: Any = None
    carouselsEnabled: Any = None
    bannersEnabled: Any = None
    adsEnabled: Any = None


class RegionAssertion(BaseModel):
    diffIgnoreThreshold: Any = None


class Region(BaseModel):
    elementSelector: ElementSelector
    algorithm: str = "ignore"
    padding: Any = None
    configuration: Optional[RegionConfiguration] = None
    assertion: Optional[RegionAssertion] = None
