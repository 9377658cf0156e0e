"""Region descriptions used to scope and tune a snapshot comparison."""

from typing import Any, Dict, Optional

from percy_playwright.shared.schemas import (
    ElementSelector,
    Region,
    RegionAssertion,
    RegionConfiguration,
)

SELECTOR_KEYS = ("boundingBox", "elementXpath", "elementCSS")
CONFIGURATION_KEYS = (
    "diffSensitivity",
    "imageIgnoreThreshold",
    "carouselsEnabled",
    "bannersEnabled",
    "adsEnabled",
)
# Only these algorithms accept tuning parameters
CONFIGURABLE_ALGORITHMS = ("standard", "intelliignore")


def _pick(params: Dict[str, Any], keys) -> Dict[str, Any]:
    return {key: params[key] for key in keys if key in params}


def build_region(params: Optional[Dict[str, Any]] = None, **kwargs) -> Dict[str, Any]:
    """
    Builds a region from a flat option mapping.

    Recognized keys: boundingBox, elementXpath, elementCSS, padding,
    algorithm (default "ignore"), diffSensitivity, imageIgnoreThreshold,
    carouselsEnabled, bannersEnabled, adsEnabled, diffIgnoreThreshold.
    Keys absent from the input never show up in the result.
    """
    params = {**(params or {}), **kwargs}
    algorithm = params.get("algorithm", "ignore")

    fields: Dict[str, Any] = {
        "elementSelector": ElementSelector(**_pick(params, SELECTOR_KEYS)),
        "algorithm": algorithm,
    }
    if "padding" in params:
        fields["padding"] = params["padding"]

    if algorithm in CONFIGURABLE_ALGORITHMS:
        configuration = _pick(params, CONFIGURATION_KEYS)
        if configuration:
            fields["configuration"] = RegionConfiguration(**configuration)

    if "diffIgnoreThreshold" in params:
        fields["assertion"] = RegionAssertion(diffIgnoreThreshold=params["diffIgnoreThreshold"])

    return Region(**fields).model_dump(exclude_unset=True)
