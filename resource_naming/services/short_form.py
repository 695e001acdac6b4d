"""Short canonical tokens for Azure regions and deployment stages."""

from __future__ import annotations

import re

_COMPASS = {
    "north": "n",
    "south": "s",
    "east": "e",
    "west": "w",
    "central": "c",
}
_COMPASS_RE = re.compile("|".join(_COMPASS))

KNOWN_REGIONS: frozenset[str] = frozenset(
    {
        "eastus", "eastus2", "westus", "westus2", "westus3", "centralus",
        "northcentralus", "southcentralus", "westcentralus",
        "canadacentral", "canadaeast", "brazilsouth", "brazilsoutheast", "mexicocentral",
        "northeurope", "westeurope", "uksouth", "ukwest", "francecentral", "francesouth",
        "germanywestcentral", "germanynorth", "norwayeast", "norwaywest",
        "switzerlandnorth", "switzerlandwest", "swedencentral", "polandcentral",
        "italynorth", "spaincentral",
        "eastasia", "southeastasia", "japaneast", "japanwest", "koreacentral", "koreasouth",
        "australiaeast", "australiasoutheast", "australiacentral", "australiacentral2",
        "centralindia", "southindia", "westindia",
        "uaenorth", "uaecentral", "qatarcentral", "israelcentral",
        "southafricanorth", "southafricawest",
    }
)

STAGE_ABBREVIATIONS: dict[str, str] = {
    "production": "prod",
    "development": "dev",
    "testing": "test",
    "staging": "stg",
    "dogfood": "df",
    "qualityassurance": "qa",
}


def _canonical(value: str) -> str:
    return re.sub(r"[\W_]+", "", value or "").lower()


def short_region(region: str) -> str:
    """Abbreviate a recognized Azure region, e.g. "West US" -> "wus".

    Unrecognized regions are returned unchanged.
    """
    key = _canonical(region)
    if key not in KNOWN_REGIONS:
        return region
    return _COMPASS_RE.sub(lambda m: _COMPASS[m.group(0)], key)


def short_stage(stage: str) -> str:
    """Abbreviate a well-known stage name; unknown stages pass through."""
    return STAGE_ABBREVIATIONS.get(_canonical(stage), stage)
