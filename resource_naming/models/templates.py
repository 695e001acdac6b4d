"""Static naming templates, one per Azure resource kind."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Mapping, Optional

from resource_naming.core.errors import UnsupportedResourceType


class ResourceKind(str, Enum):
    RESOURCE_GROUP = "resource_group"
    DEPLOYMENT = "deployment"
    ARTIFACT = "artifact"
    FUNCTION_APP = "function_app"
    APP_SERVICE_PLAN = "app_service_plan"
    HOSTING_ENVIRONMENT = "hosting_environment"
    STORAGE_ACCOUNT = "storage_account"
    VIRTUAL_NETWORK = "virtual_network"
    APIM = "apim"
    APP_INSIGHTS = "app_insights"


class PartRole(str, Enum):
    PREFIX = "prefix"
    REGION = "region"
    STAGE = "stage"
    SERVICE_HASH = "serviceHash"
    LITERAL_SUFFIX = "literalSuffix"
    TIMESTAMP = "timestamp"


CharFilter = Callable[[str], bool]


def alphanumeric(c: str) -> bool:
    return c.isascii() and c.isalnum()


def alphanumeric_hyphen(c: str) -> bool:
    return alphanumeric(c) or c == "-"


def arm_name_char(c: str) -> bool:
    """Characters allowed in resource group and deployment names."""
    return alphanumeric(c) or c in "-_.()"


def blob_name_char(c: str) -> bool:
    return alphanumeric(c) or c in "-_./"


@dataclass(frozen=True)
class ResourceTypeTemplate:
    """How one resource kind is named.

    ``use_name_hash`` selects the service-name digest over the slugged service
    name for the SERVICE_HASH role. ``budgeted`` kinds always run through the
    allocator; the others only when the plain composition exceeds
    ``max_length``.
    """

    kind: ResourceKind
    roles: tuple[PartRole, ...]
    max_length: int
    delimiter: str = "-"
    char_filter: CharFilter = alphanumeric_hyphen
    literal_suffix: str = ""
    use_name_hash: bool = False
    budgeted: bool = False

    def allows(self, c: str) -> bool:
        return self.char_filter(c)


_CONFIGURED = (PartRole.PREFIX, PartRole.REGION, PartRole.STAGE, PartRole.LITERAL_SUFFIX)

# Azure limits, see "Naming rules and restrictions for Azure resources"
TEMPLATES: dict[ResourceKind, ResourceTypeTemplate] = {
    ResourceKind.RESOURCE_GROUP: ResourceTypeTemplate(
        kind=ResourceKind.RESOURCE_GROUP,
        roles=(PartRole.PREFIX, PartRole.REGION, PartRole.STAGE, PartRole.SERVICE_HASH, PartRole.LITERAL_SUFFIX),
        max_length=90,
        char_filter=arm_name_char,
        literal_suffix="rg",
    ),
    ResourceKind.DEPLOYMENT: ResourceTypeTemplate(
        kind=ResourceKind.DEPLOYMENT,
        roles=(
            PartRole.PREFIX,
            PartRole.REGION,
            PartRole.STAGE,
            PartRole.SERVICE_HASH,
            PartRole.LITERAL_SUFFIX,
            PartRole.TIMESTAMP,
        ),
        max_length=64,
        char_filter=arm_name_char,
        literal_suffix="deployment",
        use_name_hash=True,
        budgeted=True,
    ),
    ResourceKind.ARTIFACT: ResourceTypeTemplate(
        kind=ResourceKind.ARTIFACT,
        roles=(),
        max_length=1024,
        char_filter=blob_name_char,
        literal_suffix="artifact",
    ),
    ResourceKind.FUNCTION_APP: ResourceTypeTemplate(
        kind=ResourceKind.FUNCTION_APP,
        roles=(PartRole.PREFIX, PartRole.REGION, PartRole.STAGE, PartRole.SERVICE_HASH),
        max_length=60,
    ),
    ResourceKind.APP_SERVICE_PLAN: ResourceTypeTemplate(
        kind=ResourceKind.APP_SERVICE_PLAN, roles=_CONFIGURED, max_length=40, literal_suffix="asp",
    ),
    ResourceKind.HOSTING_ENVIRONMENT: ResourceTypeTemplate(
        kind=ResourceKind.HOSTING_ENVIRONMENT, roles=_CONFIGURED, max_length=40, literal_suffix="ase",
    ),
    ResourceKind.STORAGE_ACCOUNT: ResourceTypeTemplate(
        kind=ResourceKind.STORAGE_ACCOUNT,
        roles=(PartRole.PREFIX, PartRole.REGION, PartRole.STAGE, PartRole.SERVICE_HASH),
        max_length=24,
        delimiter="",
        char_filter=alphanumeric,
        use_name_hash=True,
        budgeted=True,
    ),
    ResourceKind.VIRTUAL_NETWORK: ResourceTypeTemplate(
        kind=ResourceKind.VIRTUAL_NETWORK, roles=_CONFIGURED, max_length=64, literal_suffix="vnet",
    ),
    ResourceKind.APIM: ResourceTypeTemplate(
        kind=ResourceKind.APIM, roles=_CONFIGURED, max_length=50, literal_suffix="apim",
    ),
    ResourceKind.APP_INSIGHTS: ResourceTypeTemplate(
        kind=ResourceKind.APP_INSIGHTS,
        roles=_CONFIGURED,
        max_length=260,
        char_filter=arm_name_char,
        literal_suffix="appinsights",
    ),
}


def parse_kind(value: ResourceKind | str) -> Optional[ResourceKind]:
    """Map an enum member or its string value to a ResourceKind, or None."""
    if isinstance(value, ResourceKind):
        return value
    try:
        return ResourceKind(str(value).strip().lower())
    except ValueError:
        return None


def get_template(
    kind: ResourceKind | str,
    templates: Optional[Mapping[ResourceKind, ResourceTypeTemplate]] = None,
) -> ResourceTypeTemplate:
    """Return the template for a kind; raise UnsupportedResourceType if none."""
    registry = TEMPLATES if templates is None else templates
    resolved = parse_kind(kind)
    if resolved is None or resolved not in registry:
        raise UnsupportedResourceType(kind)
    return registry[resolved]
