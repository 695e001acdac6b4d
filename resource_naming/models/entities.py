"""Immutable naming context and generated-name entities."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from resource_naming.models.templates import ResourceKind


@dataclass(frozen=True)
class NamingContext:
    """Configuration values driving every name computed in one operation."""

    service_name: str
    region: str
    stage: str
    prefix: str
    rollback_enabled: bool = False
    resource_overrides: Mapping[ResourceKind, str] = field(default_factory=dict)
    package_timestamp: Optional[int] = None  # fixed session timestamp, if the caller already has one

    def __post_init__(self) -> None:
        overrides = {k: v for k, v in dict(self.resource_overrides).items() if v}
        object.__setattr__(self, "resource_overrides", MappingProxyType(overrides))

    def override_for(self, kind: ResourceKind) -> Optional[str]:
        return self.resource_overrides.get(kind)


@dataclass(frozen=True)
class GeneratedName:
    """A derived name and the resource kind it was generated for."""

    kind: ResourceKind
    name: str

    def __str__(self) -> str:
        return self.name
