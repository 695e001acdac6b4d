"""Data models: naming context, Pydantic config schemas, resource templates."""

from resource_naming.models.entities import GeneratedName, NamingContext
from resource_naming.models.schemas import (
    CliOptions,
    NamesRequest,
    NamesResponse,
    ServiceConfig,
)
from resource_naming.models.templates import (
    TEMPLATES,
    PartRole,
    ResourceKind,
    ResourceTypeTemplate,
    get_template,
)

__all__ = [
    "GeneratedName",
    "NamingContext",
    "CliOptions",
    "NamesRequest",
    "NamesResponse",
    "ServiceConfig",
    "TEMPLATES",
    "PartRole",
    "ResourceKind",
    "ResourceTypeTemplate",
    "get_template",
]
