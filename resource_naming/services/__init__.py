"""Services: config resolution, short forms, hashing, budgeting, naming facade."""

from resource_naming.services.budget import NamePart, allocate
from resource_naming.services.composer import compose
from resource_naming.services.config_resolver import resolve
from resource_naming.services.hashing import content_hash
from resource_naming.services.naming import ResourceNamingService, build_naming_service
from resource_naming.services.short_form import short_region, short_stage
from resource_naming.services.timestamps import TimestampProvider

__all__ = [
    "NamePart",
    "allocate",
    "compose",
    "resolve",
    "content_hash",
    "ResourceNamingService",
    "build_naming_service",
    "short_region",
    "short_stage",
    "TimestampProvider",
]
