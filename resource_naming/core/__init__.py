"""Core configuration, logging, and errors."""

from resource_naming.core.config import Settings, get_settings
from resource_naming.core.errors import (
    ConfigurationError,
    NamingError,
    UnsupportedResourceType,
)
from resource_naming.core.logging import configure_logging, structured_log

__all__ = [
    "Settings",
    "get_settings",
    "NamingError",
    "ConfigurationError",
    "UnsupportedResourceType",
    "configure_logging",
    "structured_log",
]
