"""Custom exceptions for resource naming."""

from typing import Any, Optional


class NamingError(Exception):
    """Base exception for naming errors."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(NamingError):
    """Raised when the service configuration cannot produce a naming context."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message, status_code=422, details=details)


class UnsupportedResourceType(NamingError):
    """Raised when a name is requested for a resource kind with no template."""

    def __init__(self, resource_type: Any) -> None:
        super().__init__(
            f"Unsupported resource type: {resource_type}",
            status_code=400,
            details={"resource_type": str(resource_type)},
        )
