"""API route modules."""

from resource_naming.api.routes.health import router as health_router
from resource_naming.api.routes.names import router as names_router

__all__ = ["health_router", "names_router"]
