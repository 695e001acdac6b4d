"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from resource_naming import __version__
from resource_naming.api.routes import health_router, names_router
from resource_naming.core.config import get_settings
from resource_naming.core.errors import NamingError
from resource_naming.core.logging import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: configure logging."""
    configure_logging(get_settings().log_level)
    yield


app = FastAPI(
    title="Resource Naming",
    description="Deterministic Azure resource names for serverless deployments",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(names_router)


@app.exception_handler(NamingError)
async def naming_error_handler(request: Request, exc: NamingError) -> JSONResponse:
    """Map custom exceptions to JSON response."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.error_code,
            "message": exc.message,
            "details": exc.details,
        },
    )


@app.get("/")
async def root() -> dict:
    return {"service": "resource-naming", "docs": "/docs"}
