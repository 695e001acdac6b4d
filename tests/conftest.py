"""Pytest configuration and shared fixtures."""

import os
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("LOG_FORMAT", "readable")

from resource_naming.core.config import Settings  # noqa: E402
from resource_naming.models.entities import NamingContext  # noqa: E402
from resource_naming.services.config_resolver import resolve  # noqa: E402


FIXED_TIMESTAMP = 1700000000


class CountingClock:
    """Clock stub that records how often it was read."""

    def __init__(self, value: int = FIXED_TIMESTAMP) -> None:
        self.value = value
        self.calls = 0

    def __call__(self) -> int:
        self.calls += 1
        return self.value


@pytest.fixture
def settings() -> Settings:
    """Default settings, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def clock() -> CountingClock:
    return CountingClock()


@pytest.fixture
def orders_config() -> dict:
    """serverless.yml content for the "orders" example service."""
    return {
        "service": "orders",
        "provider": {"region": "West US", "stage": "dev", "prefix": "sls"},
    }


@pytest.fixture
def make_context(settings: Settings) -> Callable[..., NamingContext]:
    def _make(config: dict, options: dict | None = None, **kwargs) -> NamingContext:
        return resolve(config, options, settings=settings, **kwargs)

    return _make


@pytest.fixture
def client(clock: CountingClock, settings: Settings) -> Iterator[TestClient]:
    """FastAPI test client with a fixed clock and default settings."""
    from resource_naming.api.dependencies import get_clock, get_naming_settings
    from resource_naming.main import app

    app.dependency_overrides[get_clock] = lambda: clock
    app.dependency_overrides[get_naming_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()
