"""Build a NamingContext from serverless.yml content and CLI overrides."""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional, TypeVar, Union

from pydantic import BaseModel, ValidationError

from resource_naming.core.config import Settings, get_settings
from resource_naming.core.errors import ConfigurationError
from resource_naming.models.entities import NamingContext
from resource_naming.models.schemas import CliOptions, ServiceConfig
from resource_naming.models.templates import ResourceKind

ModelT = TypeVar("ModelT", bound=BaseModel)


def _validate(model: type[ModelT], raw: Union[ModelT, Mapping[str, Any], None], label: str) -> ModelT:
    if isinstance(raw, model):
        return raw
    try:
        return model.model_validate(dict(raw or {}))
    except ValidationError as e:
        raise ConfigurationError(
            f"invalid {label}",
            details={"errors": json.loads(e.json(include_url=False))},
        ) from e


def resolve(
    raw_config: Union[ServiceConfig, Mapping[str, Any], None],
    cli_overrides: Union[CliOptions, Mapping[str, Any], None] = None,
    *,
    settings: Optional[Settings] = None,
    package_timestamp: Optional[int] = None,
) -> NamingContext:
    """Apply defaults and CLI precedence; raise ConfigurationError without a service name."""
    settings = settings or get_settings()
    config = _validate(ServiceConfig, raw_config, "service configuration")
    options = _validate(CliOptions, cli_overrides, "CLI options")

    service_name = (config.service or "").strip()
    if not service_name:
        raise ConfigurationError("service name required")

    provider = config.provider
    region = (options.region or provider.region or "").strip()
    if not region or region.lower() in settings.placeholder_region_set():
        region = settings.default_region

    rollback = config.deploy.rollback
    if rollback is None:
        rollback = settings.default_rollback

    overrides = provider.resource_names()
    if options.resource_group:
        overrides[ResourceKind.RESOURCE_GROUP] = options.resource_group
    overrides.update({k: v for k, v in options.names.items() if v})

    return NamingContext(
        service_name=service_name,
        region=region,
        stage=options.stage or provider.stage or settings.default_stage,
        prefix=provider.prefix or settings.default_prefix,
        rollback_enabled=rollback,
        resource_overrides=overrides,
        package_timestamp=package_timestamp,
    )
