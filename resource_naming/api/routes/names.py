"""Name preview: POST /v1/names, GET /v1/names/kinds."""

import logging

from fastapi import APIRouter

from resource_naming.api.dependencies import ClockDep, SettingsDep
from resource_naming.core.logging import structured_log
from resource_naming.models.schemas import NamesRequest, NamesResponse, ResourceKindInfo
from resource_naming.models.templates import TEMPLATES
from resource_naming.services.naming import build_naming_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/names", tags=["names"])


@router.post("", response_model=NamesResponse)
def preview_names(body: NamesRequest, settings: SettingsDep, clock: ClockDep) -> NamesResponse:
    """Derive every resource name for one deployment run without touching Azure."""
    service = build_naming_service(
        body.config,
        body.options,
        clock=clock,
        package_timestamp=body.timestamp,
        settings=settings,
    )
    names = {generated.kind.value: generated.name for generated in service.all_names()}
    ctx = service.context
    structured_log(
        "INFO",
        "Previewed resource names",
        service=ctx.service_name,
        operation="preview_names",
        metadata={"region": ctx.region, "stage": ctx.stage, "count": len(names)},
        logger=logger,
    )
    return NamesResponse(
        service=ctx.service_name,
        region=ctx.region,
        stage=ctx.stage,
        prefix=ctx.prefix,
        rollback_enabled=ctx.rollback_enabled,
        timestamp=service.timestamp() if ctx.rollback_enabled else body.timestamp,
        names=names,
    )


@router.get("/kinds", response_model=list[ResourceKindInfo])
def list_kinds() -> list[ResourceKindInfo]:
    return [
        ResourceKindInfo(
            kind=kind.value,
            max_length=template.max_length,
            delimiter=template.delimiter,
            budgeted=template.budgeted,
        )
        for kind, template in TEMPLATES.items()
    ]
