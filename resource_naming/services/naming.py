"""Resource naming facade: one operation per logical Azure name."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from resource_naming.core.config import Settings, get_settings
from resource_naming.core.logging import structured_log
from resource_naming.models.entities import GeneratedName, NamingContext
from resource_naming.models.schemas import CliOptions, ServiceConfig
from resource_naming.models.templates import (
    TEMPLATES,
    PartRole,
    ResourceKind,
    ResourceTypeTemplate,
    get_template,
)
from resource_naming.services.budget import NamePart, allocate, joined_length
from resource_naming.services.composer import compose, filter_chars, slug
from resource_naming.services.config_resolver import resolve
from resource_naming.services.hashing import content_hash
from resource_naming.services.short_form import short_region, short_stage
from resource_naming.services.timestamps import Clock, TimestampProvider, epoch_millis

logger = logging.getLogger(__name__)

ARTIFACT_EXTENSION = ".zip"


class ResourceNamingService:
    """Derives every name for one deployment run from a single NamingContext.

    An instance is a session: the rollback timestamp is fixed on first use
    and shared by all names it returns afterwards. Use one instance per
    deployment run.
    """

    def __init__(
        self,
        context: NamingContext,
        clock: Clock = epoch_millis,
        settings: Optional[Settings] = None,
        templates: Optional[Mapping[ResourceKind, ResourceTypeTemplate]] = None,
    ) -> None:
        self._context = context
        self._settings = settings or get_settings()
        self._templates = dict(TEMPLATES if templates is None else templates)
        self._timestamps = TimestampProvider(clock, fixed=context.package_timestamp)

    @property
    def context(self) -> NamingContext:
        return self._context

    def timestamp(self) -> int:
        return self._timestamps.timestamp()

    def resource_group_name(self) -> str:
        template = self._template(ResourceKind.RESOURCE_GROUP)
        explicit = self._explicit(template)
        if explicit:
            return explicit
        return self._compose_configured(template)

    def deployment_name(self) -> str:
        """Configured name or ``{resource group}-deployment``, plus ``-t{timestamp}`` on rollback.

        Names over the ceiling are re-derived from the hashed service token,
        keeping the timestamp.
        """
        template = self._template(ResourceKind.DEPLOYMENT)
        rollback = self._context.rollback_enabled
        name = self._explicit(template) or f"{self.resource_group_name()}{self._suffix_token(template)}"
        if rollback:
            name = f"{name}-t{self.timestamp()}"
        if len(name) > template.max_length:
            return self._compose_budgeted(template, include_timestamp=rollback)
        return name

    def artifact_name(self, deployment_name: str) -> str:
        """Blob name for the uploaded package, derived from a deployment name.

        The first ``-rg-deployment`` collapses to ``-artifact``, any other
        ``-deployment`` becomes ``-artifact``, and ``.zip`` is appended.
        """
        template = self._template(ResourceKind.ARTIFACT)
        artifact = self._suffix_token(template)
        deployment = self._suffix_token(self._template(ResourceKind.DEPLOYMENT))
        group = self._suffix_token(self._template(ResourceKind.RESOURCE_GROUP))
        name = deployment_name.replace(f"{group}{deployment}", artifact, 1)
        name = name.replace(deployment, artifact)
        return f"{filter_chars(name, template)}{ARTIFACT_EXTENSION}"

    def resource_name(self, resource_type: ResourceKind | str) -> str:
        template = self._template(resource_type)
        kind = template.kind
        if kind is ResourceKind.RESOURCE_GROUP:
            return self.resource_group_name()
        if kind is ResourceKind.DEPLOYMENT:
            return self.deployment_name()
        if kind is ResourceKind.ARTIFACT:
            return self.artifact_name(self.deployment_name())

        explicit = self._explicit(template)
        if explicit:
            return explicit
        if template.budgeted:
            return self._compose_budgeted(template)
        return self._compose_configured(template)

    def generate(self, resource_type: ResourceKind | str) -> GeneratedName:
        template = self._template(resource_type)
        return GeneratedName(kind=template.kind, name=self.resource_name(template.kind))

    def all_names(self) -> list[GeneratedName]:
        return [self.generate(kind) for kind in ResourceKind if kind in self._templates]

    # --- composition ---

    def _template(self, resource_type: ResourceKind | str) -> ResourceTypeTemplate:
        return get_template(resource_type, self._templates)

    def _service_token(self, template: ResourceTypeTemplate) -> str:
        return slug(self._context.service_name, template)

    @staticmethod
    def _suffix_token(template: ResourceTypeTemplate) -> str:
        return f"{template.delimiter}{template.literal_suffix}"

    def _parts(self, template: ResourceTypeTemplate, include_timestamp: bool = False) -> list[NamePart]:
        ctx = self._context
        values: dict[PartRole, str] = {
            PartRole.PREFIX: ctx.prefix,
            PartRole.REGION: short_region(ctx.region),
            PartRole.STAGE: short_stage(ctx.stage),
            PartRole.LITERAL_SUFFIX: template.literal_suffix,
            PartRole.TIMESTAMP: f"t{self.timestamp()}" if include_timestamp else "",
        }
        if template.use_name_hash:
            values[PartRole.SERVICE_HASH] = content_hash(ctx.service_name, self._settings.hash_width)
        else:
            # a name with no allowed characters still needs a distinguishing token
            values[PartRole.SERVICE_HASH] = self._service_token(template) or content_hash(
                ctx.service_name, self._settings.hash_width
            )
        # Filtered before budgeting so stripped characters don't use up the ceiling.
        return [NamePart(role, filter_chars(values[role], template)) for role in template.roles]

    def _compose_configured(self, template: ResourceTypeTemplate) -> str:
        parts = self._parts(template)
        values = [p.value for p in parts]
        if joined_length(values, template.delimiter) > template.max_length:
            values = allocate(parts, template.max_length, template.delimiter)
        return self._derived(template, compose(values, template))

    def _compose_budgeted(self, template: ResourceTypeTemplate, include_timestamp: bool = False) -> str:
        parts = self._parts(template, include_timestamp=include_timestamp)
        values = allocate(
            parts,
            template.max_length,
            template.delimiter,
            service_source=self._service_token(template) or None,
        )
        return self._derived(template, compose(values, template))

    def _explicit(self, template: ResourceTypeTemplate) -> Optional[str]:
        """Configured name, filtered to the kind's character set, lowercased and clamped."""
        configured = self._context.override_for(template.kind)
        if not configured:
            return None
        name = compose([configured], template)[: template.max_length]
        if template.delimiter:
            name = name.rstrip(template.delimiter)
        if name != configured:
            structured_log(
                "WARNING",
                "Configured name adjusted to fit the resource kind",
                service=self._context.service_name,
                resource_kind=template.kind.value,
                metadata={"configured": configured, "name": name, "max_length": template.max_length},
                logger=logger,
            )
        return name or None

    def _derived(self, template: ResourceTypeTemplate, name: str) -> str:
        structured_log(
            "DEBUG",
            "Derived resource name",
            service=self._context.service_name,
            resource_kind=template.kind.value,
            metadata={"name": name, "length": len(name), "max_length": template.max_length},
            logger=logger,
        )
        return name


def build_naming_service(
    raw_config: Union[ServiceConfig, Mapping[str, Any], None],
    cli_overrides: Union[CliOptions, Mapping[str, Any], None] = None,
    *,
    clock: Clock = epoch_millis,
    package_timestamp: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> ResourceNamingService:
    """Resolve the context once and return the session service for it."""
    settings = settings or get_settings()
    context = resolve(raw_config, cli_overrides, settings=settings, package_timestamp=package_timestamp)
    return ResourceNamingService(context, clock=clock, settings=settings)
