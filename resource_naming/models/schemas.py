"""Pydantic models for raw service configuration, CLI overrides and the preview API."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from resource_naming.models.templates import ResourceKind


class ResourceSettings(BaseModel):
    """Per-resource block in serverless.yml, e.g. ``provider.storageAccount``."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(default=None, max_length=1024)


class ProviderConfig(BaseModel):
    """``provider`` section of serverless.yml."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    region: Optional[str] = None
    stage: Optional[str] = None
    prefix: Optional[str] = None
    resource_group: Optional[str] = Field(default=None, alias="resourceGroup")
    deployment_name: Optional[str] = Field(default=None, alias="deploymentName")
    function_app: Optional[ResourceSettings] = Field(default=None, alias="functionApp")
    app_service_plan: Optional[ResourceSettings] = Field(default=None, alias="appServicePlan")
    hosting_environment: Optional[ResourceSettings] = Field(default=None, alias="hostingEnvironment")
    storage_account: Optional[ResourceSettings] = Field(default=None, alias="storageAccount")
    virtual_network: Optional[ResourceSettings] = Field(default=None, alias="virtualNetwork")
    apim: Optional[ResourceSettings] = None
    app_insights: Optional[ResourceSettings] = Field(default=None, alias="appInsights")

    def resource_names(self) -> dict[ResourceKind, str]:
        """Explicit names configured per resource kind."""
        names: dict[ResourceKind, str] = {}
        if self.resource_group:
            names[ResourceKind.RESOURCE_GROUP] = self.resource_group
        if self.deployment_name:
            names[ResourceKind.DEPLOYMENT] = self.deployment_name
        blocks = {
            ResourceKind.FUNCTION_APP: self.function_app,
            ResourceKind.APP_SERVICE_PLAN: self.app_service_plan,
            ResourceKind.HOSTING_ENVIRONMENT: self.hosting_environment,
            ResourceKind.STORAGE_ACCOUNT: self.storage_account,
            ResourceKind.VIRTUAL_NETWORK: self.virtual_network,
            ResourceKind.APIM: self.apim,
            ResourceKind.APP_INSIGHTS: self.app_insights,
        }
        for kind, block in blocks.items():
            if block is not None and block.name:
                names[kind] = block.name
        return names


class DeployConfig(BaseModel):
    """``deploy`` section of serverless.yml."""

    model_config = ConfigDict(extra="ignore")

    rollback: Optional[bool] = None


class ServiceConfig(BaseModel):
    """The parts of serverless.yml the naming core reads."""

    model_config = ConfigDict(extra="ignore")

    service: Optional[str] = None
    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    deploy: DeployConfig = Field(default_factory=DeployConfig)

    @field_validator("service", mode="before")
    @classmethod
    def unwrap_service_name(cls, v: Any) -> Any:
        # serverless accepts both `service: name` and `service: {name: ...}`
        if isinstance(v, dict):
            return v.get("name")
        return v


class CliOptions(BaseModel):
    """Command-line overrides; every set field wins over the file value."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    region: Optional[str] = None
    stage: Optional[str] = None
    resource_group: Optional[str] = Field(default=None, alias="resourceGroup")
    names: dict[ResourceKind, str] = Field(default_factory=dict)


# --- API ---
class NamesRequest(BaseModel):
    """POST /v1/names request body."""

    config: dict[str, Any] = Field(..., description="serverless.yml content as a mapping")
    options: CliOptions = Field(default_factory=CliOptions)
    timestamp: Optional[int] = Field(
        default=None,
        ge=0,
        description="Fixed session timestamp; generated once per request if omitted",
    )


class NamesResponse(BaseModel):
    """POST /v1/names response body."""

    service: str
    region: str
    stage: str
    prefix: str
    rollback_enabled: bool
    timestamp: Optional[int] = None
    names: dict[str, str]


class ResourceKindInfo(BaseModel):
    kind: str
    max_length: int
    delimiter: str
    budgeted: bool
