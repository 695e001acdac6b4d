"""Naming defaults loaded from environment with validation."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Defaults applied when the service configuration leaves a field unset."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Context defaults
    default_region: str = Field(
        default="westus",
        min_length=1,
        description="Azure region used when none is configured",
    )
    placeholder_regions: str = Field(
        default="us-east-1",
        description=(
            "Comma-separated regions treated as 'unset'. "
            "The serverless core injects the AWS default when no region is configured."
        ),
    )
    default_stage: str = Field(default="dev", min_length=1)
    default_prefix: str = Field(default="sls", min_length=1)
    default_rollback: bool = Field(
        default=False,
        description="Append the session timestamp to deployment names when deploy.rollback is unset",
    )

    # Naming
    hash_width: int = Field(
        default=6,
        ge=1,
        le=32,
        description="Characters of the service-name digest used as the disambiguating token",
    )

    # Logging
    log_level: LogLevel = Field(default="INFO")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        u = (v or "INFO").upper()
        if u not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return u

    def placeholder_region_set(self) -> set[str]:
        return {r.strip().lower() for r in (self.placeholder_regions or "").split(",") if r.strip()}


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
