"""Centralized configuration for resilience-search using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strictly typed configuration loaded from environment variables.

    Every variable is read with the ``RESILIENCE_SEARCH_`` prefix, e.g.
    ``RESILIENCE_SEARCH_DATA_PATH``. Values from a local ``.env`` file are
    honoured as well.
    """

    model_config = SettingsConfigDict(
        env_prefix="RESILIENCE_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",  # Ignore extra env vars not defined in model
    )

    # Data settings
    data_path: Path = Field(
        default=Path("data/projects.geojson"),
        description="GeoJSON FeatureCollection holding the project records",
    )

    # Search settings
    result_limit: int = Field(default=10, ge=1, le=10, description="Maximum number of ranked results returned")

    # Logging
    log_level: Literal["debug", "info", "warning", "error", "critical"] = Field(
        default="info", description="Logging level"
    )
    log_json: bool = Field(default=False, description="Emit structured JSON logs instead of plain text")

    # Observability
    service_name: str = Field(default="resilience-search", description="Service name reported to OpenTelemetry")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
