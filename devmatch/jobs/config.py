"""Configuration settings for the Job Source Aggregator."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class JobsConfig(BaseSettings):
    """Job source settings.

    All settings have sensible defaults and can be overridden via
    environment variables with `JOBS_` prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="JOBS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Jooble settings
    jooble_api_key: str | None = Field(
        default=None,
        description="Jooble API key; unset disables the third-party source",
    )
    jooble_api_url: str = Field(
        default="https://jooble.org/api/",
        description="Jooble API endpoint; the key is appended to it",
    )
    search_radius: Annotated[int, Field(ge=0)] = Field(
        default=50,
        description="Search radius sent with each query",
    )
    search_page: Annotated[int, Field(gt=0)] = Field(
        default=1,
        description="Result page requested by the aggregator",
    )
    default_location: str = Field(
        default="remote",
        description="Search location used when no hint is available",
    )
    timeout: Annotated[float, Field(gt=0)] = Field(
        default=20.0,
        description="Timeout per search request in seconds",
    )


_jobs_config: JobsConfig | None = None


def get_jobs_config() -> JobsConfig:
    """Get the jobs configuration singleton."""
    global _jobs_config
    if _jobs_config is None:
        _jobs_config = JobsConfig()
    return _jobs_config


def reset_jobs_config() -> None:
    """Reset the jobs configuration singleton (useful for testing)."""
    global _jobs_config
    _jobs_config = None
