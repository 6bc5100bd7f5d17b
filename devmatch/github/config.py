"""Configuration settings for the GitHub profile aggregator."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GitHubConfig(BaseSettings):
    """GitHub aggregation settings.

    All settings have sensible defaults and can be overridden via
    environment variables with `GITHUB_` prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API settings
    token: str | None = Field(
        default=None,
        description="Optional personal access token (raises rate limits)",
    )
    api_base_url: str = Field(
        default="https://api.github.com",
        description="Base URL for the GitHub REST API",
    )
    user_agent: str = Field(
        default="DevMatch/1.0",
        description="User-Agent header sent with every request",
    )
    timeout: Annotated[float, Field(gt=0)] = Field(
        default=15.0,
        description="Timeout per request in seconds",
    )

    # Repository paging
    repos_per_page: Annotated[int, Field(gt=0, le=100)] = Field(
        default=100,
        description="Repositories requested per page",
    )
    max_repo_pages: Annotated[int, Field(gt=0)] = Field(
        default=5,
        description="Hard cap on repository pages fetched",
    )
    max_repositories: Annotated[int, Field(gt=0)] = Field(
        default=50,
        description="Repositories retained after sorting by last update",
    )

    # Contribution estimate
    contributor_repo_limit: Annotated[int, Field(ge=0)] = Field(
        default=10,
        description="Recently pushed repositories inspected for contribution counts",
    )
    contributor_lookback_days: Annotated[int, Field(gt=0)] = Field(
        default=730,
        description="Only repositories pushed within this many days are inspected",
    )
    contributor_request_delay: Annotated[float, Field(ge=0.0)] = Field(
        default=0.1,
        description="Pause after each contributor request, in seconds",
    )
    contributor_concurrency: Annotated[int, Field(gt=0, le=3)] = Field(
        default=2,
        description="Contributor requests allowed in flight at once",
    )


_github_config: GitHubConfig | None = None


def get_github_config() -> GitHubConfig:
    """Get the GitHub configuration singleton."""
    global _github_config
    if _github_config is None:
        _github_config = GitHubConfig()
    return _github_config


def reset_github_config() -> None:
    """Reset the GitHub configuration singleton (useful for testing)."""
    global _github_config
    _github_config = None
