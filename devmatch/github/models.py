"""Data models for the GitHub profile aggregator."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _ensure_utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class RepositorySummary(BaseModel):
    """A public repository, reduced to the fields used for assessment."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Repository name")
    description: str | None = Field(default=None, description="Repository description")
    language: str | None = Field(default=None, description="Primary language")
    stargazers_count: int = Field(default=0, ge=0, description="Star count")
    forks_count: int = Field(default=0, ge=0, description="Fork count")
    size: int = Field(default=0, ge=0, description="Repository size in KB")
    fork: bool = Field(default=False, description="Whether the repository is a fork")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")
    pushed_at: datetime | None = Field(default=None, description="Last push timestamp")
    html_url: str = Field(default="", description="Repository URL")

    @field_validator("created_at", "updated_at", "pushed_at", mode="after")
    @classmethod
    def normalize_timestamps(cls, v: datetime | None) -> datetime | None:
        """Store all timestamps as UTC-aware datetimes."""
        return _ensure_utc(v)

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_api(cls, data: dict) -> RepositorySummary:
        """Build from a GitHub `/users/{user}/repos` item."""
        return cls.model_validate(
            {
                "name": data.get("name") or "",
                "description": data.get("description"),
                "language": data.get("language"),
                "stargazers_count": data.get("stargazers_count") or 0,
                "forks_count": data.get("forks_count") or 0,
                "size": data.get("size") or 0,
                "fork": bool(data.get("fork", False)),
                "created_at": data["created_at"],
                "updated_at": data["updated_at"],
                "pushed_at": data.get("pushed_at"),
                "html_url": data.get("html_url") or "",
            }
        )


class ProfileSnapshot(BaseModel):
    """Immutable per-request aggregate of a GitHub profile.

    Attributes:
        username: GitHub login.
        name: Display name (empty when the user has not set one).
        bio: Profile bio.
        location: Free-text location.
        company: Company field.
        blog: Blog/website URL.
        public_repos: Public repository count reported by GitHub.
        followers: Follower count.
        following: Following count.
        created_at: Account creation timestamp.
        updated_at: Profile update timestamp.
        avatar_url: Avatar image URL.
        html_url: Profile page URL.
        repositories: Up to 50 repositories, most recently updated first.
        language_weights: Top languages by weight, heaviest first.
        total_commits: Estimated contribution count.
        analyzed_at: When the snapshot was assembled.
    """

    model_config = ConfigDict(frozen=True)

    username: str
    name: str = ""
    bio: str | None = None
    location: str | None = None
    company: str | None = None
    blog: str | None = None
    public_repos: int = Field(default=0, ge=0)
    followers: int = Field(default=0, ge=0)
    following: int = Field(default=0, ge=0)
    created_at: datetime
    updated_at: datetime | None = None
    avatar_url: str = ""
    html_url: str = ""
    repositories: list[RepositorySummary] = Field(default_factory=list)
    language_weights: dict[str, int] = Field(default_factory=dict)
    total_commits: int = Field(default=0, ge=0)
    analyzed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @field_validator("created_at", "updated_at", mode="after")
    @classmethod
    def normalize_timestamps(cls, v: datetime | None) -> datetime | None:
        """Store all timestamps as UTC-aware datetimes."""
        return _ensure_utc(v)

    @property
    def top_languages(self) -> list[str]:
        """Language names ordered by weight, heaviest first."""
        return list(self.language_weights)

    def account_age_days(self, now: datetime | None = None) -> int:
        """Whole days since the account was created."""
        current = now or datetime.now(UTC)
        return max(0, (current - self.created_at).days)

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> ProfileSnapshot:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)
