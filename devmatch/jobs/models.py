"""Data models for the Job Source Aggregator."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from devmatch.heuristics.roles import ExperienceLevel, normalize_experience_level

RemoteOption = Literal["Remote", "Hybrid", "On-site"]

REMOTE_OPTIONS: tuple[RemoteOption, ...] = ("Remote", "Hybrid", "On-site")


def _ensure_utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _normalize_remote_option(value: Any) -> Any:
    if isinstance(value, str):
        key = value.strip().lower().replace(" ", "-")
        for option in REMOTE_OPTIONS:
            if key == option.lower():
                return option
        if key in {"onsite", "on-site", "office"}:
            return "On-site"
    return value


def _clean_skills(value: Any) -> Any:
    if isinstance(value, str):
        value = value.split(",")
    if isinstance(value, list):
        return [str(item).strip() for item in value if item is not None and str(item).strip()]
    return value


class JobPostingInput(BaseModel):
    """Fields accepted when creating or updating a stored posting."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., min_length=1, description="Job title")
    company: str = Field(..., min_length=1, description="Hiring company")
    location: str | None = None
    description: str | None = None
    required_skills: list[str] = Field(default_factory=list)
    preferred_skills: list[str] = Field(default_factory=list)
    experience_level: ExperienceLevel | None = None
    salary_min: float | None = Field(default=None, ge=0)
    salary_max: float | None = Field(default=None, ge=0)
    salary_currency: str | None = None
    remote_options: RemoteOption = "On-site"
    expires_at: datetime | None = None
    application_url: str | None = None

    @field_validator("required_skills", "preferred_skills", mode="before")
    @classmethod
    def clean_skills(cls, v: Any) -> Any:
        return _clean_skills(v)

    @field_validator("experience_level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return normalize_experience_level(v)

    @field_validator("remote_options", mode="before")
    @classmethod
    def normalize_remote(cls, v: Any) -> Any:
        return _normalize_remote_option(v)

    @field_validator("expires_at", mode="after")
    @classmethod
    def normalize_expiry(cls, v: datetime | None) -> datetime | None:
        return _ensure_utc(v)

    @model_validator(mode="after")
    def validate_salary_range(self) -> JobPostingInput:
        """Reject a salary range whose minimum exceeds its maximum."""
        if (
            self.salary_min is not None
            and self.salary_max is not None
            and self.salary_min > self.salary_max
        ):
            raise ValueError(
                f"salary_min ({self.salary_min}) exceeds salary_max ({self.salary_max})"
            )
        return self


class NormalizedJobPosting(BaseModel):
    """A job posting in the one shape shared by every source.

    Attributes:
        id: Numeric posting id (store row id or a hash of a third-party id).
        title: Job title.
        company: Hiring company.
        location: Free-text location.
        description: Posting text or snippet.
        required_skills: Skills the posting requires.
        preferred_skills: Skills the posting prefers.
        experience_level: Junior, Mid or Senior when known.
        salary_min: Lower salary bound.
        salary_max: Upper salary bound.
        salary_currency: Currency code when known.
        remote_options: Remote, Hybrid or On-site.
        posted_at: When the posting was published or last updated.
        expires_at: When the posting expires, if ever.
        is_active: Whether the posting is open.
        application_url: Where to apply.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    company: str
    location: str | None = None
    description: str | None = None
    required_skills: list[str] = Field(default_factory=list)
    preferred_skills: list[str] = Field(default_factory=list)
    experience_level: ExperienceLevel | None = None
    salary_min: float | None = None
    salary_max: float | None = None
    salary_currency: str | None = None
    remote_options: RemoteOption = "On-site"
    posted_at: datetime
    expires_at: datetime | None = None
    is_active: bool = True
    application_url: str | None = None

    @field_validator("remote_options", mode="before")
    @classmethod
    def normalize_remote(cls, v: Any) -> Any:
        return _normalize_remote_option(v)

    @field_validator("posted_at", "expires_at", mode="after")
    @classmethod
    def normalize_timestamps(cls, v: datetime | None) -> datetime | None:
        """Store all timestamps as UTC-aware datetimes."""
        return _ensure_utc(v)

    @property
    def is_remote(self) -> bool:
        return self.remote_options == "Remote"

    @property
    def dedupe_key(self) -> tuple[str, str]:
        """Identity used when merging sources: the exact (title, company) pair."""
        return (self.title, self.company)

    def is_open(self, now: datetime | None = None) -> bool:
        """Active and not past its expiry."""
        if not self.is_active:
            return False
        if self.expires_at is None:
            return True
        return self.expires_at > (now or datetime.now(UTC))

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")


class JoobleSearchRequest(BaseModel):
    """Body of a Jooble search request."""

    keywords: str = ""
    location: str = ""
    radius: int = 50
    page: int = 1


class JoobleJob(BaseModel):
    """One item from a Jooble search response."""

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    title: str = ""
    location: str = ""
    snippet: str = ""
    salary: str = ""
    source: str = ""
    type: str = ""
    link: str = ""
    company: str = ""
    updated: str = ""

    @field_validator(
        "title",
        "location",
        "snippet",
        "salary",
        "source",
        "type",
        "link",
        "company",
        "updated",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> str:
        """Jooble sends ids as strings or as numbers."""
        if v is None:
            return ""
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, float) and v.is_integer():
            return str(int(v))
        return str(v)
