"""Data models for profile-to-job matching."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from devmatch.assessment.models import Assessment, AssessmentSource
from devmatch.github.models import ProfileSnapshot


class JobMatch(BaseModel):
    """A scored pairing of an assessment against one posting."""

    model_config = ConfigDict(frozen=True)

    job_id: int
    job_title: str
    company: str = ""
    match_score: float = Field(..., ge=0.0, le=1.0)
    matching_skills: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)
    rationale: str = ""

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")


class ProfileAnalysis(BaseModel):
    """A profile snapshot with its assessment."""

    model_config = ConfigDict(frozen=True)

    snapshot: ProfileSnapshot
    assessment: Assessment
    assessment_source: AssessmentSource

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")


class JobMatchReport(BaseModel):
    """Result of the full pipeline for one username.

    Attributes:
        username: GitHub login that was analyzed.
        assessment: Assessment used for scoring.
        assessment_source: "llm" or "heuristic".
        matches: Scored postings, best first.
        postings_considered: Postings returned by the job sources.
        analyzed_at: When the report was produced.
    """

    model_config = ConfigDict(frozen=True)

    username: str
    assessment: Assessment
    assessment_source: AssessmentSource
    matches: list[JobMatch] = Field(default_factory=list)
    postings_considered: int = 0
    analyzed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def best_match(self) -> JobMatch | None:
        return self.matches[0] if self.matches else None

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")
