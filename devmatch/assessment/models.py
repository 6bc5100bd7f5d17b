"""Data models for the Assessment Engine."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from devmatch.heuristics.roles import ExperienceLevel, normalize_experience_level

AssessmentSource = Literal["llm", "heuristic"]

DEFAULT_LLM_SCORE = 0.75


class Assessment(BaseModel):
    """Structured skills and experience judgment for one profile.

    Attributes:
        username: GitHub login the assessment describes.
        summary: Free-text overview.
        skills: Ordered skill names.
        experience_level: Junior, Mid or Senior.
        primary_languages: Main programming languages.
        tech_stack: Tools and platforms.
        strengths: Observed strengths.
        improvement_areas: Suggested areas to improve.
        overall_score: Overall profile score in [0.0, 1.0].
        analyzed_at: When the assessment was produced.
    """

    model_config = ConfigDict(frozen=True)

    username: str
    summary: str = ""
    skills: list[str] = Field(default_factory=list)
    experience_level: ExperienceLevel = "Mid"
    primary_languages: list[str] = Field(default_factory=list)
    tech_stack: list[str] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)
    improvement_areas: list[str] = Field(default_factory=list)
    overall_score: float = Field(default=DEFAULT_LLM_SCORE, ge=0.0, le=1.0)
    analyzed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> Assessment:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item).strip() for item in value if item is not None and str(item).strip()]


class LLMAssessment(BaseModel):
    """JSON object returned by the reasoning service.

    Every field is optional. Absent lists become empty, an absent or
    unknown tier becomes Mid, and an absent score becomes 0.75.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    summary: str = ""
    skills: list[str] = Field(default_factory=list)
    experience_level: ExperienceLevel = Field(default="Mid", alias="experienceLevel")
    primary_languages: list[str] = Field(default_factory=list, alias="primaryLanguages")
    tech_stack: list[str] = Field(default_factory=list, alias="techStack")
    strengths: list[str] = Field(default_factory=list)
    improvement_areas: list[str] = Field(default_factory=list, alias="improvementAreas")
    overall_score: float = Field(default=DEFAULT_LLM_SCORE, alias="overallScore")

    @field_validator("summary", mode="before")
    @classmethod
    def coerce_summary(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator(
        "skills",
        "primary_languages",
        "tech_stack",
        "strengths",
        "improvement_areas",
        mode="before",
    )
    @classmethod
    def coerce_lists(cls, v: Any) -> list[str]:
        return _string_list(v)

    @field_validator("experience_level", mode="before")
    @classmethod
    def coerce_level(cls, v: Any) -> str:
        return normalize_experience_level(v)

    @field_validator("overall_score", mode="before")
    @classmethod
    def clamp_score(cls, v: Any) -> float:
        """Clamp into [0, 1]; a missing or non-numeric score takes the default."""
        if v is None or isinstance(v, bool):
            return DEFAULT_LLM_SCORE
        try:
            score = float(v)
        except (TypeError, ValueError):
            return DEFAULT_LLM_SCORE
        if score != score:  # NaN
            return DEFAULT_LLM_SCORE
        return min(1.0, max(0.0, score))

    def to_assessment(self, username: str) -> Assessment:
        """Attach identity and a timestamp to the parsed answer."""
        return Assessment(
            username=username,
            summary=self.summary,
            skills=self.skills,
            experience_level=self.experience_level,
            primary_languages=self.primary_languages,
            tech_stack=self.tech_stack,
            strengths=self.strengths,
            improvement_areas=self.improvement_areas,
            overall_score=round(self.overall_score, 4),
        )


class AssessmentOutcome(BaseModel):
    """An assessment tagged with the path that produced it."""

    model_config = ConfigDict(frozen=True)

    assessment: Assessment
    source: AssessmentSource

    @property
    def used_fallback(self) -> bool:
        return self.source == "heuristic"
