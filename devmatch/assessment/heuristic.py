"""Deterministic profile assessment.

Used whenever the reasoning service is not configured, fails, or answers
with something that cannot be parsed. Every function here is pure.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from types import MappingProxyType

from devmatch.assessment.models import Assessment
from devmatch.github.models import ProfileSnapshot
from devmatch.heuristics.roles import ExperienceLevel
from devmatch.heuristics.skills import dedupe

TOP_LANGUAGE_COUNT = 3

# Keys are casefolded language names.
INFERRED_SKILLS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "javascript": ("Node.js", "React", "Web Development", "Frontend"),
        "python": ("Django", "Flask", "Data Science", "Machine Learning"),
        "java": ("Spring", "Android", "Enterprise Development"),
        "c#": (".NET", "ASP.NET", "Backend Development"),
        "go": ("Microservices", "Cloud Development", "DevOps"),
    }
)

BASE_TECH_STACK: tuple[str, ...] = ("Git", "GitHub")

TECH_STACK: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "javascript": ("npm", "Webpack", "Babel"),
        "python": ("pip", "Virtual Environments"),
        "java": ("Maven", "Gradle"),
    }
)

DEFAULT_STRENGTHS: tuple[str, ...] = ("Active GitHub user", "Open source contributor")

IMPROVEMENT_AREAS: tuple[str, ...] = ("API Documentation", "Testing Coverage", "Code Comments")

# Experience tier thresholds
JUNIOR_MAX_AGE_DAYS = 365
JUNIOR_MIN_REPOS = 5
JUNIOR_MIN_COMMITS = 50
SENIOR_MIN_AGE_DAYS = 1825
SENIOR_MIN_REPOS = 20
SENIOR_MIN_COMMITS = 500


def classify_experience(age_days: int, repos: int, commits: int) -> ExperienceLevel:
    """Classify an account by age in days, public repositories and commits."""
    if age_days < JUNIOR_MAX_AGE_DAYS or repos < JUNIOR_MIN_REPOS or commits < JUNIOR_MIN_COMMITS:
        return "Junior"
    if age_days > SENIOR_MIN_AGE_DAYS and repos > SENIOR_MIN_REPOS and commits > SENIOR_MIN_COMMITS:
        return "Senior"
    return "Mid"


def compute_overall_score(repos: int, languages: int, followers: int, commits: int) -> float:
    """Overall profile score: 0.5 plus four capped activity bonuses, at most 1.0."""
    score = 0.5
    score += min(0.20, repos * 0.01)
    score += min(0.15, languages * 0.03)
    score += min(0.10, followers * 0.002)
    score += min(0.05, commits * 0.0001)
    return round(min(1.0, score), 4)


def generate_strengths(repos: int, followers: int, languages: int, commits: int) -> list[str]:
    strengths: list[str] = []
    if repos > 10:
        strengths.append("Prolific contributor")
    if followers > 20:
        strengths.append("Strong community presence")
    if languages > 3:
        strengths.append("Multi-language proficiency")
    if commits > 100:
        strengths.append("Consistent development activity")
    return strengths or list(DEFAULT_STRENGTHS)


def infer_skills(languages: Iterable[str]) -> list[str]:
    """Adjacent ecosystem skills for the given languages, without duplicates."""
    skills: list[str] = []
    for language in languages:
        skills.extend(INFERRED_SKILLS.get(language.casefold(), ()))
    return dedupe(skills)


def infer_tech_stack(languages: Iterable[str]) -> list[str]:
    stack = list(BASE_TECH_STACK)
    for language in languages:
        stack.extend(TECH_STACK.get(language.casefold(), ()))
    return dedupe(stack)


def build_summary(public_repos: int, languages: list[str]) -> str:
    return (
        f"Active developer with {public_repos} public repositories, "
        f"primarily working with {', '.join(languages)}. "
        "Shows consistent contribution patterns and engagement with the developer community."
    )


def build_heuristic_assessment(
    snapshot: ProfileSnapshot, now: datetime | None = None
) -> Assessment:
    """Assess a profile from its counts and language weights alone."""
    top_languages = snapshot.top_languages[:TOP_LANGUAGE_COUNT]
    language_count = len(snapshot.language_weights)

    return Assessment(
        username=snapshot.username,
        summary=build_summary(snapshot.public_repos, top_languages),
        skills=dedupe([*top_languages, *infer_skills(top_languages)]),
        experience_level=classify_experience(
            snapshot.account_age_days(now),
            snapshot.public_repos,
            snapshot.total_commits,
        ),
        primary_languages=top_languages,
        tech_stack=infer_tech_stack(top_languages),
        strengths=generate_strengths(
            snapshot.public_repos,
            snapshot.followers,
            language_count,
            snapshot.total_commits,
        ),
        improvement_areas=list(IMPROVEMENT_AREAS),
        overall_score=compute_overall_score(
            snapshot.public_repos,
            language_count,
            snapshot.followers,
            snapshot.total_commits,
        ),
    )
