"""Job title and posting classification heuristics."""

from __future__ import annotations

from typing import Literal

ExperienceLevel = Literal["Junior", "Mid", "Senior"]

EXPERIENCE_LEVELS: tuple[ExperienceLevel, ...] = ("Junior", "Mid", "Senior")

DEVELOPER_TERMS: tuple[str, ...] = (
    "developer",
    "programmer",
    "engineer",
    "coding",
    "programming",
    "software",
    "web development",
    "frontend",
    "backend",
    "full stack",
    "fullstack",
    "react",
    "javascript",
    "python",
    "java",
    "c#",
    ".net",
    "php",
    "node.js",
    "angular",
    "vue",
    "mobile app",
    "android",
    "ios",
)

EXCLUDED_TERMS: tuple[str, ...] = (
    "sales",
    "marketing",
    "hr",
    "human resources",
    "admin",
    "administration",
    "manager",
    "director",
    "ceo",
    "cto",
    "accountant",
    "finance",
    "legal",
    "lawyer",
    "designer",
)

SENIOR_TITLE_TERMS: tuple[str, ...] = ("senior", "lead", "principal")
JUNIOR_TITLE_TERMS: tuple[str, ...] = ("junior", "entry", "graduate")
REMOTE_TERMS: tuple[str, ...] = ("remote", "work from home", "wfh")


def is_developer_role(title: str | None, description: str | None = None) -> bool:
    """Return True if a posting looks like a software development role.

    The combined title and description must mention a developer term and
    must not mention an excluded term, unless that term appears as
    "software <term>".
    """
    text = f"{title or ''} {description or ''}".lower()

    if not any(term in text for term in DEVELOPER_TERMS):
        return False

    return not any(
        term in text and f"software {term}" not in text for term in EXCLUDED_TERMS
    )


def infer_experience_level(title: str | None) -> ExperienceLevel:
    """Infer a posting's experience tier from its title."""
    value = (title or "").lower()
    if any(term in value for term in SENIOR_TITLE_TERMS):
        return "Senior"
    if any(term in value for term in JUNIOR_TITLE_TERMS):
        return "Junior"
    return "Mid"


def is_remote_role(location: str | None, title: str | None) -> bool:
    """Return True if the location or title advertises remote work."""
    text = f"{location or ''} {title or ''}".lower()
    return any(term in text for term in REMOTE_TERMS)


def normalize_experience_level(
    value: object, default: ExperienceLevel = "Mid"
) -> ExperienceLevel:
    """Map free-form tier text ("senior", " JUNIOR ") onto a known tier."""
    if not isinstance(value, str):
        return default
    normalized = value.strip().lower()
    for level in EXPERIENCE_LEVELS:
        if normalized == level.lower():
            return level
    return default
