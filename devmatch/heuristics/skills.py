"""Skill vocabulary and free-text skill extraction."""

from __future__ import annotations

from collections.abc import Iterable

# Ordered vocabulary; extraction reports matches in this order.
DEVELOPER_SKILLS: tuple[str, ...] = (
    # Programming languages
    "JavaScript",
    "TypeScript",
    "Python",
    "Java",
    "C#",
    "C++",
    "PHP",
    "Ruby",
    "Go",
    "Rust",
    "Swift",
    "Kotlin",
    # Frontend
    "React",
    "Angular",
    "Vue.js",
    "Vue",
    "Svelte",
    "HTML",
    "CSS",
    "SCSS",
    "SASS",
    "Bootstrap",
    "Tailwind",
    # Backend
    "Node.js",
    "Express",
    "Django",
    "Flask",
    "Spring",
    "Laravel",
    "ASP.NET",
    ".NET Core",
    "FastAPI",
    # Mobile
    "React Native",
    "Flutter",
    "Xamarin",
    "Android",
    "iOS",
    "Mobile Development",
    # Databases
    "SQL",
    "MongoDB",
    "PostgreSQL",
    "MySQL",
    "Redis",
    "SQLite",
    "NoSQL",
    "Firebase",
    # Cloud & DevOps
    "AWS",
    "Azure",
    "GCP",
    "Docker",
    "Kubernetes",
    "Jenkins",
    "Git",
    "GitHub",
    "GitLab",
    # Practices & tooling
    "GraphQL",
    "REST API",
    "Microservices",
    "Agile",
    "Scrum",
    "Test Driven Development",
    "TDD",
)

MAX_REQUIRED_SKILLS = 5
MAX_PREFERRED_SKILLS = 5


def extract_skills(
    text: str | None, vocabulary: Iterable[str] = DEVELOPER_SKILLS
) -> list[str]:
    """Return vocabulary terms found in ``text`` (case-insensitive substring)."""
    if not text:
        return []

    haystack = text.lower()
    found: list[str] = []
    seen: set[str] = set()
    for skill in vocabulary:
        key = skill.lower()
        if key in seen:
            continue
        if key in haystack:
            found.append(skill)
            seen.add(key)
    return found


def split_required_preferred(skills: list[str]) -> tuple[list[str], list[str]]:
    """Split extracted skills into required (first 5) and preferred (next 5)."""
    required = skills[:MAX_REQUIRED_SKILLS]
    preferred = skills[MAX_REQUIRED_SKILLS : MAX_REQUIRED_SKILLS + MAX_PREFERRED_SKILLS]
    return required, preferred


def partition_skills(
    required: Iterable[str], available: Iterable[str]
) -> tuple[list[str], list[str]]:
    """Split ``required`` into (matched, missing) against ``available``.

    Comparison is case-insensitive. Duplicates in ``required`` are reported
    once, keeping the spelling of their first occurrence.
    """
    available_keys = {skill.casefold() for skill in available}
    matched: list[str] = []
    missing: list[str] = []
    seen: set[str] = set()

    for skill in required:
        key = skill.casefold()
        if key in seen:
            continue
        seen.add(key)
        if key in available_keys:
            matched.append(skill)
        else:
            missing.append(skill)

    return matched, missing


def dedupe(values: Iterable[str]) -> list[str]:
    """Return values with case-insensitive duplicates removed, order kept."""
    result: list[str] = []
    seen: set[str] = set()
    for value in values:
        key = value.casefold()
        if key in seen:
            continue
        seen.add(key)
        result.append(value)
    return result
