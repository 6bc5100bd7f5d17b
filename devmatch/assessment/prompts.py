"""Prompt builders for LLM-based profile assessment."""

from __future__ import annotations

from devmatch.github.models import ProfileSnapshot

ASSESSMENT_SYSTEM_PROMPT = (
    "You are an expert technical recruiter and software developer analyst. "
    "Provide accurate, professional assessments of GitHub profiles."
)

PROMPT_LANGUAGE_LIMIT = 5
PROMPT_REPOSITORY_LIMIT = 10

RESPONSE_SCHEMA = """{
  "summary": "Brief overview of the developer's skills and experience",
  "skills": ["skill1", "skill2", "skill3"],
  "experienceLevel": "Junior|Mid|Senior",
  "primaryLanguages": ["language1", "language2"],
  "techStack": ["technology1", "technology2"],
  "strengths": ["strength1", "strength2"],
  "improvementAreas": ["area1", "area2"],
  "overallScore": 0.85
}"""


def _or_missing(value: str | None) -> str:
    return value if value else "Not provided"


def build_assessment_prompt(snapshot: ProfileSnapshot) -> str:
    """Build the user prompt describing a profile and the expected JSON answer."""
    lines = [
        "Analyze this GitHub profile and provide a detailed assessment:",
        "",
        f"Profile: {snapshot.name} ({snapshot.username})",
        f"Bio: {_or_missing(snapshot.bio)}",
        f"Location: {_or_missing(snapshot.location)}",
        f"Company: {_or_missing(snapshot.company)}",
        f"Public Repositories: {snapshot.public_repos}",
        f"Followers: {snapshot.followers}",
        f"Account Created: {snapshot.created_at:%Y-%m-%d}",
        "",
        "Programming Languages (by usage):",
    ]

    for language, weight in list(snapshot.language_weights.items())[:PROMPT_LANGUAGE_LIMIT]:
        lines.append(f"- {language}: {weight} points")
    lines.append("")

    lines.append("Recent Repository Activity:")
    for repo in snapshot.repositories[:PROMPT_REPOSITORY_LIMIT]:
        lines.append(
            f"- {repo.name} ({repo.language or 'Unknown'}) - "
            f"Stars: {repo.stargazers_count}, Forks: {repo.forks_count}"
        )
        if repo.description:
            lines.append(f"  Description: {repo.description}")
    lines.append("")

    lines.append("Please provide a JSON response with the following structure:")
    lines.append(RESPONSE_SCHEMA)

    return "\n".join(lines)
