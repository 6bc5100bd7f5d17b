"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

_CREDENTIAL_ENV_VARS = (
    "ASSESSMENT_LLM_API_KEY",
    "JOBS_JOOBLE_API_KEY",
    "GITHUB_TOKEN",
)


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Start every test without credentials and with fresh config singletons."""
    from devmatch.assessment.config import reset_assessment_config
    from devmatch.config.settings import reset_settings
    from devmatch.github.config import reset_github_config
    from devmatch.jobs.config import reset_jobs_config
    from devmatch.utils.logging import reset_logging

    for name in _CREDENTIAL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    reset_settings()
    reset_github_config()
    reset_assessment_config()
    reset_jobs_config()
    reset_logging()
    yield
    reset_settings()
    reset_github_config()
    reset_assessment_config()
    reset_jobs_config()
    reset_logging()


@pytest.fixture
def now() -> datetime:
    """A fixed reference time."""
    return datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def make_repo():
    """Factory for RepositorySummary objects with sensible defaults."""
    from devmatch.github.models import RepositorySummary

    def _make(name: str = "repo", **overrides):
        base = datetime(2024, 1, 1, tzinfo=UTC)
        fields = {
            "name": name,
            "language": "Python",
            "stargazers_count": 0,
            "forks_count": 0,
            "size": 0,
            "fork": False,
            "created_at": base - timedelta(days=365),
            "updated_at": base,
            "pushed_at": base,
            "html_url": f"https://github.com/octocat/{name}",
        }
        fields.update(overrides)
        return RepositorySummary(**fields)

    return _make


@pytest.fixture
def make_snapshot(now):
    """Factory for ProfileSnapshot objects with sensible defaults."""
    from devmatch.github.models import ProfileSnapshot

    def _make(**overrides):
        fields = {
            "username": "octocat",
            "name": "The Octocat",
            "location": "San Francisco",
            "public_repos": 12,
            "followers": 30,
            "following": 2,
            "created_at": now - timedelta(days=3000),
            "language_weights": {"Python": 40, "JavaScript": 25, "Go": 10, "Shell": 2},
            "total_commits": 650,
        }
        fields.update(overrides)
        return ProfileSnapshot(**fields)

    return _make


@pytest.fixture
def make_posting(now):
    """Factory for NormalizedJobPosting objects with sensible defaults."""
    from devmatch.jobs.models import NormalizedJobPosting

    def _make(posting_id: int = 1, **overrides):
        fields = {
            "id": posting_id,
            "title": f"Developer {posting_id}",
            "company": "Acme",
            "required_skills": [],
            "experience_level": "Mid",
            "posted_at": now,
        }
        fields.update(overrides)
        return NormalizedJobPosting(**fields)

    return _make
