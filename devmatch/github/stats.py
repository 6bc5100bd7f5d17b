"""Repository statistics used by the profile aggregator."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta

from devmatch.github.models import RepositorySummary

MAX_LANGUAGES = 10


def repository_weight(repo: RepositorySummary) -> int:
    """Weight a repository contributes to its language: 1 + stars + forks + size/1000."""
    return 1 + repo.stargazers_count + repo.forks_count + repo.size // 1000


def compute_language_weights(
    repositories: Iterable[RepositorySummary], limit: int = MAX_LANGUAGES
) -> dict[str, int]:
    """Sum repository weights per language and keep the heaviest ``limit``.

    Repositories without a primary language are ignored. Ties keep the order
    in which languages first appear.
    """
    totals: dict[str, int] = {}
    for repo in repositories:
        if not repo.language:
            continue
        totals[repo.language] = totals.get(repo.language, 0) + repository_weight(repo)

    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return dict(ranked[:limit])


def is_noise_fork(repo: RepositorySummary) -> bool:
    """Forks nobody starred say nothing about the owner."""
    return repo.fork and repo.stargazers_count == 0


def most_recently_updated(
    repositories: Iterable[RepositorySummary], limit: int
) -> list[RepositorySummary]:
    """Sort by last update, newest first, and keep at most ``limit``."""
    ordered = sorted(repositories, key=lambda repo: repo.updated_at, reverse=True)
    return ordered[:limit]


def recently_pushed(
    repositories: Iterable[RepositorySummary],
    *,
    now: datetime,
    lookback_days: int,
    limit: int,
) -> list[RepositorySummary]:
    """Repositories pushed to within the lookback window, capped at ``limit``."""
    cutoff = now - timedelta(days=lookback_days)
    active = [
        repo
        for repo in repositories
        if repo.pushed_at is not None and repo.pushed_at > cutoff
    ]
    return active[:limit]


def size_based_estimate(repo: RepositorySummary) -> int:
    """Local contribution estimate used when GitHub cannot be asked."""
    return max(1, repo.size // 100)
