"""GitHub profile aggregation service."""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import Any

from pydantic import ValidationError

from devmatch.errors import DevMatchError, NotFoundError, UpstreamUnavailableError
from devmatch.github.client import GitHubClient
from devmatch.github.config import GitHubConfig, get_github_config
from devmatch.github.models import ProfileSnapshot, RepositorySummary
from devmatch.github.stats import (
    compute_language_weights,
    is_noise_fork,
    most_recently_updated,
    recently_pushed,
    size_based_estimate,
)

logger = logging.getLogger(__name__)


class ProfileAggregator:
    """Builds a `ProfileSnapshot` from a GitHub username.

    Only the initial profile lookup can fail the aggregation. Repository
    paging and the contribution estimate degrade independently.
    """

    def __init__(
        self, client: GitHubClient, config: GitHubConfig | None = None
    ) -> None:
        self.client = client
        self.config = config or get_github_config()

    async def aggregate(self, username: str) -> ProfileSnapshot:
        """Fetch and summarize a GitHub profile.

        Raises:
            NotFoundError: GitHub has no such user.
            UpstreamUnavailableError: The profile lookup failed for any other reason.
        """
        logger.info("Starting analysis for GitHub user: %s", username)

        snapshot = await self.fetch_profile(username)
        repositories = await self.fetch_repositories(username)
        language_weights = compute_language_weights(repositories)
        total_commits = await self.estimate_total_commits(username, repositories)

        logger.info(
            "Aggregated %s: %s repositories, %s languages, ~%s commits",
            username,
            len(repositories),
            len(language_weights),
            total_commits,
        )
        return snapshot.model_copy(
            update={
                "repositories": repositories,
                "language_weights": language_weights,
                "total_commits": total_commits,
                "analyzed_at": datetime.now(UTC),
            }
        )

    async def fetch_profile(self, username: str) -> ProfileSnapshot:
        """Fetch the profile fields as a snapshot without repositories."""
        try:
            data = await self.client.get_user(username)
        except (NotFoundError, UpstreamUnavailableError):
            raise
        except DevMatchError as e:
            raise UpstreamUnavailableError(
                f"GitHub returned an unusable profile for '{username}'", e
            ) from e

        try:
            return _snapshot_from_user(username, data)
        except (KeyError, ValidationError) as e:
            raise UpstreamUnavailableError(
                f"GitHub returned an unusable profile for '{username}'", e
            ) from e

    async def fetch_repositories(self, username: str) -> list[RepositorySummary]:
        """Page through public repositories and keep the most recently updated.

        Paging stops at the first empty or failed page, or at the page cap.
        Unstarred forks are skipped.
        """
        collected: list[RepositorySummary] = []

        for page in range(1, self.config.max_repo_pages + 1):
            try:
                items = await self.client.get_repositories(
                    username, page=page, per_page=self.config.repos_per_page
                )
            except DevMatchError as e:
                logger.warning(
                    "Stopping repository paging for %s at page %s: %s", username, page, e
                )
                break

            if not items:
                break

            for item in items:
                try:
                    repo = RepositorySummary.from_api(item)
                except (KeyError, ValidationError) as e:
                    logger.debug("Skipping malformed repository entry: %s", e)
                    continue
                if is_noise_fork(repo):
                    continue
                collected.append(repo)

        return most_recently_updated(collected, self.config.max_repositories)

    async def estimate_total_commits(
        self, username: str, repositories: list[RepositorySummary]
    ) -> int:
        """Estimate the user's total contributions across recent repositories.

        Each recently pushed repository is asked for the user's contributor
        count; a failed lookup substitutes a size-based estimate. The result
        is never lower than two commits per retained repository.
        """
        candidates = recently_pushed(
            repositories,
            now=datetime.now(UTC),
            lookback_days=self.config.contributor_lookback_days,
            limit=self.config.contributor_repo_limit,
        )
        semaphore = asyncio.Semaphore(self.config.contributor_concurrency)

        async def count(repo: RepositorySummary) -> int:
            async with semaphore:
                try:
                    contributors = await self.client.get_contributors(username, repo.name)
                except (DevMatchError, ValueError, TypeError) as e:
                    logger.info(
                        "Contributor lookup failed for %s/%s, estimating from size: %s",
                        username,
                        repo.name,
                        e,
                    )
                    contributions = size_based_estimate(repo)
                else:
                    contributions = _contributions_for(username, contributors)
                # Pace requests to stay clear of secondary rate limits
                await asyncio.sleep(self.config.contributor_request_delay)
                return contributions

        counts = await asyncio.gather(*(count(repo) for repo in candidates))
        return max(sum(counts), 2 * len(repositories))


def _contributions_for(username: str, contributors: list[tuple[str, int]]) -> int:
    target = username.casefold()
    for login, contributions in contributors:
        if login.casefold() == target:
            return contributions
    return 0


def _snapshot_from_user(username: str, data: dict[str, Any]) -> ProfileSnapshot:
    return ProfileSnapshot.model_validate(
        {
            "username": data.get("login") or username,
            "name": data.get("name") or "",
            "bio": data.get("bio"),
            "location": data.get("location"),
            "company": data.get("company"),
            "blog": data.get("blog") or None,
            "public_repos": data.get("public_repos") or 0,
            "followers": data.get("followers") or 0,
            "following": data.get("following") or 0,
            "created_at": data["created_at"],
            "updated_at": data.get("updated_at"),
            "avatar_url": data.get("avatar_url") or "",
            "html_url": data.get("html_url") or "",
        }
    )
