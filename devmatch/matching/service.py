"""Pipeline orchestration: profile, assessment, job sources, scoring."""

from __future__ import annotations

import asyncio
import logging
import sqlite3
from collections.abc import AsyncGenerator
from contextlib import AsyncExitStack, asynccontextmanager
from datetime import UTC, datetime
from pathlib import Path

import httpx

from devmatch.assessment.config import AssessmentConfig
from devmatch.assessment.service import AssessmentService
from devmatch.config.settings import Settings, get_settings
from devmatch.github.client import GitHubClient
from devmatch.github.config import GitHubConfig
from devmatch.github.service import ProfileAggregator
from devmatch.jobs.config import JobsConfig
from devmatch.jobs.jooble import JoobleClient
from devmatch.jobs.repository import JobPostingRepository
from devmatch.jobs.service import JobAggregator
from devmatch.matching.models import JobMatchReport, ProfileAnalysis
from devmatch.matching.scorer import MatchScorer

logger = logging.getLogger(__name__)


class MatchingService:
    """Runs the profile -> assessment -> jobs -> scoring pipeline.

    Only the profile lookup can fail a run; every later stage substitutes
    a default and continues.
    """

    def __init__(
        self,
        profiles: ProfileAggregator,
        assessments: AssessmentService,
        jobs: JobAggregator,
        scorer: MatchScorer | None = None,
    ) -> None:
        self.profiles = profiles
        self.assessments = assessments
        self.jobs = jobs
        self.scorer = scorer or MatchScorer()

    async def analyze(self, username: str) -> ProfileAnalysis:
        """Aggregate and assess a profile.

        Raises:
            NotFoundError: GitHub has no such user.
            UpstreamUnavailableError: The profile lookup failed.
        """
        snapshot = await self.profiles.aggregate(username)
        outcome = await self.assessments.evaluate(snapshot)
        return ProfileAnalysis(
            snapshot=snapshot,
            assessment=outcome.assessment,
            assessment_source=outcome.source,
        )

    async def match(self, username: str, location: str | None = None) -> JobMatchReport:
        """Aggregate a profile and rank job postings against it.

        Assessment and job collection run concurrently once the profile is
        available. ``location`` overrides the profile's own location.

        Raises:
            NotFoundError: GitHub has no such user.
            UpstreamUnavailableError: The profile lookup failed.
        """
        snapshot = await self.profiles.aggregate(username)
        outcome, postings = await asyncio.gather(
            self.assessments.evaluate(snapshot),
            self.jobs.collect(location or snapshot.location),
        )

        matches = self.scorer.rank(outcome.assessment, postings)
        logger.info(
            "Scored %s of %s postings for %s (assessment: %s)",
            len(matches),
            len(postings),
            username,
            outcome.source,
        )
        return JobMatchReport(
            username=snapshot.username,
            assessment=outcome.assessment,
            assessment_source=outcome.source,
            matches=matches,
            postings_considered=len(postings),
            analyzed_at=datetime.now(UTC),
        )


async def open_store(db_path: Path | str) -> JobPostingRepository | None:
    """Open the posting store, or return None if it cannot be initialized."""
    repo = JobPostingRepository(db_path)
    try:
        await repo.initialize()
    except (OSError, sqlite3.Error) as e:
        logger.warning("Posting store unavailable at %s: %s", db_path, e)
        await repo.close()
        return None
    return repo


@asynccontextmanager
async def open_matching_service(
    settings: Settings | None = None,
    *,
    github_config: GitHubConfig | None = None,
    assessment_config: AssessmentConfig | None = None,
    jobs_config: JobsConfig | None = None,
    github_transport: httpx.AsyncBaseTransport | None = None,
    jooble_transport: httpx.AsyncBaseTransport | None = None,
    store: JobPostingRepository | None = None,
) -> AsyncGenerator[MatchingService, None]:
    """Wire clients and the posting store into a MatchingService.

    Everything opened here is closed on exit. A caller-supplied ``store``
    is used as-is and left open.
    """
    settings = settings or get_settings()

    async with AsyncExitStack() as stack:
        github = await stack.enter_async_context(
            GitHubClient(github_config, transport=github_transport)
        )
        jooble = await stack.enter_async_context(
            JoobleClient(jobs_config, transport=jooble_transport)
        )
        if store is None:
            store = await open_store(settings.database_path)
            if store is not None:
                stack.push_async_callback(store.close)

        yield MatchingService(
            profiles=ProfileAggregator(github, github_config),
            assessments=AssessmentService(assessment_config),
            jobs=JobAggregator(store, jooble, jobs_config),
        )


async def run_analysis(
    username: str, settings: Settings | None = None, **kwargs
) -> ProfileAnalysis:
    """Aggregate and assess a profile with freshly wired clients."""
    async with open_matching_service(settings, **kwargs) as service:
        return await service.analyze(username)


async def run_matching(
    username: str,
    settings: Settings | None = None,
    location: str | None = None,
    **kwargs,
) -> JobMatchReport:
    """Run the full pipeline with freshly wired clients."""
    async with open_matching_service(settings, **kwargs) as service:
        return await service.match(username, location=location)
