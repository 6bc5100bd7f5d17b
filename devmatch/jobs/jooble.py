"""Jooble job search client and posting translation."""

from __future__ import annotations

import hashlib
import logging
from datetime import datetime

import httpx
from pydantic import ValidationError

from devmatch.errors import MisconfiguredError, ParseFailureError, UpstreamUnavailableError
from devmatch.heuristics import (
    extract_skills,
    infer_experience_level,
    is_developer_role,
    is_remote_role,
    parse_posted_at,
    parse_salary,
    split_required_preferred,
)
from devmatch.jobs.config import JobsConfig, get_jobs_config
from devmatch.jobs.models import JoobleJob, JoobleSearchRequest, NormalizedJobPosting

logger = logging.getLogger(__name__)

DEVELOPER_KEYWORDS = " OR ".join(
    [
        "software developer",
        "web developer",
        "full stack developer",
        "frontend developer",
        "backend developer",
        "mobile developer",
        "react developer",
        "javascript developer",
        "python developer",
        "java developer",
        ".net developer",
        "php developer",
        "node.js developer",
        "angular developer",
        "vue developer",
        "software engineer",
        "programming",
        "coding",
    ]
)


def stable_posting_id(source_id: str) -> int:
    """Map an opaque source id onto a stable positive 31-bit integer."""
    digest = hashlib.sha256(source_id.encode("utf-8")).hexdigest()
    return int(digest[:8], 16) & 0x7FFFFFFF


def translate_posting(
    job: JoobleJob, *, now: datetime | None = None
) -> NormalizedJobPosting | None:
    """Translate a Jooble item, or return None if it is not a developer role."""
    if not is_developer_role(job.title, job.snippet):
        return None

    salary_min, salary_max = parse_salary(job.salary)
    required, preferred = split_required_preferred(
        extract_skills(f"{job.title} {job.snippet}")
    )

    return NormalizedJobPosting(
        id=stable_posting_id(job.id or f"{job.title}|{job.company}|{job.link}"),
        title=job.title,
        company=job.company.strip() or job.source,
        location=job.location or None,
        description=job.snippet or None,
        required_skills=required,
        preferred_skills=preferred,
        experience_level=infer_experience_level(job.title),
        salary_min=salary_min,
        salary_max=salary_max,
        remote_options="Remote" if is_remote_role(job.location, job.title) else "On-site",
        posted_at=parse_posted_at(job.updated, now=now),
        expires_at=None,
        is_active=True,
        application_url=job.link or None,
    )


class JoobleClient:
    """Async client for the Jooble search API."""

    def __init__(
        self,
        config: JobsConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or get_jobs_config()
        self._client = httpx.AsyncClient(
            timeout=self.config.timeout,
            transport=transport,
        )

    async def __aenter__(self) -> JoobleClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()

    async def fetch_raw(
        self, keywords: str = "", location: str = "", page: int = 1
    ) -> list[JoobleJob]:
        """Run a search and return the raw items.

        Raises:
            MisconfiguredError: No API key is configured.
            UpstreamUnavailableError: Transport failure or non-success status.
            ParseFailureError: The body is not a Jooble search response.
        """
        api_key = self.config.jooble_api_key
        if not api_key:
            raise MisconfiguredError("JOBS_JOOBLE_API_KEY is not set")

        request = JoobleSearchRequest(
            keywords=keywords,
            location=location,
            radius=self.config.search_radius,
            page=page,
        )

        try:
            response = await self._client.post(
                f"{self.config.jooble_api_url}{api_key}",
                json=request.model_dump(),
            )
        except httpx.HTTPError as e:
            raise UpstreamUnavailableError(f"Jooble request failed: {e}", e) from e

        if not response.is_success:
            raise UpstreamUnavailableError(
                f"Jooble API request failed with status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ParseFailureError("Jooble returned invalid JSON", e) from e

        if not isinstance(data, dict):
            raise ParseFailureError("Unexpected Jooble response payload")

        items = data.get("jobs") or []
        if not items:
            logger.warning("No jobs returned from Jooble API")
            return []

        jobs: list[JoobleJob] = []
        for item in items:
            if not isinstance(item, dict):
                continue
            try:
                jobs.append(JoobleJob.model_validate(item))
            except ValidationError as e:
                logger.debug("Skipping malformed Jooble item: %s", e)
        return jobs

    async def search(
        self, keywords: str = "", location: str = "", page: int = 1
    ) -> list[NormalizedJobPosting]:
        """Search Jooble and return the developer postings among the results."""
        raw = await self.fetch_raw(keywords, location, page)

        postings: list[NormalizedJobPosting] = []
        for job in raw:
            try:
                posting = translate_posting(job)
            except (ValidationError, ValueError, OverflowError) as e:
                logger.debug("Skipping untranslatable Jooble item %s: %s", job.id, e)
                continue
            if posting is not None:
                postings.append(posting)

        logger.info(
            "Jooble returned %s items, %s developer postings kept", len(raw), len(postings)
        )
        return postings

    async def search_developer_jobs(
        self, location: str = "", page: int | None = None
    ) -> list[NormalizedJobPosting]:
        """Search using the fixed set of developer role keywords."""
        return await self.search(
            DEVELOPER_KEYWORDS, location, page or self.config.search_page
        )

