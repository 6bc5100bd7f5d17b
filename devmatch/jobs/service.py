"""Job source aggregation service."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Protocol

from devmatch.heuristics.locations import resolve_search_location
from devmatch.jobs.config import JobsConfig, get_jobs_config
from devmatch.jobs.jooble import JoobleClient
from devmatch.jobs.models import NormalizedJobPosting
from devmatch.jobs.samples import sample_postings
from devmatch.utils.concurrency import gather_settled

logger = logging.getLogger(__name__)


class PostingStore(Protocol):
    async def list_active(self, now: datetime | None = None) -> list[NormalizedJobPosting]: ...


class JobSearchSource(Protocol):
    async def search_developer_jobs(
        self, location: str = "", page: int | None = None
    ) -> list[NormalizedJobPosting]: ...


def merge_postings(
    *sources: list[NormalizedJobPosting],
) -> list[NormalizedJobPosting]:
    """Concatenate sources, drop repeated (title, company) pairs, newest first.

    The first occurrence of a pair wins. Postings with equal timestamps keep
    their relative order.
    """
    seen: set[tuple[str, str]] = set()
    merged: list[NormalizedJobPosting] = []
    for postings in sources:
        for posting in postings:
            key = posting.dedupe_key
            if key in seen:
                continue
            seen.add(key)
            merged.append(posting)

    return sorted(merged, key=lambda posting: posting.posted_at, reverse=True)


class JobAggregator:
    """Merges stored and third-party postings into one list. Never raises."""

    def __init__(
        self,
        store: PostingStore | None,
        search: JobSearchSource | JoobleClient | None,
        config: JobsConfig | None = None,
    ) -> None:
        self.store = store
        self.search = search
        self.config = config or get_jobs_config()

    async def collect(self, location_hint: str | None = None) -> list[NormalizedJobPosting]:
        """Return deduplicated postings for a location hint.

        Each source degrades independently to an empty contribution. When
        neither contributes anything, the built-in sample set is returned.
        """
        now = datetime.now(UTC)
        location = (
            resolve_search_location(location_hint)
            if location_hint and location_hint.strip()
            else self.config.default_location
        )

        stored, searched = await gather_settled(
            ("Stored postings", self._load_stored(now), []),
            ("Jooble search", self._search(location), []),
        )

        if not stored and not searched:
            logger.warning("No job source returned postings, using sample postings")
            return sample_postings(now)

        merged = merge_postings(stored, searched)
        logger.info(
            "Collected %s postings (%s stored, %s searched) for location %r",
            len(merged),
            len(stored),
            len(searched),
            location,
        )
        return merged

    async def _load_stored(self, now: datetime) -> list[NormalizedJobPosting]:
        if self.store is None:
            return []
        return await self.store.list_active(now)

    async def _search(self, location: str) -> list[NormalizedJobPosting]:
        if self.search is None:
            return []
        return await self.search.search_developer_jobs(location, self.config.search_page)
