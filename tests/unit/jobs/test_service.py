"""Tests for JobAggregator and posting merge."""

from __future__ import annotations

from datetime import timedelta

import pytest


class _StubStore:
    def __init__(self, postings=None, error: Exception | None = None):
        self.postings = postings or []
        self.error = error

    async def list_active(self, now=None):
        if self.error:
            raise self.error
        return list(self.postings)


class _StubSearch:
    def __init__(self, postings=None, error: Exception | None = None):
        self.postings = postings or []
        self.error = error
        self.locations: list[str] = []

    async def search_developer_jobs(self, location="", page=None):
        self.locations.append(location)
        if self.error:
            raise self.error
        return list(self.postings)


def _aggregator(store=None, search=None, **config_overrides):
    from devmatch.jobs.config import JobsConfig
    from devmatch.jobs.service import JobAggregator

    config = JobsConfig(_env_file=None, **config_overrides)  # type: ignore[call-arg]
    return JobAggregator(store, search, config)


class TestMergePostings:
    def test_first_title_company_pair_wins(self, make_posting, now):
        from devmatch.jobs.service import merge_postings

        stored = make_posting(1, title="Dev", company="Acme", posted_at=now)
        duplicate = make_posting(2, title="Dev", company="Acme", posted_at=now)
        other_company = make_posting(3, title="Dev", company="Initech", posted_at=now)

        merged = merge_postings([stored], [duplicate, other_company])

        assert [posting.id for posting in merged] == [1, 3]

    def test_pair_match_is_exact(self, make_posting):
        from devmatch.jobs.service import merge_postings

        merged = merge_postings(
            [make_posting(1, title="Dev", company="Acme")],
            [make_posting(2, title="dev", company="Acme")],
        )

        assert len(merged) == 2

    def test_newest_first_with_stable_ties(self, make_posting, now):
        from devmatch.jobs.service import merge_postings

        old = make_posting(1, posted_at=now - timedelta(days=3))
        tie_a = make_posting(2, posted_at=now)
        tie_b = make_posting(3, posted_at=now)
        newest = make_posting(4, posted_at=now + timedelta(hours=1))

        merged = merge_postings([old, tie_a], [tie_b, newest])

        assert [posting.id for posting in merged] == [4, 2, 3, 1]


class TestJobAggregator:
    """Test source degradation and the sample fallback."""

    @pytest.mark.asyncio
    async def test_merges_both_sources(self, make_posting):
        store = _StubStore([make_posting(1, title="Stored")])
        search = _StubSearch([make_posting(2, title="Searched")])

        postings = await _aggregator(store, search).collect("Berlin, Germany")

        assert {posting.title for posting in postings} == {"Stored", "Searched"}
        assert search.locations == ["Germany"]

    @pytest.mark.asyncio
    async def test_blank_hint_uses_default_location(self):
        search = _StubSearch()

        await _aggregator(None, search, default_location="Worldwide").collect("   ")

        assert search.locations == ["Worldwide"]

    @pytest.mark.asyncio
    async def test_failed_search_still_returns_stored(self, make_posting):
        from devmatch.errors import UpstreamUnavailableError

        store = _StubStore([make_posting(1, title="Stored")])
        search = _StubSearch(error=UpstreamUnavailableError("jooble down"))

        postings = await _aggregator(store, search).collect("remote")

        assert [posting.title for posting in postings] == ["Stored"]

    @pytest.mark.asyncio
    async def test_failed_store_still_returns_search(self, make_posting):
        store = _StubStore(error=RuntimeError("database is locked"))
        search = _StubSearch([make_posting(2, title="Searched")])

        postings = await _aggregator(store, search).collect(None)

        assert [posting.title for posting in postings] == ["Searched"]

    @pytest.mark.asyncio
    async def test_both_sources_empty_returns_samples(self):
        from devmatch.errors import MisconfiguredError
        from devmatch.jobs.samples import SAMPLE_TITLES

        store = _StubStore()
        search = _StubSearch(error=MisconfiguredError("no key"))

        postings = await _aggregator(store, search).collect("remote")

        assert tuple(posting.title for posting in postings) == SAMPLE_TITLES

    @pytest.mark.asyncio
    async def test_missing_sources_return_samples(self):
        from devmatch.jobs.samples import SAMPLE_TITLES

        postings = await _aggregator().collect()

        assert len(postings) == len(SAMPLE_TITLES)
