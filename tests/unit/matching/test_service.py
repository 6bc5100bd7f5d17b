"""Tests for MatchingService orchestration."""

from __future__ import annotations

import pytest


class _StubProfiles:
    def __init__(self, snapshot=None, error: Exception | None = None):
        self.snapshot = snapshot
        self.error = error

    async def aggregate(self, username):
        if self.error:
            raise self.error
        return self.snapshot


class _StubAssessments:
    def __init__(self, source="heuristic"):
        self.source = source
        self.calls = 0

    async def evaluate(self, snapshot):
        from devmatch.assessment.models import Assessment, AssessmentOutcome

        self.calls += 1
        assessment = Assessment(
            username=snapshot.username,
            skills=["Python", "Django"],
            experience_level="Mid",
            primary_languages=["Python"],
        )
        return AssessmentOutcome(assessment=assessment, source=self.source)


class _StubJobs:
    def __init__(self, postings):
        self.postings = postings
        self.hints: list[str | None] = []

    async def collect(self, location_hint=None):
        self.hints.append(location_hint)
        return list(self.postings)


def _service(profiles, jobs, assessments=None):
    from devmatch.matching.service import MatchingService

    return MatchingService(profiles, assessments or _StubAssessments(), jobs)


class TestMatchingService:
    """Test the profile to report pipeline."""

    @pytest.mark.asyncio
    async def test_match_builds_ranked_report(self, make_snapshot, make_posting):
        postings = [
            make_posting(1, experience_level="Senior"),
            make_posting(2, required_skills=["Python", "Django"]),
        ]
        jobs = _StubJobs(postings)
        service = _service(_StubProfiles(make_snapshot()), jobs, _StubAssessments("llm"))

        report = await service.match("octocat")

        assert report.username == "octocat"
        assert report.assessment_source == "llm"
        assert report.postings_considered == 2
        assert [match.job_id for match in report.matches] == [2, 1]
        assert report.best_match.match_score == 1.0
        assert jobs.hints == ["San Francisco"]

    @pytest.mark.asyncio
    async def test_location_override(self, make_snapshot):
        jobs = _StubJobs([])
        service = _service(_StubProfiles(make_snapshot()), jobs)

        report = await service.match("octocat", location="Berlin")

        assert jobs.hints == ["Berlin"]
        assert report.matches == []
        assert report.best_match is None

    @pytest.mark.asyncio
    async def test_missing_user_propagates(self):
        from devmatch.errors import NotFoundError

        assessments = _StubAssessments()
        service = _service(
            _StubProfiles(error=NotFoundError("GitHub user 'ghost' not found")),
            _StubJobs([]),
            assessments,
        )

        with pytest.raises(NotFoundError):
            await service.match("ghost")
        assert assessments.calls == 0

    @pytest.mark.asyncio
    async def test_analyze(self, make_snapshot):
        service = _service(_StubProfiles(make_snapshot()), _StubJobs([]))

        analysis = await service.analyze("octocat")

        assert analysis.snapshot.username == "octocat"
        assert analysis.assessment_source == "heuristic"
        assert analysis.to_dict()["assessment"]["experience_level"] == "Mid"

    @pytest.mark.asyncio
    async def test_report_serializes(self, make_snapshot, make_posting):
        service = _service(_StubProfiles(make_snapshot()), _StubJobs([make_posting(7)]))

        data = (await service.match("octocat")).to_dict()

        assert data["matches"][0]["job_id"] == 7
        assert isinstance(data["analyzed_at"], str)


class TestOpenStore:
    @pytest.mark.asyncio
    async def test_opens_store(self, tmp_path):
        from devmatch.matching.service import open_store

        store = await open_store(tmp_path / "postings.db")

        assert store is not None
        assert await store.list_active() == []
        await store.close()

    @pytest.mark.asyncio
    async def test_unusable_path_returns_none(self, tmp_path):
        from devmatch.matching.service import open_store

        blocker = tmp_path / "file"
        blocker.write_text("not a directory")

        assert await open_store(blocker / "postings.db") is None
