"""Tests for job posting models."""

from datetime import datetime, timedelta

import pytest


class TestJobPostingInput:
    """Test validation of stored-posting input."""

    def test_minimal_input(self):
        from devmatch.jobs.models import JobPostingInput

        data = JobPostingInput(title="Backend Engineer", company="Acme")

        assert data.remote_options == "On-site"
        assert data.required_skills == []
        assert data.experience_level is None

    def test_requires_title_and_company(self):
        from pydantic import ValidationError

        from devmatch.jobs.models import JobPostingInput

        with pytest.raises(ValidationError):
            JobPostingInput(title="", company="Acme")
        with pytest.raises(ValidationError):
            JobPostingInput(title="Engineer")  # type: ignore[call-arg]

    def test_rejects_inverted_salary_range(self):
        from pydantic import ValidationError

        from devmatch.jobs.models import JobPostingInput

        with pytest.raises(ValidationError, match="exceeds salary_max"):
            JobPostingInput(title="Engineer", company="Acme", salary_min=90000, salary_max=50000)

    def test_rejects_negative_salary(self):
        from pydantic import ValidationError

        from devmatch.jobs.models import JobPostingInput

        with pytest.raises(ValidationError):
            JobPostingInput(title="Engineer", company="Acme", salary_min=-1)

    def test_normalizes_free_form_fields(self):
        from devmatch.jobs.models import JobPostingInput

        data = JobPostingInput(
            title="Engineer",
            company="Acme",
            required_skills="Python, Docker ,,",
            experience_level=" senior ",
            remote_options="onsite",
            expires_at=datetime(2030, 1, 1),
        )

        assert data.required_skills == ["Python", "Docker"]
        assert data.experience_level == "Senior"
        assert data.remote_options == "On-site"
        assert data.expires_at.tzinfo is not None

    def test_rejects_unknown_remote_option(self):
        from pydantic import ValidationError

        from devmatch.jobs.models import JobPostingInput

        with pytest.raises(ValidationError):
            JobPostingInput(title="Engineer", company="Acme", remote_options="Sometimes")


class TestNormalizedJobPosting:
    def test_is_open(self, make_posting, now):
        assert make_posting().is_open(now)
        assert make_posting(expires_at=now + timedelta(days=1)).is_open(now)
        assert not make_posting(expires_at=now).is_open(now)
        assert not make_posting(is_active=False).is_open(now)

    def test_remote_and_dedupe_key(self, make_posting):
        posting = make_posting(title="Dev", company="Acme", remote_options="remote")

        assert posting.is_remote
        assert posting.dedupe_key == ("Dev", "Acme")

    def test_to_dict_is_json_friendly(self, make_posting):
        data = make_posting().to_dict()

        assert isinstance(data["posted_at"], str)
        assert data["remote_options"] == "On-site"


class TestJoobleJob:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(123456, "123456"), (1.5e3, "1500"), ("abc", "abc"), (None, "")],
    )
    def test_id_is_coerced_to_text(self, raw, expected):
        from devmatch.jobs.models import JoobleJob

        assert JoobleJob(id=raw).id == expected

    def test_null_fields_become_empty(self):
        from devmatch.jobs.models import JoobleJob

        job = JoobleJob.model_validate({"title": None, "company": None, "extra": 1})

        assert job.title == ""
        assert job.company == ""
