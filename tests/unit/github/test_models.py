"""Tests for GitHub data models."""

from datetime import UTC, datetime, timedelta

import pytest


class TestRepositorySummary:
    def test_from_api_normalizes_nulls(self):
        from devmatch.github.models import RepositorySummary

        repo = RepositorySummary.from_api(
            {
                "name": "hello",
                "stargazers_count": None,
                "size": None,
                "created_at": "2020-01-01T00:00:00Z",
                "updated_at": "2021-01-01T00:00:00",
            }
        )

        assert repo.stargazers_count == 0
        assert repo.size == 0
        assert repo.pushed_at is None
        assert repo.updated_at.tzinfo is not None

    def test_from_api_requires_timestamps(self):
        from devmatch.github.models import RepositorySummary

        with pytest.raises(KeyError):
            RepositorySummary.from_api({"name": "hello"})


class TestProfileSnapshot:
    def test_is_immutable(self, make_snapshot):
        from pydantic import ValidationError

        snapshot = make_snapshot()

        with pytest.raises(ValidationError):
            snapshot.followers = 1

    def test_account_age_days(self, make_snapshot, now):
        snapshot = make_snapshot(created_at=now - timedelta(days=400, hours=5))

        assert snapshot.account_age_days(now) == 400

    def test_top_languages_follow_weight_order(self, make_snapshot):
        snapshot = make_snapshot(language_weights={"Go": 9, "Rust": 4})

        assert snapshot.top_languages == ["Go", "Rust"]

    def test_dict_round_trip_preserves_language_order(self, make_snapshot, make_repo):
        from devmatch.github.models import ProfileSnapshot

        snapshot = make_snapshot(repositories=[make_repo("a")])
        restored = ProfileSnapshot.from_dict(snapshot.to_dict())

        assert restored == snapshot
        assert restored.top_languages == snapshot.top_languages

    def test_naive_timestamps_become_utc(self):
        from devmatch.github.models import ProfileSnapshot

        snapshot = ProfileSnapshot(username="x", created_at=datetime(2020, 1, 1))

        assert snapshot.created_at == datetime(2020, 1, 1, tzinfo=UTC)
