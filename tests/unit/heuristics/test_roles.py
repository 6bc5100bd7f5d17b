"""Tests for posting classification heuristics."""

import pytest


class TestIsDeveloperRole:
    """Test the developer-role filter."""

    def test_developer_title_is_kept(self):
        from devmatch.heuristics.roles import is_developer_role

        assert is_developer_role("Backend Developer", "Build APIs in Go")

    def test_description_alone_can_qualify(self):
        from devmatch.heuristics.roles import is_developer_role

        assert is_developer_role("Team member", "You will write Python every day")

    def test_no_developer_term_is_dropped(self):
        from devmatch.heuristics.roles import is_developer_role

        assert not is_developer_role("Barista", "Make great coffee")

    @pytest.mark.parametrize(
        "title",
        ["Sales Engineer", "Marketing Developer Advocate", "Engineering Manager"],
    )
    def test_excluded_terms_drop_the_posting(self, title):
        from devmatch.heuristics.roles import is_developer_role

        assert not is_developer_role(title, "")

    def test_software_prefix_whitelists_excluded_term(self):
        """"software admin" is not excluded as "admin"."""
        from devmatch.heuristics.roles import is_developer_role

        assert is_developer_role("Software Admin", "")

    def test_excluded_terms_match_as_substrings(self):
        """"hr" inside another word still excludes the posting."""
        from devmatch.heuristics.roles import is_developer_role

        assert not is_developer_role("Developer", "three days in office")


class TestInferExperienceLevel:
    """Test title-based tier inference."""

    @pytest.mark.parametrize(
        ("title", "expected"),
        [
            ("Senior Python Developer", "Senior"),
            ("Lead Engineer", "Senior"),
            ("Principal Engineer", "Senior"),
            ("Junior Frontend Developer", "Junior"),
            ("Entry Level Programmer", "Junior"),
            ("Graduate Software Engineer", "Junior"),
            ("Software Engineer", "Mid"),
            (None, "Mid"),
        ],
    )
    def test_tiers(self, title, expected):
        from devmatch.heuristics.roles import infer_experience_level

        assert infer_experience_level(title) == expected

    def test_senior_terms_win_over_junior(self):
        from devmatch.heuristics.roles import infer_experience_level

        assert infer_experience_level("Senior Graduate Mentor Developer") == "Senior"


class TestIsRemoteRole:
    @pytest.mark.parametrize(
        ("location", "title", "expected"),
        [
            ("Remote", "Developer", True),
            ("Berlin", "Developer (Work From Home)", True),
            ("Berlin", "WFH Python Engineer", True),
            ("Berlin", "Developer", False),
            (None, None, False),
        ],
    )
    def test_remote_detection(self, location, title, expected):
        from devmatch.heuristics.roles import is_remote_role

        assert is_remote_role(location, title) is expected


class TestNormalizeExperienceLevel:
    def test_normalizes_case_and_whitespace(self):
        from devmatch.heuristics.roles import normalize_experience_level

        assert normalize_experience_level(" senior ") == "Senior"

    def test_unknown_values_take_default(self):
        from devmatch.heuristics.roles import normalize_experience_level

        assert normalize_experience_level("Expert") == "Mid"
        assert normalize_experience_level(None, default="Junior") == "Junior"
