"""Tests for search location resolution."""

import pytest


class TestResolveSearchLocation:
    """Test the hint -> search location mapping."""

    @pytest.mark.parametrize("hint", [None, "", "   "])
    def test_empty_hint_uses_default(self, hint):
        from devmatch.heuristics.locations import resolve_search_location

        assert resolve_search_location(hint) == "remote"

    def test_remote_hint_uses_default(self):
        from devmatch.heuristics.locations import resolve_search_location

        assert resolve_search_location("Remote / Anywhere") == "remote"

    def test_country_preferred_over_city(self):
        from devmatch.heuristics.locations import resolve_search_location

        assert resolve_search_location("Berlin, Germany") == "Germany"

    def test_city_match_is_case_insensitive(self):
        from devmatch.heuristics.locations import resolve_search_location

        assert resolve_search_location("greater SEATTLE area") == "Seattle"

    def test_falls_back_to_last_comma_segment(self):
        from devmatch.heuristics.locations import resolve_search_location

        assert resolve_search_location("Springfield, Illinois") == "Illinois"

    def test_falls_back_to_trimmed_hint(self):
        from devmatch.heuristics.locations import resolve_search_location

        assert resolve_search_location("  Springfield  ") == "Springfield"

    @pytest.mark.parametrize(
        ("hint", "expected"),
        [
            ("Indianapolis, IN", "IN"),
            ("Busan, South Korea", "South Korea"),
            ("Jerusalem", "Jerusalem"),
            ("Austin, TX, USA", "USA"),
            ("Bengaluru, India", "India"),
        ],
    )
    def test_table_keys_match_whole_words(self, hint, expected):
        from devmatch.heuristics.locations import resolve_search_location

        assert resolve_search_location(hint) == expected

    @pytest.mark.parametrize("hint", ["Middle Earth", "Worldwide HQ, Dublin"])
    def test_only_remote_and_anywhere_mean_remote(self, hint):
        from devmatch.heuristics.locations import resolve_search_location

        assert resolve_search_location(hint) != "remote"
