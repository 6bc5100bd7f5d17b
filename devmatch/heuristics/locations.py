"""Location hint normalization for job searches."""

from __future__ import annotations

import re

DEFAULT_SEARCH_LOCATION = "remote"

# Checked before cities so "Berlin, Germany" searches the whole country.
COUNTRY_LOCATIONS: dict[str, str] = {
    "united states": "USA",
    "usa": "USA",
    "united kingdom": "United Kingdom",
    "england": "United Kingdom",
    "scotland": "United Kingdom",
    "canada": "Canada",
    "germany": "Germany",
    "deutschland": "Germany",
    "france": "France",
    "netherlands": "Netherlands",
    "ireland": "Ireland",
    "spain": "Spain",
    "portugal": "Portugal",
    "poland": "Poland",
    "sweden": "Sweden",
    "switzerland": "Switzerland",
    "india": "India",
    "singapore": "Singapore",
    "australia": "Australia",
    "new zealand": "New Zealand",
    "brazil": "Brazil",
    "mexico": "Mexico",
    "nigeria": "Nigeria",
    "kenya": "Kenya",
    "south africa": "South Africa",
    "japan": "Japan",
}

CITY_LOCATIONS: dict[str, str] = {
    "san francisco": "San Francisco",
    "bay area": "San Francisco",
    "new york": "New York",
    "nyc": "New York",
    "seattle": "Seattle",
    "austin": "Austin",
    "boston": "Boston",
    "chicago": "Chicago",
    "los angeles": "Los Angeles",
    "toronto": "Toronto",
    "vancouver": "Vancouver",
    "london": "London",
    "manchester": "Manchester",
    "dublin": "Dublin",
    "berlin": "Berlin",
    "munich": "Munich",
    "paris": "Paris",
    "amsterdam": "Amsterdam",
    "barcelona": "Barcelona",
    "madrid": "Madrid",
    "lisbon": "Lisbon",
    "stockholm": "Stockholm",
    "zurich": "Zurich",
    "bangalore": "Bangalore",
    "bengaluru": "Bangalore",
    "sydney": "Sydney",
    "melbourne": "Melbourne",
    "lagos": "Lagos",
    "nairobi": "Nairobi",
    "tokyo": "Tokyo",
}

REMOTE_HINTS: tuple[str, ...] = ("remote", "anywhere")


def _contains_term(text: str, term: str) -> bool:
    return re.search(rf"\b{re.escape(term)}\b", text) is not None


def resolve_search_location(hint: str | None) -> str:
    """Turn a free-text profile location into a job-search location.

    Resolution order: empty hint -> default; remote-style hint -> default;
    known country; known city; last comma-separated segment; trimmed hint.
    Table keys only match whole words, so "usa" does not match "Busan".
    """
    if hint is None or not hint.strip():
        return DEFAULT_SEARCH_LOCATION

    value = hint.strip()
    lowered = value.lower()

    if any(_contains_term(lowered, term) for term in REMOTE_HINTS):
        return DEFAULT_SEARCH_LOCATION

    for table in (COUNTRY_LOCATIONS, CITY_LOCATIONS):
        for needle, location in table.items():
            if _contains_term(lowered, needle):
                return location

    if "," in value:
        last_segment = value.rsplit(",", 1)[1].strip()
        if last_segment:
            return last_segment

    return value
