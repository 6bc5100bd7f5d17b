"""Timestamp parsing for third-party "updated" fields."""

from __future__ import annotations

import re
from datetime import UTC, datetime, timedelta

_DAYS_AGO_PATTERN = re.compile(r"(\d+)\s*day", re.IGNORECASE)

_FALLBACK_FORMATS = (
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M:%S",
    "%d %b %Y",
    "%b %d, %Y",
)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def parse_posted_at(text: str | None, *, now: datetime | None = None) -> datetime:
    """Parse a posting's "updated" text into a UTC timestamp.

    Tries an absolute date first, then "N days ago" phrasing. Anything else
    (including "3 weeks ago" or an out-of-range day count) resolves to
    ``now``.
    """
    current = now or datetime.now(UTC)
    if not text or not text.strip():
        return current

    value = text.strip()

    try:
        return _as_utc(datetime.fromisoformat(value))
    except ValueError:
        pass

    for fmt in _FALLBACK_FORMATS:
        try:
            return _as_utc(datetime.strptime(value, fmt))
        except ValueError:
            continue

    match = _DAYS_AGO_PATTERN.search(value)
    if match:
        try:
            return current - timedelta(days=int(match.group(1)))
        except (OverflowError, ValueError):
            return current

    return current
