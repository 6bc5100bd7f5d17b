"""Salary text parsing for free-form job board salary fields."""

from __future__ import annotations

import re

# Currency symbols, thousands separators and pay-period wording
_NOISE_PATTERN = re.compile(
    r"[$€£¥,]|per\s+(?:year|annum|month|hour|week|day)|annually|yearly|monthly|hourly",
    re.IGNORECASE,
)
_RANGE_PATTERN = re.compile(
    r"(\d+(?:\.\d+)?)\s*(k)?\s*[-–—]\s*(\d+(?:\.\d+)?)\s*(k)?",
    re.IGNORECASE,
)
_SINGLE_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*(k)?", re.IGNORECASE)

THOUSAND = 1000


def _amount(number: str, marker: str | None) -> float:
    value = float(number)
    if marker:
        value *= THOUSAND
    return value


def parse_salary(text: str | None) -> tuple[float | None, float | None]:
    """Parse a salary string into ``(min, max)``.

    Examples:
        "$50,000 - $80,000" -> (50000.0, 80000.0)
        "50k-80k"           -> (50000.0, 80000.0)
        "95000"             -> (95000.0, 95000.0)
        "Competitive"       -> (None, None)

    A ``k`` suffix multiplies only the side it is attached to. Text without a
    number yields ``(None, None)``; this function never raises.
    """
    if not text or not text.strip():
        return None, None

    cleaned = _NOISE_PATTERN.sub("", text)

    match = _RANGE_PATTERN.search(cleaned)
    if match:
        low = _amount(match.group(1), match.group(2))
        high = _amount(match.group(3), match.group(4))
        return low, high

    match = _SINGLE_PATTERN.search(cleaned)
    if match:
        value = _amount(match.group(1), match.group(2))
        return value, value

    return None, None
