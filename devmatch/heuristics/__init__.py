"""Text heuristics shared by the profile, job and matching pipelines.

Public API:
    - parse_salary: Salary text -> (min, max)
    - extract_skills: Technology vocabulary matching over free text
    - is_developer_role / infer_experience_level / is_remote_role: Posting classification
    - resolve_search_location: Profile location -> job search location
    - parse_posted_at: "updated" text -> timestamp
"""

from devmatch.heuristics.dates import parse_posted_at
from devmatch.heuristics.locations import (
    DEFAULT_SEARCH_LOCATION,
    resolve_search_location,
)
from devmatch.heuristics.roles import (
    EXPERIENCE_LEVELS,
    ExperienceLevel,
    infer_experience_level,
    is_developer_role,
    is_remote_role,
    normalize_experience_level,
)
from devmatch.heuristics.salary import parse_salary
from devmatch.heuristics.skills import (
    DEVELOPER_SKILLS,
    dedupe,
    extract_skills,
    partition_skills,
    split_required_preferred,
)

__all__ = [
    "DEFAULT_SEARCH_LOCATION",
    "DEVELOPER_SKILLS",
    "EXPERIENCE_LEVELS",
    "ExperienceLevel",
    "dedupe",
    "extract_skills",
    "infer_experience_level",
    "is_developer_role",
    "is_remote_role",
    "normalize_experience_level",
    "parse_posted_at",
    "parse_salary",
    "partition_skills",
    "resolve_search_location",
    "split_required_preferred",
]
