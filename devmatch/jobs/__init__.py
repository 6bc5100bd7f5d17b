"""Job source aggregation.

Merges postings from the local store and the Jooble search API into one
normalized, deduplicated list.

Public API:
    - JobAggregator: Collects postings from every source, never fails
    - JobPostingRepository: Async SQLite posting store
    - JoobleClient: Async Jooble search client
    - NormalizedJobPosting / JobPostingInput: Posting models
    - sample_postings: Built-in fallback postings
    - JobsConfig: Configuration settings
"""

from devmatch.jobs.config import JobsConfig, get_jobs_config, reset_jobs_config
from devmatch.jobs.jooble import (
    DEVELOPER_KEYWORDS,
    JoobleClient,
    stable_posting_id,
    translate_posting,
)
from devmatch.jobs.models import (
    JobPostingInput,
    JoobleJob,
    NormalizedJobPosting,
    RemoteOption,
)
from devmatch.jobs.repository import JobPostingRepository
from devmatch.jobs.samples import SAMPLE_TITLES, sample_postings
from devmatch.jobs.service import JobAggregator, merge_postings

__all__ = [
    "JobAggregator",
    "JobPostingRepository",
    "JoobleClient",
    "JoobleJob",
    "NormalizedJobPosting",
    "JobPostingInput",
    "RemoteOption",
    "DEVELOPER_KEYWORDS",
    "SAMPLE_TITLES",
    "merge_postings",
    "sample_postings",
    "stable_posting_id",
    "translate_posting",
    "JobsConfig",
    "get_jobs_config",
    "reset_jobs_config",
]
