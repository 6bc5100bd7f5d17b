"""GitHub profile aggregation.

Collects a user's profile and public repositories and derives language
weights and a contribution estimate.

Public API:
    - ProfileAggregator: Builds a ProfileSnapshot for a username
    - GitHubClient: Async client for the GitHub REST endpoints
    - ProfileSnapshot / RepositorySummary: Aggregated data models
    - GitHubConfig: Configuration settings
"""

from devmatch.github.client import GitHubClient
from devmatch.github.config import GitHubConfig, get_github_config, reset_github_config
from devmatch.github.models import ProfileSnapshot, RepositorySummary
from devmatch.github.service import ProfileAggregator
from devmatch.github.stats import compute_language_weights, repository_weight

__all__ = [
    "ProfileAggregator",
    "GitHubClient",
    "ProfileSnapshot",
    "RepositorySummary",
    "GitHubConfig",
    "get_github_config",
    "reset_github_config",
    "compute_language_weights",
    "repository_weight",
]
