"""Profile-to-job matching.

Scores job postings against an assessment and orchestrates the full
pipeline from GitHub username to ranked matches.

Public API:
    - MatchingService: Runs the pipeline for a username
    - MatchScorer: Explainable fit scoring and ranking
    - run_matching / run_analysis: One-shot pipeline runs
    - JobMatch / JobMatchReport / ProfileAnalysis: Result models
"""

from devmatch.matching.models import JobMatch, JobMatchReport, ProfileAnalysis
from devmatch.matching.scorer import MAX_POSTINGS_TO_SCORE, MatchScorer, build_rationale
from devmatch.matching.service import (
    MatchingService,
    open_matching_service,
    run_analysis,
    run_matching,
)

__all__ = [
    "MatchingService",
    "MatchScorer",
    "JobMatch",
    "JobMatchReport",
    "ProfileAnalysis",
    "MAX_POSTINGS_TO_SCORE",
    "build_rationale",
    "open_matching_service",
    "run_analysis",
    "run_matching",
]
