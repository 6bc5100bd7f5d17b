"""Explainable fit scoring between an assessment and job postings."""

from __future__ import annotations

from collections.abc import Iterable

from devmatch.assessment.models import Assessment
from devmatch.heuristics.skills import partition_skills
from devmatch.jobs.models import NormalizedJobPosting
from devmatch.matching.models import JobMatch

MAX_POSTINGS_TO_SCORE = 10

BASE_SCORE = 0.3
SKILL_WEIGHT = 0.4
EXPERIENCE_BONUS = 0.2
LANGUAGE_BONUS = 0.1

EXCELLENT_THRESHOLD = 0.8
GOOD_THRESHOLD = 0.6
POTENTIAL_THRESHOLD = 0.4


def _join(values: list[str], limit: int) -> str:
    return ", ".join(values[:limit])


def build_rationale(score: float, matching: list[str], missing: list[str]) -> str:
    """Human-readable explanation of a match score."""
    if score >= EXCELLENT_THRESHOLD:
        return (
            f"Excellent match! You have {len(matching)} of the required skills "
            f"including {_join(matching, 3)}."
        )
    if score >= GOOD_THRESHOLD:
        return (
            f"Good match. You have key skills: {_join(matching, 3)}. "
            f"Consider learning: {_join(missing, 2)}."
        )
    if score >= POTENTIAL_THRESHOLD:
        return (
            f"Potential match. You have some relevant skills: {_join(matching, 2)}. "
            f"Key skills to develop: {_join(missing, 3)}."
        )
    return f"This role requires skills you're still developing: {_join(missing, 3)}."


class MatchScorer:
    """Scores and ranks postings against one assessment."""

    def __init__(self, max_postings: int = MAX_POSTINGS_TO_SCORE) -> None:
        self.max_postings = max_postings

    def score(
        self,
        assessment: Assessment,
        posting: NormalizedJobPosting,
        matching: list[str],
    ) -> float:
        """Fit score in [0.0, 1.0], rounded to 4 decimal places."""
        score = BASE_SCORE

        required_count = len(posting.required_skills)
        if required_count > 0:
            score += SKILL_WEIGHT * (len(matching) / required_count)

        if (
            posting.experience_level is not None
            and assessment.experience_level.casefold() == posting.experience_level.casefold()
        ):
            score += EXPERIENCE_BONUS

        languages = {language.casefold() for language in assessment.primary_languages}
        if any(skill.casefold() in languages for skill in posting.required_skills):
            score += LANGUAGE_BONUS

        return round(min(1.0, score), 4)

    def match(self, assessment: Assessment, posting: NormalizedJobPosting) -> JobMatch:
        """Score a single posting."""
        matching, missing = partition_skills(posting.required_skills, assessment.skills)
        score = self.score(assessment, posting, matching)
        return JobMatch(
            job_id=posting.id,
            job_title=posting.title,
            company=posting.company,
            match_score=score,
            matching_skills=matching,
            missing_skills=missing,
            rationale=build_rationale(score, matching, missing),
        )

    def rank(
        self, assessment: Assessment, postings: Iterable[NormalizedJobPosting]
    ) -> list[JobMatch]:
        """Score the first ``max_postings`` postings and sort best first.

        Equal scores keep input order.
        """
        candidates = list(postings)[: self.max_postings]
        matches = [self.match(assessment, posting) for posting in candidates]
        return sorted(matches, key=lambda match: match.match_score, reverse=True)
