"""Profile assessment.

Turns a ProfileSnapshot into a structured skills and experience judgment,
asking an LLM when one is configured and falling back to a deterministic
heuristic otherwise.

Public API:
    - AssessmentService: Produces assessments, never fails
    - Assessment: Assessment model
    - AssessmentOutcome: Assessment tagged with its source
    - build_heuristic_assessment: Deterministic assessment
    - AssessmentConfig: Configuration settings
"""

from devmatch.assessment.config import (
    AssessmentConfig,
    get_assessment_config,
    reset_assessment_config,
)
from devmatch.assessment.heuristic import (
    build_heuristic_assessment,
    classify_experience,
    compute_overall_score,
)
from devmatch.assessment.llm import AssessmentLLM, AssessmentLLMError
from devmatch.assessment.models import Assessment, AssessmentOutcome, LLMAssessment
from devmatch.assessment.service import AssessmentService

__all__ = [
    "AssessmentService",
    "AssessmentLLM",
    "AssessmentLLMError",
    "Assessment",
    "AssessmentOutcome",
    "LLMAssessment",
    "build_heuristic_assessment",
    "classify_experience",
    "compute_overall_score",
    "AssessmentConfig",
    "get_assessment_config",
    "reset_assessment_config",
]
