"""Assessment service: reasoning service first, local heuristic as fallback."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from devmatch.assessment.config import AssessmentConfig, get_assessment_config
from devmatch.assessment.heuristic import build_heuristic_assessment
from devmatch.assessment.llm import AssessmentLLM
from devmatch.assessment.models import Assessment, AssessmentOutcome, LLMAssessment
from devmatch.assessment.prompts import ASSESSMENT_SYSTEM_PROMPT, build_assessment_prompt
from devmatch.errors import DevMatchError, ParseFailureError
from devmatch.github.models import ProfileSnapshot

logger = logging.getLogger(__name__)


def extract_json_object(text: str) -> str:
    """Return the text between the first ``{`` and the last ``}``.

    Raises:
        ParseFailureError: No such span exists.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        raise ParseFailureError("No JSON object found in LLM response")
    return text[start : end + 1]


def parse_llm_assessment(username: str, text: str) -> Assessment:
    """Parse a reasoning-service answer into an Assessment.

    Raises:
        ParseFailureError: The answer holds no usable JSON object.
    """
    payload = extract_json_object(text)
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise ParseFailureError(f"LLM response is not valid JSON: {e}", e) from e

    if not isinstance(data, dict):
        raise ParseFailureError("LLM response JSON is not an object")

    try:
        return LLMAssessment.model_validate(data).to_assessment(username)
    except ValidationError as e:
        raise ParseFailureError(f"LLM response failed validation: {e}", e) from e


class AssessmentService:
    """Produces an Assessment for a ProfileSnapshot. Never raises."""

    def __init__(
        self,
        config: AssessmentConfig | None = None,
        llm: AssessmentLLM | None = None,
    ) -> None:
        self.config = config or get_assessment_config()
        self.llm = llm or AssessmentLLM(self.config)

    async def evaluate(self, snapshot: ProfileSnapshot) -> AssessmentOutcome:
        """Assess a profile, reporting whether the LLM or the heuristic answered."""
        if not self.config.llm_enabled:
            logger.info(
                "No LLM credential configured, using heuristic assessment for %s",
                snapshot.username,
            )
            return self._fallback(snapshot)

        prompt = build_assessment_prompt(snapshot)
        try:
            text = await self.llm.complete(prompt, system_prompt=ASSESSMENT_SYSTEM_PROMPT)
            assessment = parse_llm_assessment(snapshot.username, text)
        except DevMatchError as e:
            logger.warning(
                "LLM assessment failed for %s, using heuristic assessment: %s",
                snapshot.username,
                e,
            )
            return self._fallback(snapshot)

        logger.info("LLM assessment completed for %s", snapshot.username)
        return AssessmentOutcome(assessment=assessment, source="llm")

    async def assess(self, snapshot: ProfileSnapshot) -> Assessment:
        """Assess a profile and return only the Assessment."""
        outcome = await self.evaluate(snapshot)
        return outcome.assessment

    @staticmethod
    def _fallback(snapshot: ProfileSnapshot) -> AssessmentOutcome:
        return AssessmentOutcome(
            assessment=build_heuristic_assessment(snapshot), source="heuristic"
        )
