"""LLM client for profile assessment.

Uses LiteLLM to send the assessment prompt and return the raw text answer.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any

from devmatch.assessment.config import AssessmentConfig, get_assessment_config
from devmatch.errors import MisconfiguredError, UpstreamUnavailableError

logger = logging.getLogger(__name__)


# LiteLLM loads `.env` into the process environment in DEV mode.
os.environ.setdefault("LITELLM_MODE", "PRODUCTION")


class AssessmentLLMError(UpstreamUnavailableError):
    """Exception raised when the reasoning service cannot produce an answer."""


class AssessmentLLM:
    """LLM client for profile assessments."""

    def __init__(self, config: AssessmentConfig | None = None) -> None:
        self.config = config or get_assessment_config()

    def _get_model_name(self) -> str:
        """Return provider-qualified model name for LiteLLM routing."""
        if self.config.llm_base_url:
            if "/" in self.config.llm_model:
                return self.config.llm_model
            return f"openai/{self.config.llm_model}"

        if self.config.llm_provider == "openai":
            return self.config.llm_model

        if "/" in self.config.llm_model:
            return self.config.llm_model
        return f"{self.config.llm_provider}/{self.config.llm_model}"

    async def complete(self, prompt: str, system_prompt: str | None = None) -> str:
        """Send a prompt and return the response text.

        Raises:
            MisconfiguredError: No API key is configured.
            AssessmentLLMError: The call failed after retries, timed out,
                or returned no content.
        """
        from litellm.exceptions import Timeout

        if not self.config.llm_enabled:
            raise MisconfiguredError("ASSESSMENT_LLM_API_KEY is not set")

        messages: list[dict[str, str]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        last_error: Exception | None = None
        for attempt in range(self.config.llm_max_retries + 1):
            try:
                response = await self._call_completion(messages=messages)
                return self._extract_content(response)

            except AssessmentLLMError:
                raise

            except Timeout as e:
                raise AssessmentLLMError(
                    "LLM request timed out. "
                    f"Increase ASSESSMENT_LLM_TIMEOUT (timeout={self.config.llm_timeout}s).",
                    e,
                ) from e

            except Exception as e:
                last_error = e
                if attempt < self.config.llm_max_retries:
                    delay = min(0.5 * (2**attempt), 8.0)
                    logger.warning(
                        "LLM call failed (attempt %s), retrying in %.1fs: %s",
                        attempt + 1,
                        delay,
                        e,
                    )
                    await asyncio.sleep(delay)
                    continue
                raise AssessmentLLMError(f"LLM call failed after retries: {e}", e) from e

        raise AssessmentLLMError(f"LLM call failed: {last_error}", last_error)

    async def _call_completion(self, *, messages: list[dict[str, str]]):
        from litellm import acompletion

        kwargs: dict[str, Any] = {
            "model": self._get_model_name(),
            "messages": messages,
            "timeout": self.config.llm_timeout,
            "temperature": self.config.llm_temperature,
            "max_tokens": self.config.llm_max_tokens,
            "api_key": self.config.llm_api_key,
        }

        if self.config.llm_base_url:
            kwargs["base_url"] = self.config.llm_base_url

        return await acompletion(**kwargs)

    @staticmethod
    def _extract_content(response: Any) -> str:
        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, KeyError, TypeError) as e:
            raise AssessmentLLMError("LLM response has no message content", e) from e

        if content is None:
            raise AssessmentLLMError("LLM returned no content.")
        return str(content)
