"""Configuration settings for the Assessment Engine."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AssessmentConfig(BaseSettings):
    """Assessment configuration settings.

    All settings have sensible defaults and can be overridden via
    environment variables with `ASSESSMENT_` prefix or a .env file.
    Leaving `llm_api_key` unset is a supported mode: every assessment
    is then produced by the local heuristic.
    """

    model_config = SettingsConfigDict(
        env_prefix="ASSESSMENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # LLM settings
    llm_provider: str = Field(
        default="openai",
        description="LLM provider (openai, anthropic, azure, etc.)",
    )
    llm_model: str = Field(
        default="gpt-3.5-turbo",
        description="LLM model name",
    )
    llm_api_key: str | None = Field(
        default=None,
        description="API key for the LLM provider; unset selects heuristic mode",
    )
    llm_base_url: str | None = Field(
        default=None,
        description="Custom base URL for OpenAI-compatible endpoints",
    )
    llm_timeout: Annotated[float, Field(gt=0)] = Field(
        default=30.0,
        description="Timeout per LLM request in seconds",
    )
    llm_max_retries: Annotated[int, Field(ge=0)] = Field(
        default=1,
        description="Retries after a failed LLM call before falling back",
    )
    llm_temperature: Annotated[float, Field(ge=0.0, le=2.0)] = Field(
        default=0.3,
        description="Sampling temperature",
    )
    llm_max_tokens: Annotated[int, Field(gt=0)] = Field(
        default=1000,
        description="Maximum tokens in the LLM response",
    )

    @property
    def llm_enabled(self) -> bool:
        """True when a credential is configured for the reasoning service."""
        return bool(self.llm_api_key and self.llm_api_key.strip())


_assessment_config: AssessmentConfig | None = None


def get_assessment_config() -> AssessmentConfig:
    """Get the assessment configuration singleton."""
    global _assessment_config
    if _assessment_config is None:
        _assessment_config = AssessmentConfig()
    return _assessment_config


def reset_assessment_config() -> None:
    """Reset the assessment configuration singleton (useful for testing)."""
    global _assessment_config
    _assessment_config = None
