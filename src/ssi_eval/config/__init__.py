"""Application settings loaded from environment variables."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ssi_eval.evaluator import AveragingMode


class Environment(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Application settings with env var support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SSI_EVAL_",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_env: Environment = Environment.DEVELOPMENT
    log_level: str = "INFO"

    # Inputs
    weights_path: Path | None = Field(
        default=None,
        description="YAML file with criterion weights. Bundled equal weights are used when unset.",
    )
    questionnaire_path: Path | None = Field(
        default=None,
        description="YAML file with the questions and per-solution scores.",
    )

    # Scoring
    averaging_mode: AveragingMode = Field(
        default=AveragingMode.CRITERION,
        description="Denominator for per-criterion averages: 'criterion' counts every "
        "question under the criterion, 'solution' only those that scored the solution.",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        The singleton Settings loaded from environment / .env file.
        Cached after the first call via ``lru_cache``.
    """
    return Settings()
