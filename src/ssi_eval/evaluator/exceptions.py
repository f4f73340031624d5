"""Custom exception hierarchy for the scoring pipeline."""

from __future__ import annotations


class EvaluatorError(Exception):
    """Base exception for all evaluator errors.

    Args:
        message: Human-readable error description.
        context: Optional dict of extra context for logging/debugging.
    """

    def __init__(self, message: str = "", context: dict | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


class ConfigurationError(EvaluatorError):
    """Raised when configuration loading or validation fails."""


class MissingWeightError(ConfigurationError):
    """Raised when a criterion used by the questions has no weight."""


class QuestionnaireError(EvaluatorError):
    """Raised when questions reference unknown identifiers or are malformed."""


class InvalidWeightError(EvaluatorError):
    """Raised when a weight update names an unknown criterion or a non-finite value."""


class ScoringError(EvaluatorError):
    """Raised when scoring computation fails."""
