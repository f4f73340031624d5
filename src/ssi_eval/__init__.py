"""Weighted comparison scoring of candidate SSI solutions."""

from __future__ import annotations

from ssi_eval.evaluator import (
    AveragingMode,
    Criterion,
    CriterionBreakdown,
    EvaluationResult,
    Question,
    QuestionScore,
    QuestionType,
    Solution,
    SubCriterion,
)
from ssi_eval.evaluator.engine import ScoringEngine

__version__ = "0.1.0"

__all__ = [
    "AveragingMode",
    "Criterion",
    "CriterionBreakdown",
    "EvaluationResult",
    "Question",
    "QuestionScore",
    "QuestionType",
    "ScoringEngine",
    "Solution",
    "SubCriterion",
    "__version__",
]
