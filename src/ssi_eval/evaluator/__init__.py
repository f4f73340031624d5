"""Pydantic models and closed-set identifiers for solution evaluation."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _ClosedSet(str, Enum):
    """String enum that also resolves member names and mixed-case values."""

    @classmethod
    def _missing_(cls, value: object) -> _ClosedSet | None:
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        return None


class Criterion(_ClosedSet):
    FUNCTIONALITY = "functionality"
    FLEXIBILITY = "flexibility"
    OPERABILITY = "operability"
    DEPENDENCY = "dependency"
    INVOLVEMENT = "involvement"


class SubCriterion(_ClosedSet):
    FLOW_COVERAGE = "flow_coverage"
    STANDARDS = "standards"
    EXTENSIBILITY = "extensibility"
    DEPLOYMENT = "deployment"
    PLATFORM = "platform"
    SUPPORT = "support"
    DOCUMENTATION = "documentation"
    MATURITY = "maturity"
    OVERHEAD = "overhead"
    KEYS = "keys"
    STACK = "stack"
    COST = "cost"
    COMMUNITY = "community"
    PRODUCT = "product"


class QuestionType(_ClosedSet):
    DOUBLE = "double"
    BOOL = "bool"
    ENUM = "enum"


class Solution(_ClosedSet):
    VERAMO = "veramo"
    MATTR = "mattr"
    TRINSIC = "trinsic"
    AZURE = "azure"


class AveragingMode(_ClosedSet):
    """Denominator used when averaging a criterion's raw sums.

    ``CRITERION`` divides by every question filed under the criterion,
    ``SOLUTION`` only by the questions that actually scored the solution.
    """

    CRITERION = "criterion"
    SOLUTION = "solution"


_SOLUTION_ORDER = {solution: index for index, solution in enumerate(Solution)}


class QuestionScore(BaseModel):
    """The score one solution received for one question."""

    model_config = ConfigDict(frozen=True)

    solution: Solution
    value: float = Field(allow_inf_nan=False)


class Question(BaseModel):
    """A questionnaire item filed under one criterion.

    Only ``criterion`` and ``scores`` take part in scoring; the remaining
    fields are carried for display.
    """

    model_config = ConfigDict(frozen=True)

    criterion: Criterion
    sub_criterion: SubCriterion
    question_type: QuestionType = QuestionType.DOUBLE
    text: str = ""
    options: list[Any] = Field(default_factory=list)
    scores: list[QuestionScore] = Field(default_factory=list)


class CriterionBreakdown(BaseModel):
    """Per-criterion audit trail behind the weighted totals."""

    raw_by_solution: dict[Solution, float]
    question_count: int = Field(ge=0)
    solution_counts: dict[Solution, int] = Field(default_factory=dict)
    normalized_by_solution: dict[Solution, float]
    weight: float
    weighted_by_solution: dict[Solution, float]


class EvaluationResult(BaseModel):
    """Output of ``ScoringEngine.get_scores``."""

    weighted_total: dict[Solution, float]
    by_criterion: dict[Criterion, CriterionBreakdown]
    weights: dict[Criterion, float]
    averaging: AveragingMode = AveragingMode.CRITERION

    def ranking(self) -> list[tuple[Solution, float]]:
        """Solutions ordered by weighted total, highest first.

        Ties keep the declaration order of ``Solution``.
        """
        return sorted(
            self.weighted_total.items(),
            key=lambda item: (-item[1], _SOLUTION_ORDER[item[0]]),
        )

    @property
    def best(self) -> Solution | None:
        ranked = self.ranking()
        return ranked[0][0] if ranked else None


__all__ = [
    "AveragingMode",
    "Criterion",
    "CriterionBreakdown",
    "EvaluationResult",
    "Question",
    "QuestionScore",
    "QuestionType",
    "Solution",
    "SubCriterion",
]
