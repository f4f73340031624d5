"""Scoring engine — averages question scores per criterion and combines them with weights.

The engine groups every question's per-solution scores by criterion, divides
the sums into per-criterion averages, scales each average by the criterion's
weight and adds the results into one comparable total per solution.
"""

from __future__ import annotations

import logging
import math
import threading
from collections.abc import Mapping, Sequence
from numbers import Real
from typing import Any

from pydantic import ValidationError

from ssi_eval.config.weight_config import WeightConfig
from ssi_eval.evaluator import (
    AveragingMode,
    Criterion,
    CriterionBreakdown,
    EvaluationResult,
    Question,
    Solution,
)
from ssi_eval.evaluator.exceptions import (
    ConfigurationError,
    InvalidWeightError,
    MissingWeightError,
    QuestionnaireError,
    ScoringError,
)

logger = logging.getLogger(__name__)


def _coerce_question(question: Question | Mapping[str, Any], index: int) -> Question:
    if isinstance(question, Question):
        return question
    if not isinstance(question, Mapping):
        raise QuestionnaireError(
            f"Question {index} must be a Question or a mapping, got {type(question).__name__}",
            context={"index": index},
        )
    try:
        return Question.model_validate(question)
    except ValidationError as exc:
        raise QuestionnaireError(
            f"Question {index} is invalid: {exc}",
            context={"index": index, "errors": exc.errors(include_url=False)},
        ) from exc


def _resolve_weight(criterion: Criterion | str, weight: float) -> tuple[Criterion, float]:
    try:
        resolved = Criterion(criterion)
    except ValueError as exc:
        raise InvalidWeightError(
            f"Unknown criterion: {criterion!r}",
            context={"criterion": criterion, "known": [c.value for c in Criterion]},
        ) from exc

    if isinstance(weight, bool) or not isinstance(weight, Real) or not math.isfinite(weight):
        raise InvalidWeightError(
            f"Weight for {resolved.value} must be a finite number, got {weight!r}",
            context={"criterion": resolved.value, "weight": weight},
        )
    return resolved, float(weight)


class ScoringEngine:
    """Weighted, criterion-normalized comparison of solutions.

    Args:
        questions: The questionnaire. ``Question`` instances or mappings that
            validate into one; the sequence is copied and never modified.
        weights: Initial criterion weights. Defaults to equal weights for
            every known criterion.
        averaging: Denominator used for per-criterion averages.

    Raises:
        QuestionnaireError: A question is malformed or references an
            unknown criterion, sub-criterion, question type or solution.
    """

    def __init__(
        self,
        questions: Sequence[Question | Mapping[str, Any]],
        weights: WeightConfig | None = None,
        averaging: AveragingMode | str = AveragingMode.CRITERION,
    ) -> None:
        self._questions: tuple[Question, ...] = tuple(
            _coerce_question(q, i) for i, q in enumerate(questions)
        )
        config = weights if weights is not None else WeightConfig.equal()
        self._weights: dict[Criterion, float] = dict(config.weights)
        self._lock = threading.Lock()
        try:
            self._averaging = AveragingMode(averaging)
        except ValueError as exc:
            raise ConfigurationError(f"Unknown averaging mode: {averaging!r}") from exc

    @property
    def averaging(self) -> AveragingMode:
        return self._averaging

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    @property
    def weights(self) -> dict[Criterion, float]:
        """Snapshot of the current weight map."""
        with self._lock:
            return dict(self._weights)

    def set_weight(self, criterion: Criterion | str, weight: float) -> None:
        """Overwrite the weight of one criterion.

        Any finite real number is accepted; negative weights and weights
        above 1 propagate into the totals unchanged.

        Raises:
            InvalidWeightError: Unknown criterion or non-finite weight.
        """
        resolved, value = _resolve_weight(criterion, weight)
        with self._lock:
            self._weights[resolved] = value
        logger.debug("Weight for %s set to %s", resolved.value, value)

    def with_weight(self, criterion: Criterion | str, weight: float) -> ScoringEngine:
        """Return a new engine with one weight replaced, leaving this one untouched."""
        resolved, value = _resolve_weight(criterion, weight)
        weights = self.weights
        weights[resolved] = value
        return ScoringEngine(self._questions, WeightConfig(weights=weights), self._averaging)

    def get_scores(self) -> EvaluationResult:
        """Compute per-criterion averages and the weighted total per solution.

        Returns:
            A fresh ``EvaluationResult`` holding the weighted totals and,
            per criterion, the raw sums, question counts, averages and
            weighted contributions.

        Raises:
            MissingWeightError: A criterion used by the questions has no weight.
        """
        weights = self.weights
        logger.debug("Scoring with weights %s", {c.value: w for c, w in weights.items()})

        raw: dict[Criterion, dict[Solution, float]] = {}
        question_counts: dict[Criterion, int] = {}
        solution_counts: dict[Criterion, dict[Solution, int]] = {}

        for question in self._questions:
            criterion = question.criterion
            sums = raw.setdefault(criterion, {})
            counts = solution_counts.setdefault(criterion, {})
            question_counts[criterion] = question_counts.get(criterion, 0) + 1

            seen: set[Solution] = set()
            for score in question.scores:
                if score.solution in seen:
                    logger.warning(
                        "Question %r scores %s more than once; values are summed",
                        question.text,
                        score.solution.value,
                    )
                else:
                    seen.add(score.solution)
                    counts[score.solution] = counts.get(score.solution, 0) + 1
                sums[score.solution] = sums.get(score.solution, 0.0) + score.value

        missing = [c for c in raw if c not in weights]
        if missing:
            raise MissingWeightError(
                "No weight configured for criteria: " + ", ".join(c.value for c in missing),
                context={"missing": [c.value for c in missing]},
            )

        totals: dict[Solution, float] = {}
        by_criterion: dict[Criterion, CriterionBreakdown] = {}

        for criterion, sums in raw.items():
            weight = weights[criterion]
            normalized: dict[Solution, float] = {}
            weighted: dict[Solution, float] = {}

            for solution, raw_sum in sums.items():
                if self._averaging == AveragingMode.CRITERION:
                    denominator = question_counts[criterion]
                elif self._averaging == AveragingMode.SOLUTION:
                    denominator = solution_counts[criterion].get(solution, 0)
                else:
                    raise ScoringError(f"Unsupported averaging mode: {self._averaging!r}")
                if denominator == 0:
                    raise ScoringError(
                        f"No questions to average {solution.value} on {criterion.value}",
                        context={"criterion": criterion.value, "solution": solution.value},
                    )

                normalized[solution] = raw_sum / denominator
                weighted[solution] = normalized[solution] * weight
                totals[solution] = totals.get(solution, 0.0) + weighted[solution]

            by_criterion[criterion] = CriterionBreakdown(
                raw_by_solution=dict(sums),
                question_count=question_counts[criterion],
                solution_counts=dict(solution_counts[criterion]),
                normalized_by_solution=normalized,
                weight=weight,
                weighted_by_solution=weighted,
            )

        logger.info(
            "Scored %d questions across %d criteria for %d solutions",
            len(self._questions),
            len(by_criterion),
            len(totals),
        )
        return EvaluationResult(
            weighted_total=totals,
            by_criterion=by_criterion,
            weights=weights,
            averaging=self._averaging,
        )
