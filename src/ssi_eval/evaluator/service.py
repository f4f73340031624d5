"""High-level evaluation entry point — wires settings, loaders and the engine together."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from ssi_eval.config import Settings, get_settings
from ssi_eval.config.questionnaire import load_questionnaire
from ssi_eval.config.weight_config import WeightConfig, load_weight_config
from ssi_eval.evaluator import AveragingMode, Criterion, EvaluationResult, Question
from ssi_eval.evaluator.engine import ScoringEngine
from ssi_eval.evaluator.exceptions import ConfigurationError
from ssi_eval.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def run_evaluation(
    questions: Sequence[Question | Mapping[str, Any]] | None = None,
    *,
    weights: WeightConfig | None = None,
    overrides: Mapping[Criterion | str, float] | None = None,
    averaging: AveragingMode | str | None = None,
    settings: Settings | None = None,
    configure_logging: bool = False,
) -> EvaluationResult:
    """Score a questionnaire in one call.

    Anything not passed explicitly is taken from ``settings``: the
    questionnaire from ``questionnaire_path``, the weights from
    ``weights_path`` and the denominator from ``averaging_mode``.

    Args:
        questions: Questions to score. Loaded from settings when omitted.
        weights: Base weight configuration.
        overrides: Per-criterion weights applied on top of ``weights``.
        averaging: Denominator used for per-criterion averages.
        settings: Settings to read defaults from. Defaults to ``get_settings()``.
        configure_logging: Configure root logging from ``settings.log_level``
            and ``settings.app_env`` before scoring.

    Raises:
        ConfigurationError: No questions were given and none are configured,
            or the weights file is invalid.
        QuestionnaireError: The questionnaire is malformed.
        InvalidWeightError: An override is invalid.
        MissingWeightError: A criterion in use has no weight.
    """
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(level=settings.log_level, environment=settings.app_env.value)

    if questions is None:
        if settings.questionnaire_path is None:
            raise ConfigurationError(
                "No questions given and SSI_EVAL_QUESTIONNAIRE_PATH is not set",
            )
        questions = load_questionnaire(settings.questionnaire_path)

    if weights is None:
        weights = load_weight_config(settings.weights_path)

    engine = ScoringEngine(
        questions,
        weights=weights,
        averaging=averaging if averaging is not None else settings.averaging_mode,
    )
    for criterion, weight in (overrides or {}).items():
        engine.set_weight(criterion, weight)

    result = engine.get_scores()
    logger.info("Best solution: %s", result.best.value if result.best else "none")
    return result
