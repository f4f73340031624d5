"""Unit tests for the high-level evaluation entry point."""

import os
from unittest.mock import patch

import pytest

from ssi_eval.config import Settings
from ssi_eval.config.weight_config import WeightConfig
from ssi_eval.evaluator import AveragingMode, Criterion, Solution
from ssi_eval.evaluator.exceptions import ConfigurationError, InvalidWeightError
from ssi_eval.evaluator.service import run_evaluation


class TestRunEvaluation:
    def test_explicit_questions_use_default_weights(self, balanced_questions):
        result = run_evaluation(balanced_questions, settings=Settings())
        assert result.weighted_total[Solution.VERAMO] == pytest.approx(0.6)

    def test_overrides_applied(self, balanced_questions):
        result = run_evaluation(
            balanced_questions,
            overrides={"functionality": 1.0},
            settings=Settings(),
        )
        assert result.weighted_total == {Solution.VERAMO: 3.0, Solution.MATTR: 3.0}

    def test_invalid_override(self, balanced_questions):
        with pytest.raises(InvalidWeightError):
            run_evaluation(balanced_questions, overrides={"speed": 1.0}, settings=Settings())

    def test_explicit_weights(self, balanced_questions, functionality_only_weights):
        result = run_evaluation(balanced_questions, weights=functionality_only_weights, settings=Settings())
        assert result.weights == functionality_only_weights.weights

    def test_loads_questionnaire_from_settings(self, questionnaire_file):
        settings = Settings(questionnaire_path=questionnaire_file)
        result = run_evaluation(settings=settings)
        # functionality: VERAMO (1+1)/2, dependency: VERAMO 1
        assert result.weighted_total[Solution.VERAMO] == pytest.approx(0.4)
        assert result.best == Solution.VERAMO

    def test_loads_weights_from_settings(self, questionnaire_file, tmp_path):
        weights = tmp_path / "weights.yaml"
        weights.write_text("weights:\n  functionality: 1\n  dependency: 0\n")
        settings = Settings(questionnaire_path=questionnaire_file, weights_path=weights)
        result = run_evaluation(settings=settings)
        assert result.weighted_total[Solution.MATTR] == pytest.approx(0.75)

    def test_averaging_from_settings(self, uneven_questions):
        settings = Settings(averaging_mode=AveragingMode.SOLUTION)
        result = run_evaluation(uneven_questions, settings=settings)
        assert result.averaging == AveragingMode.SOLUTION
        assert result.by_criterion[Criterion.FLEXIBILITY].normalized_by_solution[Solution.TRINSIC] == 4.0

    def test_explicit_averaging_wins(self, uneven_questions):
        settings = Settings(averaging_mode=AveragingMode.SOLUTION)
        result = run_evaluation(uneven_questions, averaging="criterion", settings=settings)
        assert result.averaging == AveragingMode.CRITERION

    def test_no_questions_configured(self):
        with pytest.raises(ConfigurationError):
            run_evaluation(settings=Settings(questionnaire_path=None))

    def test_reads_settings_from_env(self, questionnaire_file):
        env = {"SSI_EVAL_QUESTIONNAIRE_PATH": str(questionnaire_file)}
        with patch.dict(os.environ, env, clear=True):
            result = run_evaluation()
        assert set(result.by_criterion) == {Criterion.FUNCTIONALITY, Criterion.DEPENDENCY}

    def test_questions_without_config_do_not_need_files(self, balanced_questions):
        result = run_evaluation(balanced_questions, weights=WeightConfig.equal(), settings=Settings())
        assert result.best == Solution.VERAMO

    def test_configure_logging_uses_settings(self, balanced_questions):
        settings = Settings(log_level="warning", app_env="production")
        with patch("ssi_eval.evaluator.service.setup_logging") as mock_setup:
            run_evaluation(balanced_questions, settings=settings, configure_logging=True)
        mock_setup.assert_called_once_with(level="warning", environment="production")

    def test_logging_left_alone_by_default(self, balanced_questions):
        with patch("ssi_eval.evaluator.service.setup_logging") as mock_setup:
            run_evaluation(balanced_questions, settings=Settings())
        mock_setup.assert_not_called()
