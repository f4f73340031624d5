"""Shared test fixtures and configuration."""

from __future__ import annotations

import pytest

from fixtures.sample_questionnaires import (
    BALANCED_FUNCTIONALITY,
    MULTI_CRITERIA,
    QUESTIONNAIRE_YAML,
    UNEVEN_COVERAGE,
)
from ssi_eval.config import get_settings
from ssi_eval.config.weight_config import WeightConfig
from ssi_eval.evaluator import Criterion


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def balanced_questions():
    """Two functionality questions where VERAMO and MATTR both average 3."""
    return list(BALANCED_FUNCTIONALITY)


@pytest.fixture
def multi_criteria_questions():
    return list(MULTI_CRITERIA)


@pytest.fixture
def uneven_questions():
    """Flexibility questions where TRINSIC is scored by only one of two."""
    return list(UNEVEN_COVERAGE)


@pytest.fixture
def functionality_only_weights() -> WeightConfig:
    """Weight 1 on functionality, 0 everywhere else."""
    weights = {criterion: 0.0 for criterion in Criterion}
    weights[Criterion.FUNCTIONALITY] = 1.0
    return WeightConfig(weights=weights)


@pytest.fixture
def questionnaire_file(tmp_path):
    path = tmp_path / "questionnaire.yaml"
    path.write_text(QUESTIONNAIRE_YAML)
    return path
