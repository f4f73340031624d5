"""Load and validate criterion weights from YAML files."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ssi_eval.evaluator import Criterion
from ssi_eval.evaluator.exceptions import ConfigurationError

DEFAULT_WEIGHTS_PATH = Path(__file__).parent / "defaults" / "weights.yaml"


class WeightConfig(BaseModel):
    """Immutable mapping of criterion to weight.

    Weights are used as supplied: they may be negative and are not
    required to sum to 1.
    """

    model_config = ConfigDict(frozen=True)

    weights: dict[Criterion, float] = Field(default_factory=dict)

    @field_validator("weights", mode="before")
    @classmethod
    def _no_booleans(cls, value: Any) -> Any:
        if isinstance(value, dict):
            for criterion, weight in value.items():
                if isinstance(weight, bool):
                    raise ValueError(f"weight for {criterion} must be a number, got {weight}")
        return value

    @field_validator("weights")
    @classmethod
    def _finite(cls, value: dict[Criterion, float]) -> dict[Criterion, float]:
        for criterion, weight in value.items():
            if not math.isfinite(weight):
                raise ValueError(f"weight for {criterion.value} must be finite, got {weight}")
        return value

    @classmethod
    def equal(cls) -> WeightConfig:
        """Return a config giving every known criterion the same weight."""
        share = 1.0 / len(Criterion)
        return cls(weights={criterion: share for criterion in Criterion})

    def get(self, criterion: Criterion) -> float | None:
        return self.weights.get(criterion)

    def with_weight(self, criterion: Criterion, weight: float) -> WeightConfig:
        """Return a copy with one weight replaced."""
        return WeightConfig(weights={**self.weights, criterion: weight})

    @property
    def total(self) -> float:
        return sum(self.weights.values())


def load_weight_config(path: Path | None = None) -> WeightConfig:
    """Load weights from a YAML file. Falls back to equal weights.

    The file may nest the mapping under ``evaluation.weights`` or hold a
    top-level ``weights`` key.

    Args:
        path: Optional explicit path to a YAML weights file. Defaults to the
            bundled ``defaults/weights.yaml``.

    Raises:
        ConfigurationError: The file cannot be read, is not a YAML mapping, names an unknown
            criterion, or holds a non-numeric, boolean or non-finite weight.
    """
    if path is None:
        path = DEFAULT_WEIGHTS_PATH

    if not path.exists():
        return WeightConfig.equal()

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, UnicodeDecodeError, OSError) as exc:
        raise ConfigurationError(f"Cannot read weights from {path}: {exc}", context={"path": str(path)}) from exc

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Expected a mapping at the top of {path}, got {type(data).__name__}",
            context={"path": str(path)},
        )

    section = data.get("evaluation", data)
    raw = section.get("weights") if isinstance(section, dict) else None
    if not isinstance(raw, dict):
        raise ConfigurationError(
            f"No 'weights' mapping found in {path}",
            context={"path": str(path)},
        )

    weights: dict[Criterion, float] = {}
    for key, value in raw.items():
        try:
            criterion = Criterion(key)
        except ValueError as exc:
            raise ConfigurationError(
                f"Unknown criterion {key!r} in {path}",
                context={"path": str(path), "criterion": key},
            ) from exc
        weights[criterion] = value

    try:
        return WeightConfig(weights=weights)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid weights in {path}: {exc}",
            context={"path": str(path)},
        ) from exc
