"""Load questionnaires (questions with per-solution scores) from YAML files."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ssi_eval.evaluator import Question
from ssi_eval.evaluator.exceptions import QuestionnaireError

logger = logging.getLogger(__name__)


def _normalize_scores(raw: Any, index: int) -> list[dict[str, Any]]:
    """Accept ``{solution: value}`` or ``[{solution, value}, ...]``."""
    if raw is None:
        return []
    if isinstance(raw, Mapping):
        return [{"solution": solution, "value": value} for solution, value in raw.items()]
    if isinstance(raw, list):
        return list(raw)
    raise QuestionnaireError(
        f"Question {index}: 'scores' must be a mapping or a list",
        context={"index": index},
    )


def parse_questions(items: list[Any]) -> list[Question]:
    """Validate raw question mappings into ``Question`` models.

    Args:
        items: Question mappings as read from YAML or JSON.

    Raises:
        QuestionnaireError: An item is not a mapping, or references an unknown
            criterion, sub-criterion, question type or solution.
    """
    questions: list[Question] = []
    for index, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise QuestionnaireError(
                f"Question {index} must be a mapping",
                context={"index": index},
            )
        data = dict(item)
        data["scores"] = _normalize_scores(item.get("scores"), index)
        try:
            questions.append(Question.model_validate(data))
        except ValidationError as exc:
            raise QuestionnaireError(
                f"Question {index} is invalid: {exc}",
                context={"index": index, "errors": exc.errors(include_url=False)},
            ) from exc
    return questions


def load_questionnaire(path: Path) -> list[Question]:
    """Load a questionnaire from a YAML file.

    The file holds a top-level ``questions`` list; see ``parse_questions``.

    Raises:
        QuestionnaireError: The file is missing, unreadable, not valid UTF-8 YAML, or malformed.
    """
    if not path.exists():
        raise QuestionnaireError(f"Questionnaire not found: {path}", context={"path": str(path)})

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, UnicodeDecodeError, OSError) as exc:
        raise QuestionnaireError(f"Cannot read questionnaire from {path}: {exc}", context={"path": str(path)}) from exc

    items = data.get("questions") if isinstance(data, Mapping) else None
    if not isinstance(items, list):
        raise QuestionnaireError(
            f"No 'questions' list found in {path}",
            context={"path": str(path)},
        )

    questions = parse_questions(items)
    logger.info("Loaded %d questions from %s", len(questions), path)
    return questions
