"""Markdown ranking report — renders an ``EvaluationResult`` for people to read."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ssi_eval.evaluator import Criterion, Solution
from ssi_eval.evaluator.catalog import get_criterion_info

if TYPE_CHECKING:
    from ssi_eval.evaluator import EvaluationResult


def _fmt(value: float | None, precision: int) -> str:
    return "-" if value is None else f"{value:.{precision}f}"


def build_ranking_report(result: EvaluationResult, *, precision: int = 2) -> str:
    """Render the ranking and per-criterion averages as Markdown.

    Args:
        result: Output of ``ScoringEngine.get_scores``.
        precision: Decimal places for every number in the report.

    Returns:
        A Markdown document with a ranking table followed by a table of
        per-criterion averages. Solutions a criterion did not score are
        shown as a dash.
    """
    ranked = result.ranking()
    lines: list[str] = ["## Ranking", ""]

    if not ranked:
        lines.append("_No scored solutions._")
        return "\n".join(lines) + "\n"

    lines += ["| Rank | Solution | Weighted total |", "|---:|---|---:|"]
    for rank, (solution, total) in enumerate(ranked, start=1):
        lines.append(f"| {rank} | {solution.name} | {_fmt(total, precision)} |")

    solutions: list[Solution] = [solution for solution, _ in ranked]
    header = " | ".join(s.name for s in solutions)
    lines += [
        "",
        f"## Criteria ({result.averaging.value} averaging)",
        "",
        f"| Criterion | Weight | Questions | {header} |",
        "|---|---:|---:|" + "---:|" * len(solutions),
    ]

    for criterion in Criterion:
        breakdown = result.by_criterion.get(criterion)
        if breakdown is None:
            continue
        cells = " | ".join(
            _fmt(breakdown.normalized_by_solution.get(s), precision) for s in solutions
        )
        lines.append(
            f"| {get_criterion_info(criterion).title} | {_fmt(breakdown.weight, precision)} "
            f"| {breakdown.question_count} | {cells} |"
        )

    return "\n".join(lines) + "\n"
