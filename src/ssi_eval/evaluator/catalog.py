"""Descriptive metadata for criteria and sub-criteria.

Nothing here affects scoring; it is used to label reports.
"""

from __future__ import annotations

from dataclasses import dataclass

from ssi_eval.evaluator import Criterion, SubCriterion


@dataclass(frozen=True)
class CriterionInfo:
    """Display metadata for a top-level criterion."""

    criterion: Criterion
    title: str
    description: str
    sub_criteria: tuple[SubCriterion, ...]


CRITERIA: dict[Criterion, CriterionInfo] = {
    Criterion.FUNCTIONALITY: CriterionInfo(
        criterion=Criterion.FUNCTIONALITY,
        title="Functionality",
        description="Coverage of the required credential flows and conformance to standards",
        sub_criteria=(SubCriterion.FLOW_COVERAGE, SubCriterion.STANDARDS),
    ),
    Criterion.FLEXIBILITY: CriterionInfo(
        criterion=Criterion.FLEXIBILITY,
        title="Flexibility",
        description="How far the solution can be extended, deployed and run on different platforms",
        sub_criteria=(SubCriterion.EXTENSIBILITY, SubCriterion.DEPLOYMENT, SubCriterion.PLATFORM),
    ),
    Criterion.OPERABILITY: CriterionInfo(
        criterion=Criterion.OPERABILITY,
        title="Operability",
        description="Vendor support, documentation quality, maturity and operating overhead",
        sub_criteria=(
            SubCriterion.SUPPORT,
            SubCriterion.DOCUMENTATION,
            SubCriterion.MATURITY,
            SubCriterion.OVERHEAD,
        ),
    ),
    Criterion.DEPENDENCY: CriterionInfo(
        criterion=Criterion.DEPENDENCY,
        title="Dependency risk",
        description="Control over keys and lock-in to the vendor's technology stack",
        sub_criteria=(SubCriterion.KEYS, SubCriterion.STACK),
    ),
    Criterion.INVOLVEMENT: CriterionInfo(
        criterion=Criterion.INVOLVEMENT,
        title="Involvement cost",
        description="Licensing cost, community activity and product commitment",
        sub_criteria=(SubCriterion.COST, SubCriterion.COMMUNITY, SubCriterion.PRODUCT),
    ),
}

_PARENTS: dict[SubCriterion, Criterion] = {
    sub: info.criterion for info in CRITERIA.values() for sub in info.sub_criteria
}


def get_criterion_info(criterion: Criterion) -> CriterionInfo:
    return CRITERIA[criterion]


def parent_criterion(sub_criterion: SubCriterion) -> Criterion:
    """Return the criterion a sub-criterion is filed under."""
    return _PARENTS[sub_criterion]
