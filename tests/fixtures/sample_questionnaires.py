"""Sample questionnaires with hand-computed expected scores for testing."""

from ssi_eval.evaluator import Criterion, Question, QuestionScore, QuestionType, Solution, SubCriterion


def make_question(criterion, scores, sub_criterion=None, text=""):
    """Build a Question from ``{solution: value}`` with sensible display defaults."""
    return Question(
        criterion=criterion,
        sub_criterion=sub_criterion or SubCriterion.FLOW_COVERAGE,
        question_type=QuestionType.DOUBLE,
        text=text,
        scores=[QuestionScore(solution=s, value=v) for s, v in scores.items()],
    )


# Two functionality questions that balance out: both solutions average 3.
BALANCED_FUNCTIONALITY = [
    make_question(Criterion.FUNCTIONALITY, {Solution.VERAMO: 4, Solution.MATTR: 2}, text="Q1"),
    make_question(Criterion.FUNCTIONALITY, {Solution.VERAMO: 2, Solution.MATTR: 4}, text="Q2"),
]

# Three criteria, every solution scored on every question.
#   functionality: VERAMO (5+3)/2=4, MATTR (1+3)/2=2
#   operability:   VERAMO 2,         MATTR 4
#   involvement:   VERAMO (1+1+4)/3=2, MATTR (3+3+3)/3=3
MULTI_CRITERIA = [
    make_question(Criterion.FUNCTIONALITY, {Solution.VERAMO: 5, Solution.MATTR: 1}),
    make_question(Criterion.FUNCTIONALITY, {Solution.VERAMO: 3, Solution.MATTR: 3}),
    make_question(Criterion.OPERABILITY, {Solution.VERAMO: 2, Solution.MATTR: 4}, SubCriterion.SUPPORT),
    make_question(Criterion.INVOLVEMENT, {Solution.VERAMO: 1, Solution.MATTR: 3}, SubCriterion.COST),
    make_question(Criterion.INVOLVEMENT, {Solution.VERAMO: 1, Solution.MATTR: 3}, SubCriterion.COMMUNITY),
    make_question(Criterion.INVOLVEMENT, {Solution.VERAMO: 4, Solution.MATTR: 3}, SubCriterion.PRODUCT),
]

# Only the first question scores TRINSIC.
UNEVEN_COVERAGE = [
    make_question(Criterion.FLEXIBILITY, {Solution.VERAMO: 2, Solution.TRINSIC: 4}, SubCriterion.PLATFORM),
    make_question(Criterion.FLEXIBILITY, {Solution.VERAMO: 2}, SubCriterion.DEPLOYMENT),
]

QUESTIONNAIRE_YAML = """\
questions:
  - criterion: functionality
    sub_criterion: flow_coverage
    question_type: bool
    text: Does the solution support credential issuance?
    scores: {veramo: 1, mattr: 1, trinsic: 0, azure: 1}
  - criterion: FUNCTIONALITY
    sub_criterion: standards
    question_type: enum
    text: Which credential format is supported?
    options: [jwt, json-ld, both]
    scores:
      - {solution: veramo, value: 1}
      - {solution: mattr, value: 0.5}
      - {solution: trinsic, value: 0.5}
      - {solution: azure, value: 0}
  - criterion: dependency
    sub_criterion: keys
    text: Can keys be held outside the vendor cloud?
    scores: {veramo: 1, mattr: 0, trinsic: 0, azure: 0}
"""
