"""
Criterion Evaluators Package
Each module scores one category of rubric criterion.
"""

from config import (
    CATEGORY_CLOSURE,
    CATEGORY_EMPATHY,
    CATEGORY_GENERIC,
    CATEGORY_OPENING,
    CATEGORY_PROBLEM_RESOLUTION,
    CRITERION_CATEGORIES,
)
from models import EvaluationCriterion
from transcript import Transcript

from .base import CriterionEvaluator
from .closure import ClosureEvaluator
from .empathy import EmpathyEvaluator
from .generic import GenericEvaluator
from .opening import OpeningEvaluator
from .problem_resolution import ProblemResolutionEvaluator

EVALUATORS = {
    CATEGORY_OPENING: OpeningEvaluator(),
    CATEGORY_PROBLEM_RESOLUTION: ProblemResolutionEvaluator(),
    CATEGORY_CLOSURE: ClosureEvaluator(),
    CATEGORY_EMPATHY: EmpathyEvaluator(),
    CATEGORY_GENERIC: GenericEvaluator()
}


def category_for(criterion: EvaluationCriterion) -> str:
    """Built-in category for a criterion id, or the generic fallback."""
    return CRITERION_CATEGORIES.get(criterion.id, CATEGORY_GENERIC)


def get_evaluator(criterion: EvaluationCriterion) -> CriterionEvaluator:
    return EVALUATORS[category_for(criterion)]


def generate_feedback(transcript: Transcript, score: float, criterion: EvaluationCriterion) -> str:
    """Feedback text for a criterion's (clamped) score."""
    return get_evaluator(criterion).get_feedback(transcript, score, criterion)


__all__ = [
    'CriterionEvaluator',
    'OpeningEvaluator',
    'ProblemResolutionEvaluator',
    'ClosureEvaluator',
    'EmpathyEvaluator',
    'GenericEvaluator',
    'category_for',
    'get_evaluator',
    'generate_feedback'
]
