"""
Generic Evaluator
Fallback for criteria without a dedicated evaluator: keyword coverage when
the criterion lists keywords, otherwise conversation balance.
"""

from typing import List

from config import (
    BALANCED_RATIO_RANGE,
    CATEGORY_GENERIC,
    GENERIC_WEIGHTS,
    MULTIPLE_TURNS_MIN_LINES,
    REQUIRED_KEYWORD_CAP,
)
from feedback import observed, suggest
from models import EvaluationCriterion
from transcript import Transcript

from .base import CriterionEvaluator, missing_keywords, round_half_up


class GenericEvaluator(CriterionEvaluator):
    """
    Keyword criteria are scored on the share of keywords that appear anywhere
    in the transcript. A missing required keyword caps the score at half the
    criterion's max score.
    """

    category = CATEGORY_GENERIC

    def __init__(self):
        self.weights = GENERIC_WEIGHTS

    def _score(self, transcript: Transcript, criterion: EvaluationCriterion) -> int:
        if criterion.keywords:
            score = self.keyword_score(transcript, criterion)
        else:
            score = self.interaction_score(transcript, criterion)

        if missing_keywords(transcript, criterion.required_keywords):
            score = min(score, round_half_up(criterion.max_score * REQUIRED_KEYWORD_CAP))
        return score

    def keyword_score(self, transcript: Transcript, criterion: EvaluationCriterion) -> int:
        total = len(criterion.keywords)
        matched = total - len(missing_keywords(transcript, criterion.keywords))
        return round_half_up((matched / total) * criterion.max_score)

    def interaction_score(self, transcript: Transcript, criterion: EvaluationCriterion) -> int:
        max_score = criterion.max_score
        agent_words = len(" ".join(transcript.agent_lines).split())
        customer_words = len(" ".join(transcript.customer_lines).split())
        ratio = agent_words / max(customer_words, 1)

        score = max_score * self.weights["base"]

        low, high = BALANCED_RATIO_RANGE
        if low < ratio < high:
            score += max_score * self.weights["balanced_interaction"]

        if len(transcript.agent_lines) > MULTIPLE_TURNS_MIN_LINES:
            score += max_score * self.weights["multiple_turns"]

        return round_half_up(score)

    def _annotations(self, transcript: Transcript, criterion: EvaluationCriterion) -> List[str]:
        if not criterion.keywords:
            return []
        missing = missing_keywords(transcript, criterion.keywords)
        matched = [keyword for keyword in criterion.keywords if keyword not in missing]
        annotations = []
        if matched:
            annotations.append(observed(f"Mentioned: {', '.join(matched)}"))
        if missing:
            annotations.append(suggest(f"Not mentioned: {', '.join(missing)}"))
        return annotations
