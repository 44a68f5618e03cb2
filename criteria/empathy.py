"""
Empathy Evaluator
Evaluates: strong empathy statements, repeated empathetic language, positive tone.
"""

from typing import List

from config import CATEGORY_EMPATHY, EMPATHY, EMPATHY_WEIGHTS
from feedback import observed, suggest
from models import EvaluationCriterion
from transcript import Transcript

from .base import CriterionEvaluator, any_line_contains, count_lines_containing, round_half_up


class EmpathyEvaluator(CriterionEvaluator):
    category = CATEGORY_EMPATHY

    def __init__(self):
        self.phrases = EMPATHY
        self.weights = EMPATHY_WEIGHTS

    def _score(self, transcript: Transcript, criterion: EvaluationCriterion) -> int:
        agent_lines = transcript.agent_lines
        max_score = criterion.max_score
        score = 0.0

        if any_line_contains(agent_lines, self.phrases["strong_phrases"]):
            score += max_score * self.weights["strong"]

        empathy_count = count_lines_containing(agent_lines, self.phrases["basic_words"])
        score += min(
            empathy_count * (max_score * self.weights["per_basic_line"]),
            max_score * self.weights["basic_cap"]
        )

        if any_line_contains(agent_lines, self.phrases["positive_tone"]):
            score += max_score * self.weights["positive_tone"]

        return round_half_up(score)

    def _annotations(self, transcript: Transcript, criterion: EvaluationCriterion) -> List[str]:
        empathy_count = count_lines_containing(transcript.agent_lines, self.phrases["basic_words"])
        if empathy_count > 2:
            return [observed("Multiple empathetic responses")]
        if empathy_count > 0:
            return [observed("Some empathetic language used")]
        return [suggest("Acknowledge how the customer feels, e.g. 'I understand how frustrating this is'")]
