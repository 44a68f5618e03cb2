"""
Opening Evaluator
Evaluates: greeting, thanking the caller, self-identification and the offer
of assistance in the agent's first line.
"""

from typing import List

from config import CATEGORY_OPENING, OPENING_ELEMENTS, OPENING_FLOOR_SCORE
from feedback import NO_AGENT_GREETING_FEEDBACK, checklist
from models import EvaluationCriterion
from transcript import Transcript

from .base import CriterionEvaluator, contains_any


class OpeningEvaluator(CriterionEvaluator):
    """
    Scores the first agent line against a fixed 25-point budget that does not
    scale with the criterion's max score.
    """

    category = CATEGORY_OPENING

    def __init__(self):
        self.elements = OPENING_ELEMENTS

    def floor_score(self, criterion: EvaluationCriterion) -> int:
        return OPENING_FLOOR_SCORE

    def _score(self, transcript: Transcript, criterion: EvaluationCriterion) -> int:
        first_line = transcript.agent_lines[0].lower()
        return sum(
            element["points"]
            for element in self.elements.values()
            if contains_any(first_line, element["keywords"])
        )

    def get_feedback(self, transcript: Transcript, score: float, criterion: EvaluationCriterion) -> str:
        if not transcript.has_agent:
            return NO_AGENT_GREETING_FEEDBACK
        return super().get_feedback(transcript, score, criterion)

    def _annotations(self, transcript: Transcript, criterion: EvaluationCriterion) -> List[str]:
        first_line = transcript.agent_lines[0].lower()
        annotations = checklist(
            "thank you for calling" in first_line,
            "Thanked customer for calling",
            "Consider adding 'thank you for calling'"
        )
        annotations += checklist(
            contains_any(first_line, self.elements["self_identification"]["keywords"]),
            "Introduced themselves",
            "Introduce yourself by name"
        )
        annotations += checklist(
            contains_any(first_line, self.elements["offer_assistance"]["keywords"]),
            "Offered assistance",
            "Offer assistance, e.g. 'how can I help you today?'"
        )
        return annotations
