"""
Closure Evaluator
Evaluates: offer of further help, thanking the customer, professional sign-off.
"""

from typing import List

from config import CATEGORY_CLOSURE, CLOSURE, CLOSURE_WEIGHTS, CLOSURE_WINDOW_CHARS
from feedback import checklist
from models import EvaluationCriterion
from transcript import Transcript

from .base import CriterionEvaluator, any_line_contains, contains_any, round_half_up


class ClosureEvaluator(CriterionEvaluator):
    """
    Looks at the tail of the call (last 800 characters, both speakers) and at
    every agent line.
    """

    category = CATEGORY_CLOSURE

    def __init__(self):
        self.phrases = CLOSURE
        self.weights = CLOSURE_WEIGHTS
        self.window = CLOSURE_WINDOW_CHARS

    def _score(self, transcript: Transcript, criterion: EvaluationCriterion) -> int:
        max_score = criterion.max_score
        score = 0.0

        if self.asks_for_more(transcript):
            score += max_score * self.weights["further_assistance"]

        if self.thanks_at_end(transcript):
            score += max_score * self.weights["thanks"]

        if any_line_contains(transcript.agent_lines, self.phrases["sign_off"]):
            score += max_score * self.weights["sign_off"]

        return round_half_up(score)

    def asks_for_more(self, transcript: Transcript) -> bool:
        phrases = self.phrases["further_assistance"]
        return (
            contains_any(transcript.tail(self.window), phrases)
            or any_line_contains(transcript.agent_lines, phrases)
        )

    def thanks_at_end(self, transcript: Transcript) -> bool:
        return contains_any(transcript.tail(self.window), self.phrases["thanks"])

    def _annotations(self, transcript: Transcript, criterion: EvaluationCriterion) -> List[str]:
        annotations = checklist(
            self.asks_for_more(transcript),
            "Asked for additional questions",
            "Ask whether there is anything else you can help with"
        )
        annotations += checklist(
            self.thanks_at_end(transcript),
            "Thanked customer",
            "Thank the customer before ending the call"
        )
        annotations += checklist(
            any_line_contains(transcript.agent_lines, self.phrases["sign_off"]),
            "Closed with a professional sign-off"
        )
        return annotations
