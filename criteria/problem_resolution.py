"""
Problem Resolution Evaluator
Evaluates: acknowledgement, ownership, diagnostic questions, solutions and
confirmation that the issue is resolved.
"""

from typing import List

from config import CATEGORY_PROBLEM_RESOLUTION, PROBLEM_RESOLUTION, PROBLEM_RESOLUTION_WEIGHTS
from feedback import checklist
from models import EvaluationCriterion
from transcript import Transcript

from .base import CriterionEvaluator, any_line_contains, round_half_up


class ProblemResolutionEvaluator(CriterionEvaluator):
    """Scores agent lines as fractions of the criterion's max score."""

    category = CATEGORY_PROBLEM_RESOLUTION

    def __init__(self):
        self.phrases = PROBLEM_RESOLUTION
        self.weights = PROBLEM_RESOLUTION_WEIGHTS

    def _score(self, transcript: Transcript, criterion: EvaluationCriterion) -> int:
        agent_lines = transcript.agent_lines
        max_score = criterion.max_score
        score = 0.0

        if any_line_contains(agent_lines, self.phrases["empathy_words"]):
            score += max_score * self.weights["empathy"]

        if any_line_contains(agent_lines, self.phrases["ownership_phrases"]):
            score += max_score * self.weights["ownership"]

        question_count = self.count_questions(agent_lines)
        score += min(
            question_count * (max_score * self.weights["per_question"]),
            max_score * self.weights["questions_cap"]
        )

        if any_line_contains(agent_lines, self.phrases["solution_indicators"]):
            score += max_score * self.weights["solution"]

        if any_line_contains(agent_lines, self.phrases["confirmation_phrases"]):
            score += max_score * self.weights["confirmation"]

        return round_half_up(score)

    def count_questions(self, agent_lines: List[str]) -> int:
        """Count agent lines containing a diagnostic question word followed by a space."""
        tokens = [f"{word} " for word in self.phrases["question_words"]]
        return sum(
            1 for line in agent_lines
            if any(token in line.lower() for token in tokens)
        )

    def _annotations(self, transcript: Transcript, criterion: EvaluationCriterion) -> List[str]:
        agent_lines = transcript.agent_lines
        annotations = checklist(
            any_line_contains(agent_lines, self.phrases["empathy_words"]),
            "Showed empathy",
            "Acknowledge the customer's problem before troubleshooting"
        )
        annotations += checklist(
            self.count_questions(agent_lines) > 0,
            "Asked diagnostic questions",
            "Ask questions to understand the issue"
        )
        annotations += checklist(
            any_line_contains(agent_lines, self.phrases["solution_indicators"]),
            "Provided solutions",
            "Offer a concrete solution or next step"
        )
        annotations += checklist(
            any_line_contains(agent_lines, self.phrases["confirmation_phrases"]),
            "Confirmed the issue was resolved"
        )
        return annotations
