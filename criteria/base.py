"""
Shared behaviour for criterion evaluators: the no-agent floor, phrase
matching, rounding and feedback assembly.
"""

import math
from typing import Iterable, List

from config import CATEGORY_GENERIC, NO_AGENT_FLOOR_RATIO
from feedback import compose_feedback, select_tier, suggest
from models import EvaluationCriterion
from transcript import Transcript


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values."""
    return int(math.floor(value + 0.5))


def contains_any(text: str, phrases: Iterable[str]) -> bool:
    return any(phrase in text for phrase in phrases)


def any_line_contains(lines: Iterable[str], phrases: Iterable[str]) -> bool:
    phrases = list(phrases)
    return any(contains_any(line.lower(), phrases) for line in lines)


def count_lines_containing(lines: Iterable[str], phrases: Iterable[str]) -> int:
    phrases = list(phrases)
    return sum(1 for line in lines if contains_any(line.lower(), phrases))


def missing_keywords(transcript: Transcript, keywords: Iterable[str]) -> List[str]:
    return [keyword for keyword in keywords if keyword.lower() not in transcript.lower]


class CriterionEvaluator:
    """
    Base class for the per-category evaluators.

    Subclasses implement `_score` for transcripts that contain agent speech
    and `_annotations` for the checklist part of the feedback. Scores may
    exceed the criterion's max score; the call evaluator clamps them.
    """

    category = CATEGORY_GENERIC

    def evaluate(self, transcript: Transcript, criterion: EvaluationCriterion) -> int:
        """
        Score a transcript against one criterion.

        Args:
            transcript: Parsed, role-labeled transcript
            criterion: Rubric criterion being scored

        Returns:
            Raw (unclamped) score
        """
        if not transcript.has_agent:
            return self.floor_score(criterion)
        return self._score(transcript, criterion)

    def floor_score(self, criterion: EvaluationCriterion) -> int:
        """Score used when the transcript has no agent lines."""
        return round_half_up(criterion.max_score * NO_AGENT_FLOOR_RATIO)

    def get_feedback(self, transcript: Transcript, score: float, criterion: EvaluationCriterion) -> str:
        """Tiered feedback text followed by checklist annotations."""
        tier = select_tier(score, criterion.max_score)
        annotations = self._annotations(transcript, criterion)
        for keyword in missing_keywords(transcript, criterion.required_keywords):
            annotations.append(suggest(f"Missing required phrase '{keyword}'"))
        return compose_feedback(self.category, tier, annotations, criterion.name)

    def _score(self, transcript: Transcript, criterion: EvaluationCriterion) -> int:
        raise NotImplementedError

    def _annotations(self, transcript: Transcript, criterion: EvaluationCriterion) -> List[str]:
        return []
