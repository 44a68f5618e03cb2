"""
Call Evaluator - Main Orchestrator
Scores a support-call transcript against a rubric, criterion by criterion,
and aggregates the results into a CallAnalysis.
"""

import logging
import math
from typing import List, Optional, Sequence

from config import DEFAULT_RUBRIC
from criteria import EVALUATORS, category_for, generate_feedback
from criteria.base import round_half_up
from errors import EmptyRubricError, InvalidRubricError, NoTranscriptError
from models import CallAnalysis, EvaluationCriterion, ScoreResult, Utterance, criteria_from_dicts
from speaker_roles import SpeakerRoleClassifier
from transcript import Transcript

logger = logging.getLogger(__name__)


def default_rubric() -> List[EvaluationCriterion]:
    """The built-in three-criterion rubric (opening, problem solving, closure)."""
    return criteria_from_dicts(DEFAULT_RUBRIC)


class CallEvaluator:
    """
    Main orchestrator for scoring customer support calls.
    Holds no per-call state, so one instance can score many calls, including
    concurrently.
    """

    def __init__(self):
        self.evaluators = EVALUATORS
        self.classifier = SpeakerRoleClassifier()

    def score(self, transcript: str, rubric: Optional[Sequence[EvaluationCriterion]] = None) -> CallAnalysis:
        """
        Score a canonical "Agent:/Customer:" transcript.

        Args:
            transcript: Role-labeled transcript text
            rubric: Criteria to score against; the default rubric when omitted

        Returns:
            CallAnalysis with one ScoreResult per criterion, in rubric order
        """
        if rubric is None:
            rubric = default_rubric()
        if not transcript or not transcript.strip():
            raise NoTranscriptError("No transcript to analyze")

        max_possible_score = self._validate_rubric(rubric)
        parsed = Transcript.from_text(transcript)
        if not parsed.has_agent:
            logger.warning("No agent lines detected, criteria fall back to floor scores")

        scores = tuple(self._score_criterion(parsed, criterion) for criterion in rubric)

        total_score = sum(result.score for result in scores)
        percentage = self._clamp_percentage(100 * total_score / max_possible_score)
        weighted = self._calculate_weighted_percentage(rubric, scores, percentage)

        logger.info(
            f"Scored call: {total_score}/{max_possible_score} ({percentage}%) "
            f"across {len(rubric)} criteria"
        )

        return CallAnalysis(
            transcript=transcript,
            scores=scores,
            total_score=total_score,
            max_possible_score=max_possible_score,
            percentage=percentage,
            weighted_percentage=weighted,
        )

    def score_utterances(self, utterances: Sequence[Utterance],
                         rubric: Optional[Sequence[EvaluationCriterion]] = None) -> CallAnalysis:
        """Label diarized utterances with roles, then score the resulting transcript."""
        if not utterances:
            raise NoTranscriptError("No utterances to analyze")
        return self.score(self.classifier.format(utterances), rubric)

    def _score_criterion(self, transcript: Transcript, criterion: EvaluationCriterion) -> ScoreResult:
        category = category_for(criterion)
        raw_score = self.evaluators[category].evaluate(transcript, criterion)
        score = max(0, min(raw_score, criterion.max_score))
        feedback = generate_feedback(transcript, score, criterion)

        logger.debug(f"Criterion {criterion.id} ({category}): raw={raw_score} score={score}/{criterion.max_score}")

        return ScoreResult(criteria_id=criterion.id, score=score, feedback=feedback)

    def _validate_rubric(self, rubric: Sequence[EvaluationCriterion]) -> float:
        """Check the rubric can be scored and return its total points."""
        if not rubric:
            raise EmptyRubricError("Rubric has no criteria")

        seen = set()
        for criterion in rubric:
            points = criterion.max_score
            if points is None or not math.isfinite(points) or points < 0:
                raise InvalidRubricError(f"Criterion '{criterion.id}' has an invalid max score: {points}")
            if not math.isfinite(criterion.weight):
                raise InvalidRubricError(f"Criterion '{criterion.id}' has an invalid weight: {criterion.weight}")
            if criterion.id in seen:
                raise InvalidRubricError(f"Duplicate criterion id: {criterion.id}")
            seen.add(criterion.id)

        # Zero total points is an empty rubric; a zero-point criterion in a scorable rubric is malformed.
        max_possible_score = sum(criterion.max_score for criterion in rubric)
        if max_possible_score <= 0:
            raise EmptyRubricError("Rubric has no points to score against")
        zero_point = next((criterion for criterion in rubric if criterion.max_score == 0), None)
        if zero_point is not None:
            raise InvalidRubricError(f"Criterion '{zero_point.id}' must have a max score above zero")

        return max_possible_score

    def _calculate_weighted_percentage(self, rubric: Sequence[EvaluationCriterion],
                                       scores: Sequence[ScoreResult], percentage: int) -> int:
        """Percentage where each criterion counts by its weight instead of its points."""
        weighted = [
            (criterion.weight, result.score / criterion.max_score)
            for criterion, result in zip(rubric, scores)
            if criterion.weight > 0
        ]
        total_weight = sum(weight for weight, _ in weighted)
        if not total_weight:
            return percentage
        return self._clamp_percentage(100 * sum(weight * ratio for weight, ratio in weighted) / total_weight)

    def _clamp_percentage(self, value: float) -> int:
        return max(0, min(100, round_half_up(value)))


def score(transcript: str, rubric: Optional[Sequence[EvaluationCriterion]] = None) -> CallAnalysis:
    """Score a transcript with a fresh CallEvaluator."""
    return CallEvaluator().score(transcript, rubric)
