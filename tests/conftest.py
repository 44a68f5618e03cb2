"""
Shared fixtures for the call scorer test suite.
"""

import pytest

from call_evaluator import CallEvaluator, default_rubric
from config import SAMPLE_CUSTOM_RUBRIC
from models import EvaluationCriterion, criteria_from_dicts
from transcription.base import STATUS_PENDING, TranscriptionService, TranscriptionStatus


@pytest.fixture
def evaluator():
    return CallEvaluator()


@pytest.fixture
def rubric():
    return default_rubric()


@pytest.fixture
def custom_rubric():
    return criteria_from_dicts(SAMPLE_CUSTOM_RUBRIC)


@pytest.fixture
def make_criterion():
    """Factory for ad-hoc criteria."""
    def _make(criterion_id="custom_metric", max_score=10, weight=1.0, keywords=(),
              required_keywords=(), name="Custom Metric"):
        return EvaluationCriterion(
            id=criterion_id,
            name=name,
            description="",
            max_score=max_score,
            weight=weight,
            keywords=tuple(keywords),
            required_keywords=tuple(required_keywords),
        )
    return _make


class ScriptedTranscriptionService(TranscriptionService):
    """Returns a fixed sequence of poll results; the last one repeats."""

    name = "scripted"

    def __init__(self, statuses):
        self.statuses = list(statuses) or [TranscriptionStatus(status=STATUS_PENDING)]
        self.submitted = []
        self.polls = 0

    def submit(self, audio_bytes):
        self.submitted.append(audio_bytes)
        return "job-1"

    def poll(self, job_id):
        index = min(self.polls, len(self.statuses) - 1)
        self.polls += 1
        return self.statuses[index]


@pytest.fixture
def scripted_service():
    return ScriptedTranscriptionService
