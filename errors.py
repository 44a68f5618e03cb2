"""
Exceptions raised by the call scorer and its transcription clients.
"""

from typing import Optional


class CallScorerError(Exception):
    """Base class for all call scorer errors."""


class EmptyRubricError(CallScorerError):
    """Raised when a rubric has no criteria or no points to score against."""


class InvalidRubricError(CallScorerError, ValueError):
    """Raised when a rubric source or a single criterion is malformed."""


class NoTranscriptError(CallScorerError):
    """Raised when there is no transcript text to analyze."""


class TranscriptionServiceError(CallScorerError):
    """Raised when the speech-to-text service reports a failure."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TranscriptionTimeoutError(CallScorerError):
    """Raised when a transcription job does not finish within the polling budget."""

    def __init__(self, job_id: str, attempts: int):
        super().__init__(
            f"Transcription job {job_id} did not complete after {attempts} polling attempts"
        )
        self.job_id = job_id
        self.attempts = attempts
