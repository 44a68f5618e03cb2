"""
Common interface for speech-to-text backends.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

from models import Utterance

STATUS_PENDING = "pending"
STATUS_COMPLETED = "completed"
STATUS_ERROR = "error"


@dataclass(frozen=True)
class TranscriptionStatus:
    """Snapshot of a transcription job as reported by the service."""
    status: str
    text: Optional[str] = None
    utterances: Tuple[Utterance, ...] = ()
    confidence: Optional[float] = None
    error: Optional[str] = None

    @property
    def is_completed(self) -> bool:
        return self.status == STATUS_COMPLETED

    @property
    def is_error(self) -> bool:
        return self.status == STATUS_ERROR


class TranscriptionService(ABC):
    """
    A remote transcription service: submit audio, then poll the returned job
    until it completes or fails.
    """

    name = "transcription"

    @abstractmethod
    def submit(self, audio_bytes: bytes) -> str:
        """Start a transcription job and return its id."""

    @abstractmethod
    def poll(self, job_id: str) -> TranscriptionStatus:
        """Fetch the current state of a transcription job."""
