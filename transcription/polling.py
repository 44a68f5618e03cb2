"""
Job polling and transcript assembly on top of a TranscriptionService.
"""

import logging
import time
from typing import Callable, Optional

from errors import NoTranscriptError, TranscriptionServiceError, TranscriptionTimeoutError
from speaker_roles import SpeakerRoleClassifier

from .base import TranscriptionService, TranscriptionStatus
from .config import TranscriptionConfig, get_transcription_config

logger = logging.getLogger(__name__)


def poll_until_complete(service: TranscriptionService, job_id: str,
                        interval: float = 3.0, max_attempts: int = 60,
                        sleep: Callable[[float], None] = time.sleep) -> TranscriptionStatus:
    """
    Poll a job, one request at a time, until it completes.

    Raises:
        TranscriptionServiceError: the job reported an error
        TranscriptionTimeoutError: no final status after `max_attempts` polls
    """
    for attempt in range(1, max_attempts + 1):
        status = service.poll(job_id)

        if status.is_completed:
            logger.info(f"Transcription {job_id} completed after {attempt} polling attempts")
            return status
        if status.is_error:
            raise TranscriptionServiceError(f"Transcription failed: {status.error}")

        if attempt < max_attempts:
            sleep(interval)

    raise TranscriptionTimeoutError(job_id, max_attempts)


def log_quality_summary(status: TranscriptionStatus, config: TranscriptionConfig) -> None:
    """Warn about low overall or per-word recognition confidence."""
    if status.confidence is not None:
        logger.info(f"Transcription confidence: {status.confidence * 100:.1f}%")
        if status.confidence < config.low_confidence_threshold:
            logger.warning(
                f"Lower confidence detected ({status.confidence * 100:.1f}%). "
                "Consider improving audio quality."
            )

    word_confidences = [
        confidence
        for utterance in status.utterances
        for confidence in (utterance.word_confidences or ())
    ]
    if word_confidences:
        average = sum(word_confidences) / len(word_confidences)
        low = [c for c in word_confidences if c < config.low_word_confidence_threshold]
        logger.info(f"Average word confidence: {average * 100:.1f}%")
        if low:
            logger.warning(f"{len(low)} words with low confidence detected. Consider manual review.")


def transcript_from_status(status: TranscriptionStatus,
                           classifier: Optional[SpeakerRoleClassifier] = None) -> str:
    """
    Canonical transcript for a completed job: role-labeled when the service
    returned diarized utterances, the flat text otherwise.
    """
    if status.utterances:
        logger.info(f"Processing {len(status.utterances)} utterances with speaker labels")
        return (classifier or SpeakerRoleClassifier()).format(status.utterances)
    if status.text and status.text.strip():
        return status.text
    raise NoTranscriptError("Transcription completed without any text")


def transcribe_audio(service: TranscriptionService, audio_bytes: bytes,
                     config: TranscriptionConfig = None,
                     sleep: Callable[[float], None] = time.sleep) -> str:
    """
    Submit audio, wait for the transcript and return it in canonical form.

    Args:
        service: Transcription backend
        audio_bytes: Raw audio file contents
        config: Polling and quality settings; global config when omitted
        sleep: Delay function between polls

    Returns:
        "Agent:/Customer:" transcript, or flat text if the service did not diarize
    """
    if not audio_bytes:
        raise NoTranscriptError("No audio to transcribe")
    config = config or get_transcription_config()

    job_id = service.submit(audio_bytes)
    status = poll_until_complete(
        service, job_id,
        interval=config.poll_interval_seconds,
        max_attempts=config.max_poll_attempts,
        sleep=sleep
    )
    log_quality_summary(status, config)
    return transcript_from_status(status)
