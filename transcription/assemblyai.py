"""
AssemblyAI Transcription Client

Uploads call audio to AssemblyAI, requests a speaker-labelled transcript
and maps the job status onto TranscriptionStatus.
"""

import logging
from typing import Dict, Optional

import requests

from errors import TranscriptionServiceError
from models import Utterance

from .base import STATUS_COMPLETED, STATUS_ERROR, STATUS_PENDING, TranscriptionService, TranscriptionStatus
from .config import TranscriptionConfig, get_transcription_config

logger = logging.getLogger(__name__)


class AssemblyAITranscriber(TranscriptionService):
    """
    AssemblyAI REST client.

    Transcripts are requested with speaker labels and disfluencies so the
    speaker classifier sees the filler words ("um let me", "okay so") that
    agents use.
    """

    name = "assemblyai"

    def __init__(self, config: TranscriptionConfig = None, session: requests.Session = None):
        self.config = config or get_transcription_config()
        if not self.config.assemblyai_api_key:
            raise TranscriptionServiceError("AssemblyAI API key not configured. Set ASSEMBLYAI_API_KEY")
        self.base_url = self.config.assemblyai_base_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update({"authorization": self.config.assemblyai_api_key})

    def submit(self, audio_bytes: bytes) -> str:
        """Upload the audio and start a transcription job."""
        upload = self._request("POST", "/upload", "Upload", data=audio_bytes)
        upload_url = upload["upload_url"]
        logger.info(f"Audio uploaded to AssemblyAI: {upload_url}")

        job = self._request("POST", "/transcript", "Transcription request", json={
            "audio_url": upload_url,
            "speaker_labels": True,
            "punctuate": True,
            "format_text": False,
            "disfluencies": True,
        })
        logger.info(f"Transcription requested, id: {job['id']}")
        return job["id"]

    def poll(self, job_id: str) -> TranscriptionStatus:
        """Fetch the job and translate AssemblyAI's status into ours."""
        payload = self._request("GET", f"/transcript/{job_id}", "Polling")
        status = payload.get("status")
        logger.debug(f"Transcription {job_id} status: {status}")

        if status == "completed":
            return TranscriptionStatus(
                status=STATUS_COMPLETED,
                text=payload.get("text"),
                utterances=tuple(self._to_utterance(item) for item in payload.get("utterances") or []),
                confidence=payload.get("confidence"),
            )
        if status == "error":
            return TranscriptionStatus(status=STATUS_ERROR, error=payload.get("error", "Unknown error"))
        return TranscriptionStatus(status=STATUS_PENDING)

    def _request(self, method: str, path: str, action: str, **kwargs) -> Dict:
        try:
            response = self.session.request(
                method,
                f"{self.base_url}{path}",
                timeout=self.config.request_timeout_seconds,
                **kwargs
            )
        except requests.exceptions.RequestException as e:
            raise TranscriptionServiceError(f"{action} failed: {e}") from e

        if not response.ok:
            logger.error(f"AssemblyAI {action.lower()} error: {response.status_code} - {response.text}")
            raise TranscriptionServiceError(
                f"{action} failed: {response.status_code} {response.reason}",
                status_code=response.status_code
            )
        return response.json()

    def _to_utterance(self, item: Dict) -> Utterance:
        words = item.get("words")
        word_confidences: Optional[tuple] = None
        if words is not None:
            word_confidences = tuple(word.get("confidence") or 0.0 for word in words)
        return Utterance(
            speaker_id=str(item.get("speaker", "")),
            text=item.get("text", ""),
            word_confidences=word_confidences,
            confidence=item.get("confidence"),
        )
