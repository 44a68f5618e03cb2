"""
Transcription Services for the Call Scorer

Speech-to-text backends that turn call audio into a role-labeled transcript.

Environment Variables:
- TRANSCRIPTION_PROVIDER: 'assemblyai' (default) or 'aws'
- ASSEMBLYAI_API_KEY: API key for AssemblyAI
- TRANSCRIPTION_POLL_INTERVAL: Seconds between status polls (default: 3)
- TRANSCRIPTION_MAX_ATTEMPTS: Polls before giving up (default: 60)
- AWS_REGION / AWS_S3_BUCKET: Region and bucket for AWS Transcribe
"""

from errors import TranscriptionServiceError

from .assemblyai import AssemblyAITranscriber
from .aws_transcribe import AWSTranscribeTranscriber, parse_transcribe_output
from .base import TranscriptionService, TranscriptionStatus
from .config import (
    PROVIDER_ASSEMBLYAI,
    PROVIDER_AWS,
    TranscriptionConfig,
    get_transcription_config,
    reload_config,
)
from .polling import poll_until_complete, transcribe_audio, transcript_from_status


def get_transcriber(config: TranscriptionConfig = None) -> TranscriptionService:
    """Create the transcription backend selected by TRANSCRIPTION_PROVIDER."""
    config = config or get_transcription_config()
    if config.provider == PROVIDER_ASSEMBLYAI:
        return AssemblyAITranscriber(config)
    if config.provider == PROVIDER_AWS:
        return AWSTranscribeTranscriber(config)
    raise TranscriptionServiceError(f"Unknown transcription provider: {config.provider}")


__all__ = [
    'TranscriptionService',
    'TranscriptionStatus',
    'TranscriptionConfig',
    'AssemblyAITranscriber',
    'AWSTranscribeTranscriber',
    'get_transcriber',
    'get_transcription_config',
    'reload_config',
    'parse_transcribe_output',
    'poll_until_complete',
    'transcribe_audio',
    'transcript_from_status'
]
