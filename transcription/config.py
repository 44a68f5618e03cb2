"""
Transcription Configuration Module
Speech-to-text provider settings loaded from the environment.
"""

import os
from dataclasses import dataclass
from typing import Optional

PROVIDER_ASSEMBLYAI = "assemblyai"
PROVIDER_AWS = "aws"


@dataclass
class TranscriptionConfig:
    """Transcription settings with environment-based overrides."""

    provider: str = PROVIDER_ASSEMBLYAI

    # Polling
    poll_interval_seconds: float = 3.0
    max_poll_attempts: int = 60
    request_timeout_seconds: float = 30.0

    # Quality warnings
    low_confidence_threshold: float = 0.85
    low_word_confidence_threshold: float = 0.7

    # AssemblyAI settings
    assemblyai_api_key: Optional[str] = None
    assemblyai_base_url: str = "https://api.assemblyai.com/v2"

    # AWS Transcribe settings
    language_code: str = "en-US"
    region: str = "us-east-1"
    s3_bucket: str = ""
    s3_audio_prefix: str = "call_recordings/"
    s3_transcripts_prefix: str = "call_transcripts/"
    media_format: str = "wav"

    @classmethod
    def from_environment(cls) -> "TranscriptionConfig":
        """Load configuration from environment variables."""
        return cls(
            provider=os.getenv("TRANSCRIPTION_PROVIDER", PROVIDER_ASSEMBLYAI).lower(),
            poll_interval_seconds=float(os.getenv("TRANSCRIPTION_POLL_INTERVAL", "3.0")),
            max_poll_attempts=int(os.getenv("TRANSCRIPTION_MAX_ATTEMPTS", "60")),
            request_timeout_seconds=float(os.getenv("TRANSCRIPTION_REQUEST_TIMEOUT", "30.0")),
            low_confidence_threshold=float(os.getenv("LOW_CONFIDENCE_THRESHOLD", "0.85")),
            low_word_confidence_threshold=float(os.getenv("LOW_WORD_CONFIDENCE_THRESHOLD", "0.7")),
            assemblyai_api_key=os.getenv("ASSEMBLYAI_API_KEY"),
            assemblyai_base_url=os.getenv("ASSEMBLYAI_BASE_URL", "https://api.assemblyai.com/v2"),
            language_code=os.getenv("TRANSCRIPTION_LANGUAGE", "en-US"),
            region=os.getenv("AWS_REGION", "us-east-1"),
            s3_bucket=os.getenv("AWS_S3_BUCKET", ""),
            s3_audio_prefix=os.getenv("AWS_S3_AUDIO_PREFIX", "call_recordings/"),
            s3_transcripts_prefix=os.getenv("AWS_S3_TRANSCRIPTS_PREFIX", "call_transcripts/"),
            media_format=os.getenv("TRANSCRIPTION_MEDIA_FORMAT", "wav"),
        )

    def is_assemblyai_available(self) -> bool:
        return bool(self.assemblyai_api_key)

    def is_aws_available(self) -> bool:
        return bool(self.s3_bucket)


# Global configuration instance
_config: Optional[TranscriptionConfig] = None


def get_transcription_config() -> TranscriptionConfig:
    """Get the global transcription configuration instance."""
    global _config
    if _config is None:
        _config = TranscriptionConfig.from_environment()
    return _config


def reload_config() -> TranscriptionConfig:
    """Reload configuration from environment."""
    global _config
    _config = TranscriptionConfig.from_environment()
    return _config
