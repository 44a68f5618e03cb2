"""
AWS Transcribe Client

Uploads call audio to S3, starts an Amazon Transcribe job with speaker
diarization and reads the finished transcript back from S3.
"""

import json
import logging
import uuid
from typing import Dict, List, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from errors import TranscriptionServiceError
from models import Utterance

from .base import STATUS_COMPLETED, STATUS_ERROR, STATUS_PENDING, TranscriptionService, TranscriptionStatus
from .config import TranscriptionConfig, get_transcription_config

logger = logging.getLogger(__name__)


class AWSTranscribeTranscriber(TranscriptionService):
    """
    Amazon Transcribe backend.

    Job output is written to the configured bucket under the transcripts
    prefix, keyed by job name, so `poll` can find it without the presigned
    TranscriptFileUri.
    """

    name = "aws"

    def __init__(self, config: TranscriptionConfig = None, s3_client=None, transcribe_client=None):
        self.config = config or get_transcription_config()
        if not self.config.s3_bucket:
            raise TranscriptionServiceError("S3 bucket not configured. Set AWS_S3_BUCKET")

        client_config = Config(
            retries={'max_attempts': 3, 'mode': 'adaptive'},
            connect_timeout=5,
            read_timeout=30
        )
        self.s3 = s3_client or boto3.client('s3', region_name=self.config.region, config=client_config)
        self.transcribe = transcribe_client or boto3.client(
            'transcribe', region_name=self.config.region, config=client_config
        )

    def submit(self, audio_bytes: bytes) -> str:
        """Upload audio to S3 and start a diarized transcription job."""
        call_id = uuid.uuid4().hex
        audio_key = f"{self.config.s3_audio_prefix}{call_id}.{self.config.media_format}"
        job_name = f"CallScorer_{call_id}"

        try:
            self.s3.put_object(Bucket=self.config.s3_bucket, Key=audio_key, Body=audio_bytes)
            self.transcribe.start_transcription_job(
                TranscriptionJobName=job_name,
                Media={'MediaFileUri': f"s3://{self.config.s3_bucket}/{audio_key}"},
                MediaFormat=self.config.media_format,
                LanguageCode=self.config.language_code,
                Settings={
                    'ShowSpeakerLabels': True,
                    'MaxSpeakerLabels': 2,  # Agent and Customer
                    'ShowAlternatives': False
                },
                OutputBucketName=self.config.s3_bucket,
                OutputKey=self._output_key(job_name)
            )
        except (ClientError, BotoCoreError) as e:
            raise TranscriptionServiceError(f"Failed to start transcription job: {e}") from e

        logger.info(f"Started transcription job: {job_name}")
        return job_name

    def poll(self, job_id: str) -> TranscriptionStatus:
        try:
            response = self.transcribe.get_transcription_job(TranscriptionJobName=job_id)
        except (ClientError, BotoCoreError) as e:
            raise TranscriptionServiceError(f"Polling failed: {e}") from e

        job = response['TranscriptionJob']
        status = job['TranscriptionJobStatus']
        logger.debug(f"Transcription {job_id} status: {status}")

        if status == 'COMPLETED':
            return parse_transcribe_output(self._load_output(job_id))
        if status == 'FAILED':
            return TranscriptionStatus(status=STATUS_ERROR, error=job.get('FailureReason', 'Unknown error'))
        return TranscriptionStatus(status=STATUS_PENDING)

    def _output_key(self, job_name: str) -> str:
        return f"{self.config.s3_transcripts_prefix}{job_name}.json"

    def _load_output(self, job_name: str) -> Dict:
        try:
            response = self.s3.get_object(Bucket=self.config.s3_bucket, Key=self._output_key(job_name))
        except (ClientError, BotoCoreError) as e:
            raise TranscriptionServiceError(f"Could not read transcript for {job_name}: {e}") from e
        return json.loads(response['Body'].read().decode('utf-8'))


def parse_transcribe_output(data: Dict) -> TranscriptionStatus:
    """
    Convert Amazon Transcribe result JSON into a completed status.

    Consecutive words from the same speaker are merged into one utterance;
    punctuation attaches to the preceding word.
    """
    results = data.get('results', {})
    transcripts = results.get('transcripts') or [{}]
    text = transcripts[0].get('transcript', '')
    segment_speakers = _segment_speakers(results)

    utterances: List[Dict] = []
    all_confidences: List[float] = []

    for item in results.get('items', []):
        alternative = (item.get('alternatives') or [{}])[0]
        content = alternative.get('content', '')

        if item.get('type') == 'punctuation':
            if utterances:
                utterances[-1]['text'] += content
            continue

        speaker = item.get('speaker_label') or segment_speakers.get(item.get('start_time'), 'spk_0')
        confidence = float(alternative.get('confidence', 0) or 0)
        all_confidences.append(confidence)

        if not utterances or utterances[-1]['speaker'] != speaker:
            utterances.append({'speaker': speaker, 'text': content, 'confidences': [confidence]})
        else:
            utterances[-1]['text'] += f" {content}"
            utterances[-1]['confidences'].append(confidence)

    return TranscriptionStatus(
        status=STATUS_COMPLETED,
        text=text,
        utterances=tuple(
            Utterance(
                speaker_id=item['speaker'],
                text=item['text'],
                word_confidences=tuple(item['confidences']),
                confidence=_mean(item['confidences']),
            )
            for item in utterances
        ),
        confidence=_mean(all_confidences),
    )


def _segment_speakers(results: Dict) -> Dict[str, str]:
    """Map word start times to speakers for output that only labels segments."""
    speakers = {}
    for segment in results.get('speaker_labels', {}).get('segments', []):
        for item in segment.get('items', []):
            speakers[item.get('start_time')] = item.get('speaker_label', segment.get('speaker_label'))
    return speakers


def _mean(values: List[float]) -> Optional[float]:
    if not values:
        return None
    return sum(values) / len(values)
