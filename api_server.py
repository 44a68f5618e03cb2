"""
API Server for the Call Scorer
Flask endpoints for scoring transcripts, labeling diarized utterances and
transcribing call recordings.
"""

import logging
import os

from dotenv import load_dotenv
from flask import Flask, jsonify, request

from call_evaluator import CallEvaluator, default_rubric
from errors import (
    EmptyRubricError,
    InvalidRubricError,
    NoTranscriptError,
    TranscriptionServiceError,
    TranscriptionTimeoutError,
)
from models import Utterance, criteria_from_dicts
from rubric_loader import validate_rubric
from speaker_roles import SpeakerRoleClassifier
from transcription import get_transcriber, transcribe_audio

load_dotenv()

logger = logging.getLogger(__name__)


def create_app(transcriber_factory=get_transcriber) -> Flask:
    """
    Build the Flask app.

    Args:
        transcriber_factory: Callable returning a TranscriptionService;
            called per transcription request
    """
    app = Flask(__name__)
    evaluator = CallEvaluator()
    classifier = SpeakerRoleClassifier()

    @app.errorhandler(NoTranscriptError)
    @app.errorhandler(EmptyRubricError)
    @app.errorhandler(InvalidRubricError)
    def handle_bad_input(error):
        return jsonify({'error': str(error), 'type': type(error).__name__}), 400

    @app.errorhandler(TranscriptionServiceError)
    def handle_service_error(error):
        logger.error(f"Transcription service error: {error}")
        return jsonify({'error': str(error), 'type': type(error).__name__}), 502

    @app.errorhandler(TranscriptionTimeoutError)
    def handle_timeout(error):
        logger.error(f"Transcription timed out: {error}")
        return jsonify({'error': str(error), 'type': type(error).__name__}), 504

    @app.route('/api/health')
    def api_health():
        return jsonify({'status': 'ok'})

    @app.route('/api/rubric/default')
    def api_default_rubric():
        """Default three-criterion rubric."""
        return jsonify([criterion.to_dict() for criterion in default_rubric()])

    @app.route('/api/score', methods=['POST'])
    def api_score():
        """Score a role-labeled transcript against the supplied or default rubric."""
        payload = _json_body()
        rubric = _rubric_from_payload(payload)
        transcript = payload.get('transcript', '')
        if not isinstance(transcript, str):
            raise NoTranscriptError("'transcript' must be a string")
        analysis = evaluator.score(transcript, rubric)
        return jsonify(analysis.to_dict())

    @app.route('/api/classify', methods=['POST'])
    def api_classify():
        """Resolve agent/customer roles for diarized utterances."""
        payload = _json_body()
        try:
            utterances = _utterances_from_payload(payload)
        except ValueError as e:
            return jsonify({'error': str(e)}), 400
        return jsonify({
            'roles': classifier.classify(utterances),
            'transcript': classifier.format(utterances)
        })

    @app.route('/api/transcribe', methods=['POST'])
    def api_transcribe():
        """Transcribe an uploaded recording and score it with the default rubric."""
        upload = request.files.get('audio')
        if upload is None:
            return jsonify({'error': "No audio file uploaded (field 'audio')"}), 400

        transcript = transcribe_audio(transcriber_factory(), upload.read())
        analysis = evaluator.score(transcript)
        return jsonify({'transcript': transcript, 'analysis': analysis.to_dict()})

    return app


def _json_body():
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def _rubric_from_payload(payload):
    items = payload.get('rubric')
    if items is None:
        return None
    if not isinstance(items, list):
        raise InvalidRubricError("'rubric' must be a list of criteria")
    if not items:
        raise EmptyRubricError("Rubric has no criteria")
    if not all(isinstance(item, dict) for item in items):
        raise InvalidRubricError("Every rubric criterion must be an object")
    return validate_rubric(criteria_from_dicts(items))


def _utterances_from_payload(payload):
    items = payload.get('utterances') or []
    if not items:
        raise NoTranscriptError("No utterances to classify")
    if not isinstance(items, list):
        raise ValueError("'utterances' must be a list")

    utterances = []
    for item in items:
        if not isinstance(item, dict):
            raise ValueError("Every utterance must be an object")
        speaker = str(item.get('speaker') or item.get('speaker_id') or '')
        if not speaker:
            raise ValueError("Every utterance needs a speaker label")
        text = item.get('text', '')
        if not isinstance(text, str):
            raise ValueError(f"Utterance text for speaker {speaker} must be a string")
        confidence = item.get('confidence')
        if confidence is not None and not _is_number(confidence):
            raise ValueError(f"Utterance confidence for speaker {speaker} must be a number")

        words = item.get('words')
        word_confidences = None
        if words is not None:
            if not isinstance(words, list) or not all(isinstance(w, dict) for w in words):
                raise ValueError(f"Utterance words for speaker {speaker} must be a list of objects")
            word_confidences = tuple(
                w['confidence'] if _is_number(w.get('confidence')) else 0.0 for w in words
            )

        utterances.append(Utterance(
            speaker_id=speaker,
            text=text,
            word_confidences=word_confidences,
            confidence=confidence
        ))
    return utterances


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    port = int(os.getenv('PORT', '5000'))
    print("\n" + "=" * 50)
    print("  Call Scorer API")
    print(f"  Listening on http://localhost:{port}")
    print("=" * 50 + "\n")
    create_app().run(debug=os.getenv('FLASK_DEBUG', 'false').lower() == 'true', port=port)
