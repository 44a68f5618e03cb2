"""
Speaker Role Classifier
Decides which diarized speaker is the support agent and which is the customer.
"""

import logging
from typing import Dict, List, Sequence

from config import (
    AGENT_PROFESSIONAL_TERMS,
    COMPANY_INDICATORS,
    ROLE_AGENT,
    ROLE_CUSTOMER,
    SPEAKER_GREETING_WORDS,
    SPEAKER_SCORE_WEIGHTS,
    VERBOSE_WORDS_PER_UTTERANCE,
)
from models import SpeakerProfile, Utterance
from transcript import LabeledUtterance, format_transcript

logger = logging.getLogger(__name__)


class SpeakerRoleClassifier:
    """
    Scores every diarized speaker on agent-like signals (greetings, company
    references, service phrasing, verbosity, opening the call) and labels the
    highest scorer as the agent.

    Speakers are compared in order of first appearance and only a strictly
    higher score replaces the current best, so a tie goes to the speaker who
    spoke first.
    """

    def __init__(self):
        self.greeting_words = SPEAKER_GREETING_WORDS
        self.company_indicators = COMPANY_INDICATORS
        self.professional_terms = AGENT_PROFESSIONAL_TERMS
        self.weights = SPEAKER_SCORE_WEIGHTS

    def classify(self, utterances: Sequence[Utterance]) -> Dict[str, str]:
        """
        Assign a role to every speaker id.

        Args:
            utterances: Diarized utterances in spoken order

        Returns:
            Mapping of speaker id to "agent" or "customer"; empty when there
            are no utterances
        """
        if not utterances:
            return {}

        profiles = self.build_profiles(utterances)
        first_speaker = utterances[0].speaker_id

        agent_speaker = None
        best_score = -1
        for profile in profiles.values():
            score = self.agent_score(profile, first_speaker)
            logger.debug(
                f"Speaker {profile.speaker_id}: score={score} words={profile.word_count} "
                f"utterances={profile.utterance_count} "
                f"avg_words={profile.avg_words_per_utterance:.1f} "
                f"confidence={profile.avg_confidence * 100:.1f}%"
            )
            if score > best_score:
                best_score = score
                agent_speaker = profile.speaker_id

        logger.info(f"Identified agent: speaker {agent_speaker} (score {best_score})")

        return {
            speaker_id: ROLE_AGENT if speaker_id == agent_speaker else ROLE_CUSTOMER
            for speaker_id in profiles
        }

    def build_profiles(self, utterances: Sequence[Utterance]) -> Dict[str, SpeakerProfile]:
        """Accumulate one profile per speaker, keyed in first-appearance order."""
        profiles: Dict[str, SpeakerProfile] = {}

        for index, utterance in enumerate(utterances):
            profile = profiles.get(utterance.speaker_id)
            if profile is None:
                profile = SpeakerProfile(speaker_id=utterance.speaker_id, first_seen=index)
                profiles[utterance.speaker_id] = profile

            text = utterance.text.lower()
            profile.word_count += utterance.word_count
            profile.utterance_count += 1

            if utterance.confidence is not None:
                profile.total_confidence += utterance.confidence
                profile.confidence_count += 1

            if any(word in text for word in self.greeting_words):
                profile.has_greeting = True
            if any(word in text for word in self.company_indicators):
                profile.has_company_name = True
            if any(phrase in text for phrase in self.professional_terms):
                profile.has_professional_terms = True

        return profiles

    def agent_score(self, profile: SpeakerProfile, first_speaker: str) -> int:
        """Agent-likelihood score for a single speaker."""
        score = 0
        if profile.has_greeting:
            score += self.weights["greeting"]
        if profile.has_company_name:
            score += self.weights["company_name"]
        if profile.has_professional_terms:
            score += self.weights["professional_terms"]
        if profile.avg_words_per_utterance > VERBOSE_WORDS_PER_UTTERANCE:
            score += self.weights["verbose"]
        if profile.speaker_id == first_speaker:
            score += self.weights["first_speaker"]
        return score

    def label(self, utterances: Sequence[Utterance]) -> List[LabeledUtterance]:
        """Attach the resolved role to each utterance, keeping the original order."""
        roles = self.classify(utterances)
        return [
            LabeledUtterance(role=roles[utterance.speaker_id], text=utterance.text)
            for utterance in utterances
        ]

    def format(self, utterances: Sequence[Utterance]) -> str:
        """Produce the canonical "Agent:/Customer:" transcript text."""
        return format_transcript(self.label(utterances))
