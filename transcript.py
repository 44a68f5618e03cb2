"""
Role-Labeled Transcript
Holds transcript lines with their speaker role as a typed field and converts
to and from the "Agent: ... / Customer: ..." text form used for storage and
display.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from config import ROLE_AGENT, ROLE_CUSTOMER, ROLE_LABELS


@dataclass(frozen=True)
class LabeledUtterance:
    """An utterance whose speaker role has been resolved."""
    role: str
    text: str

    def to_line(self) -> str:
        return f"{ROLE_LABELS[self.role]}: {self.text}"


@dataclass(frozen=True)
class TranscriptLine:
    """A single line of transcript text; role is None for unlabeled lines."""
    role: Optional[str]
    text: str


class Transcript:
    """
    Parsed view of a canonical transcript.

    Only lines that start with a role prefix count as agent or customer
    speech; continuation and blank lines are kept in the full text but
    carry no role.
    """

    def __init__(self, text: str, lines: Sequence[TranscriptLine]):
        self.text = text
        self.lines = tuple(lines)
        self.lower = text.lower()
        self.agent_lines = [line.text for line in self.lines if line.role == ROLE_AGENT]
        self.customer_lines = [line.text for line in self.lines if line.role == ROLE_CUSTOMER]

    @classmethod
    def from_text(cls, text: str) -> "Transcript":
        return cls(text, [_parse_line(raw) for raw in text.split("\n")])

    @classmethod
    def from_utterances(cls, utterances: Sequence[LabeledUtterance]) -> "Transcript":
        return cls.from_text(format_transcript(utterances))

    @property
    def has_agent(self) -> bool:
        return bool(self.agent_lines)

    def tail(self, chars: int) -> str:
        """Return the last `chars` characters of the transcript, lower-cased."""
        return self.lower[max(0, len(self.lower) - chars):]


def format_transcript(utterances: Sequence[LabeledUtterance]) -> str:
    """Render labeled utterances as prefixed lines separated by a blank line."""
    return "\n\n".join(utterance.to_line() for utterance in utterances)


def _parse_line(raw: str) -> TranscriptLine:
    stripped = raw.strip()
    for role, label in ROLE_LABELS.items():
        prefix = f"{label}:"
        if stripped.startswith(prefix):
            return TranscriptLine(role=role, text=stripped[len(prefix):].strip())
    return TranscriptLine(role=None, text=stripped)
