"""
Data Model
Records exchanged between the transcription clients, the speaker
classifier, the criterion evaluators and the call evaluator.
"""

import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from config import FAILING_GRADE, GRADE_THRESHOLDS
from errors import InvalidRubricError


@dataclass(frozen=True)
class Utterance:
    """One contiguous span of speech attributed to a single diarized speaker."""
    speaker_id: str
    text: str
    word_confidences: Optional[Tuple[float, ...]] = None
    confidence: Optional[float] = None

    @property
    def word_count(self) -> int:
        if self.word_confidences is not None:
            return len(self.word_confidences)
        return len(self.text.split())


@dataclass
class SpeakerProfile:
    """Per-speaker signals gathered during a single classification pass."""
    speaker_id: str
    first_seen: int
    word_count: int = 0
    utterance_count: int = 0
    has_greeting: bool = False
    has_company_name: bool = False
    has_professional_terms: bool = False
    total_confidence: float = 0.0
    confidence_count: int = 0

    @property
    def avg_confidence(self) -> float:
        if not self.confidence_count:
            return 0.0
        return self.total_confidence / self.confidence_count

    @property
    def avg_words_per_utterance(self) -> float:
        if not self.utterance_count:
            return 0.0
        return self.word_count / self.utterance_count


@dataclass(frozen=True)
class EvaluationCriterion:
    """A single rubric line item."""
    id: str
    name: str
    description: str
    max_score: float
    weight: float
    keywords: Tuple[str, ...] = ()
    required_keywords: Tuple[str, ...] = ()
    category: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "EvaluationCriterion":
        """Build a criterion from a dict using snake_case or camelCase keys."""
        if not data.get("id"):
            raise InvalidRubricError(f"Criterion is missing an id: {data!r}")
        max_score = _as_number(data.get("max_score", data.get("maxScore")), "max score", data["id"])
        if data.get("weight") is None:
            weight = max_score / 10
        else:
            weight = _as_number(data["weight"], "weight", data["id"])
        required = data.get("required_keywords", data.get("requiredKeywords"))
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or data["id"]),
            description=str(data.get("description") or ""),
            max_score=max_score,
            weight=weight,
            keywords=split_keywords(data.get("keywords")),
            required_keywords=split_keywords(required),
            category=data.get("category"),
        )

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "maxScore": self.max_score,
            "weight": self.weight,
            "keywords": list(self.keywords),
            "requiredKeywords": list(self.required_keywords),
            "category": self.category,
        }


@dataclass(frozen=True)
class ScoreResult:
    """Score and feedback for one criterion."""
    criteria_id: str
    score: float
    feedback: str

    def to_dict(self) -> Dict:
        return {
            "criteriaId": self.criteria_id,
            "score": self.score,
            "feedback": self.feedback,
        }


@dataclass(frozen=True)
class CallAnalysis:
    """Complete result of scoring one transcript against one rubric."""
    transcript: str
    scores: Tuple[ScoreResult, ...]
    total_score: float
    max_possible_score: float
    percentage: int
    weighted_percentage: int = 0

    @property
    def grade(self) -> str:
        return grade_for_percentage(self.percentage)

    def score_for(self, criteria_id: str) -> Optional[ScoreResult]:
        for result in self.scores:
            if result.criteria_id == criteria_id:
                return result
        return None

    def to_dict(self) -> Dict:
        return {
            "transcript": self.transcript,
            "scores": [result.to_dict() for result in self.scores],
            "totalScore": self.total_score,
            "maxPossibleScore": self.max_possible_score,
            "percentage": self.percentage,
            "weightedPercentage": self.weighted_percentage,
            "grade": self.grade,
        }


def grade_for_percentage(percentage: float) -> str:
    """Map a percentage to a letter grade."""
    for threshold, grade in GRADE_THRESHOLDS:
        if percentage >= threshold:
            return grade
    return FAILING_GRADE


def criteria_from_dicts(items: List[Dict]) -> List[EvaluationCriterion]:
    return [EvaluationCriterion.from_dict(item) for item in items]


def _as_number(value, label: str, criterion_id: str) -> float:
    if isinstance(value, bool) or value is None:
        raise InvalidRubricError(f"Criterion '{criterion_id}' has no valid {label}")
    if isinstance(value, (int, float)):
        number = value
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            raise InvalidRubricError(f"Criterion '{criterion_id}' has a non-numeric {label}: {value!r}")
        if math.isfinite(number) and number.is_integer():
            number = int(number)
    if isinstance(number, float) and not math.isfinite(number):
        raise InvalidRubricError(f"Criterion '{criterion_id}' has a non-finite {label}: {value!r}")
    return number


def split_keywords(value) -> Tuple[str, ...]:
    """Normalize a keyword list or a comma/semicolon separated cell into a tuple."""
    if not value:
        return ()
    if isinstance(value, str):
        value = value.replace(";", ",").split(",")
    elif not isinstance(value, (list, tuple)):
        value = (value,)
    return tuple(str(keyword).strip() for keyword in value if str(keyword).strip())
