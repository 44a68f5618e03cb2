"""
Feedback Templates
Tiered wording per criterion category and the checklist annotations
appended to it.
"""

from typing import Dict, List, Optional

from config import (
    CATEGORY_CLOSURE,
    CATEGORY_EMPATHY,
    CATEGORY_GENERIC,
    CATEGORY_OPENING,
    CATEGORY_PROBLEM_RESOLUTION,
    FEEDBACK_TIERS,
)

TIER_EXCELLENT = "excellent"
TIER_GOOD = "good"
TIER_BASIC = "basic"

FEEDBACK_TEMPLATES: Dict[str, Dict[str, str]] = {
    CATEGORY_OPENING: {
        TIER_EXCELLENT: "Excellent professional greeting with most required elements present.",
        TIER_GOOD: "Good greeting with some professional elements, but could be enhanced.",
        TIER_BASIC: "Basic greeting present but missing several professional elements."
    },
    CATEGORY_PROBLEM_RESOLUTION: {
        TIER_EXCELLENT: "Excellent problem-solving approach with comprehensive customer support.",
        TIER_GOOD: "Good problem-solving skills demonstrated with room for improvement.",
        TIER_BASIC: "Basic problem-solving approach - consider a more structured methodology."
    },
    CATEGORY_CLOSURE: {
        TIER_EXCELLENT: "Excellent call closure with proper wrap-up elements.",
        TIER_GOOD: "Good call closure with some professional elements present.",
        TIER_BASIC: "Basic call closure - consider adding a more complete wrap-up."
    },
    CATEGORY_EMPATHY: {
        TIER_EXCELLENT: "Excellent empathy and rapport building throughout the conversation.",
        TIER_GOOD: "Good empathy demonstrated with positive customer connection.",
        TIER_BASIC: "Basic empathy shown - consider a stronger emotional connection with the customer."
    },
    CATEGORY_GENERIC: {
        TIER_EXCELLENT: "Excellent performance in {name} with strong evidence of quality service.",
        TIER_GOOD: "Good performance in {name} with room for enhancement.",
        TIER_BASIC: "Basic performance in {name} - consider improvement strategies."
    }
}

NO_AGENT_GREETING_FEEDBACK = "No agent greeting detected in the conversation."


def select_tier(score: float, max_score: float) -> str:
    """Pick the wording tier for a score relative to its maximum."""
    ratio = score / max_score
    if ratio >= FEEDBACK_TIERS["excellent"]:
        return TIER_EXCELLENT
    if ratio >= FEEDBACK_TIERS["good"]:
        return TIER_GOOD
    return TIER_BASIC


def observed(behavior: str) -> str:
    return f"✓ {behavior}."


def suggest(improvement: str) -> str:
    return f"✗ {improvement}."


def checklist(condition: bool, behavior: str, improvement: Optional[str] = None) -> List[str]:
    """Annotation for a single check; no suggestion means nothing is added on a miss."""
    if condition:
        return [observed(behavior)]
    if improvement:
        return [suggest(improvement)]
    return []


def compose_feedback(category: str, tier: str, annotations: List[str], name: str = "") -> str:
    """Join the tier template and the checklist annotations into one string."""
    templates = FEEDBACK_TEMPLATES.get(category, FEEDBACK_TEMPLATES[CATEGORY_GENERIC])
    feedback = templates[tier].format(name=name.lower())
    for annotation in annotations:
        feedback += f" {annotation}"
    return feedback
