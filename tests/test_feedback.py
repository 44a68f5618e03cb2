"""
Feedback tiers, templates and checklist annotations.
"""

import pytest

from criteria import generate_feedback
from feedback import (
    NO_AGENT_GREETING_FEEDBACK,
    checklist,
    compose_feedback,
    select_tier,
)
from sample_transcripts import GOOD_CALL_TRANSCRIPT, POOR_CALL_TRANSCRIPT, UNLABELED_TRANSCRIPT
from transcript import Transcript


@pytest.mark.parametrize("score, max_score, tier", [
    (10, 10, "excellent"),
    (8, 10, "excellent"),
    (6, 10, "good"),
    (5.9, 10, "basic"),
    (0, 10, "basic"),
])
def test_select_tier(score, max_score, tier):
    assert select_tier(score, max_score) == tier


def test_checklist_without_suggestion_adds_nothing_on_miss():
    assert checklist(True, "Did it") == ["✓ Did it."]
    assert checklist(False, "Did it") == []
    assert checklist(False, "Did it", "Do it") == ["✗ Do it."]


def test_compose_feedback_appends_annotations():
    feedback = compose_feedback("closure", "good", ["✓ Thanked customer."])

    assert feedback == "Good call closure with some professional elements present. ✓ Thanked customer."


def test_opening_feedback_for_good_call(make_criterion):
    transcript = Transcript.from_text(GOOD_CALL_TRANSCRIPT)
    feedback = generate_feedback(transcript, 25, make_criterion("greeting_script", max_score=25))

    assert feedback.startswith("Excellent professional greeting with most required elements present.")
    assert "✓ Thanked customer for calling." in feedback
    assert "✓ Introduced themselves." in feedback
    assert "✓ Offered assistance." in feedback


def test_opening_feedback_suggests_missing_elements(make_criterion):
    transcript = Transcript.from_text(POOR_CALL_TRANSCRIPT)
    feedback = generate_feedback(transcript, 0, make_criterion("greeting_script", max_score=25))

    assert feedback.startswith("Basic greeting present but missing several professional elements.")
    assert "✗ Consider adding 'thank you for calling'." in feedback
    assert "✗ Introduce yourself by name." in feedback


def test_opening_feedback_without_agent(make_criterion):
    transcript = Transcript.from_text(UNLABELED_TRANSCRIPT)
    feedback = generate_feedback(transcript, 5, make_criterion("greeting_script", max_score=25))

    assert feedback == NO_AGENT_GREETING_FEEDBACK


def test_problem_resolution_feedback(make_criterion):
    transcript = Transcript.from_text(GOOD_CALL_TRANSCRIPT)
    feedback = generate_feedback(transcript, 30, make_criterion("problem_solving", max_score=30))

    assert feedback.startswith("Excellent problem-solving approach")
    assert "✓ Showed empathy." in feedback
    assert "✓ Asked diagnostic questions." in feedback
    assert "✓ Provided solutions." in feedback
    assert "✓ Confirmed the issue was resolved." in feedback


def test_closure_feedback_omits_unmet_sign_off(make_criterion):
    transcript = Transcript.from_text(POOR_CALL_TRANSCRIPT)
    feedback = generate_feedback(transcript, 0, make_criterion("closure", max_score=15))

    assert "✗ Ask whether there is anything else you can help with." in feedback
    assert "sign-off" not in feedback


def test_empathy_feedback_counts_lines(make_criterion):
    several = Transcript.from_text("Agent: Sorry.\nAgent: I understand.\nAgent: I apologize.")
    one = Transcript.from_text("Agent: Sorry about that.")
    criterion = make_criterion("custom_empathy", max_score=10)

    assert "✓ Multiple empathetic responses." in generate_feedback(several, 5, criterion)
    assert "✓ Some empathetic language used." in generate_feedback(one, 2, criterion)


def test_generic_feedback_uses_lowercased_name(make_criterion):
    transcript = Transcript.from_text("Agent: The warranty covers it.")
    criterion = make_criterion(max_score=10, keywords=["warranty", "receipt"], name="Product Knowledge")
    feedback = generate_feedback(transcript, 5, criterion)

    assert feedback.startswith("Basic performance in product knowledge - consider improvement strategies.")
    assert "✓ Mentioned: warranty." in feedback
    assert "✗ Not mentioned: receipt." in feedback


def test_missing_required_keyword_is_flagged(make_criterion):
    transcript = Transcript.from_text("Agent: Hello, my name is Ana.")
    criterion = make_criterion("custom_greeting", max_score=20, required_keywords=["thank you for calling"])
    feedback = generate_feedback(transcript, 10, criterion)

    assert "✗ Missing required phrase 'thank you for calling'." in feedback
