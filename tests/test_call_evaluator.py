"""
End-to-end scoring: aggregation, clamping, grades and rubric validation.
"""

import pytest

import call_evaluator
from errors import EmptyRubricError, InvalidRubricError, NoTranscriptError
from models import grade_for_percentage
from sample_transcripts import (
    ALL_TRANSCRIPTS,
    GOOD_CALL_TRANSCRIPT,
    POOR_CALL_TRANSCRIPT,
    SAMPLE_UTTERANCES,
    UNLABELED_TRANSCRIPT,
)


def test_good_call_scores_full_marks(evaluator, rubric):
    analysis = evaluator.score(GOOD_CALL_TRANSCRIPT, rubric)

    assert [result.criteria_id for result in analysis.scores] == ["greeting_script", "problem_solving", "closure"]
    assert [result.score for result in analysis.scores] == [25, 30, 15]
    assert analysis.total_score == 70
    assert analysis.max_possible_score == 70
    assert analysis.percentage == 100
    assert analysis.weighted_percentage == 100
    assert analysis.grade == "A"


def test_poor_call_scores_zero(evaluator, rubric):
    analysis = evaluator.score(POOR_CALL_TRANSCRIPT, rubric)

    assert [result.score for result in analysis.scores] == [0, 0, 0]
    assert analysis.percentage == 0
    assert analysis.grade == "F"


def test_transcript_without_agent_gets_floor_scores(evaluator, rubric):
    analysis = evaluator.score(UNLABELED_TRANSCRIPT, rubric)

    assert [result.score for result in analysis.scores] == [5, 3, 2]
    assert analysis.total_score == 10
    assert analysis.percentage == 14


def test_default_rubric_used_when_omitted(evaluator):
    analysis = evaluator.score(GOOD_CALL_TRANSCRIPT)

    assert analysis.max_possible_score == 70
    assert analysis.score_for("closure").score == 15
    assert analysis.score_for("missing") is None


def test_scores_are_clamped_to_max(evaluator, custom_rubric):
    analysis = evaluator.score(GOOD_CALL_TRANSCRIPT, custom_rubric)

    # the opening evaluator awards 25 on its fixed budget
    assert analysis.score_for("custom_greeting").score == 20


@pytest.mark.parametrize("name", sorted(ALL_TRANSCRIPTS))
@pytest.mark.parametrize("rubric_fixture", ["rubric", "custom_rubric"])
def test_aggregate_invariants(request, evaluator, name, rubric_fixture):
    rubric = request.getfixturevalue(rubric_fixture)
    analysis = evaluator.score(ALL_TRANSCRIPTS[name], rubric)

    assert len(analysis.scores) == len(rubric)
    for criterion, result in zip(rubric, analysis.scores):
        assert result.criteria_id == criterion.id
        assert 0 <= result.score <= criterion.max_score
        assert result.feedback
    assert analysis.total_score == sum(result.score for result in analysis.scores)
    assert analysis.max_possible_score == sum(criterion.max_score for criterion in rubric)
    assert 0 <= analysis.percentage <= 100
    assert abs(analysis.percentage - 100 * analysis.total_score / analysis.max_possible_score) <= 0.5
    assert analysis.grade == grade_for_percentage(analysis.percentage)


def test_scoring_is_deterministic(evaluator, custom_rubric):
    first = evaluator.score(GOOD_CALL_TRANSCRIPT, custom_rubric)
    second = evaluator.score(GOOD_CALL_TRANSCRIPT, custom_rubric)

    assert first.to_dict() == second.to_dict()


def test_percentage_rounds_half_up(evaluator, make_criterion):
    keywords = [f"kw{i}" for i in range(200)]
    criterion = make_criterion(max_score=200, keywords=keywords)

    analysis = evaluator.score("Agent: kw0", [criterion])

    assert analysis.total_score == 1
    assert analysis.percentage == 1


def test_weighted_percentage_uses_weights(evaluator, make_criterion):
    rubric = [
        make_criterion("heavy", max_score=10, weight=3, keywords=["alpha"]),
        make_criterion("light", max_score=30, weight=1, keywords=["zulu"]),
    ]

    analysis = evaluator.score("Agent: alpha", rubric)

    assert analysis.percentage == 25
    assert analysis.weighted_percentage == 75


def test_weighted_percentage_falls_back_without_weights(evaluator, make_criterion):
    rubric = [make_criterion(max_score=10, weight=0, keywords=["alpha", "beta"])]

    analysis = evaluator.score("Agent: alpha", rubric)

    assert analysis.weighted_percentage == analysis.percentage == 50


@pytest.mark.parametrize("text", ["", "   \n  "])
def test_empty_transcript_rejected(evaluator, text):
    with pytest.raises(NoTranscriptError):
        evaluator.score(text)


def test_empty_rubric_rejected(evaluator):
    with pytest.raises(EmptyRubricError):
        evaluator.score(GOOD_CALL_TRANSCRIPT, [])


def test_zero_point_rubric_rejected(evaluator, make_criterion):
    with pytest.raises(EmptyRubricError):
        evaluator.score(GOOD_CALL_TRANSCRIPT, [make_criterion(max_score=0)])


def test_zero_point_criterion_rejected(evaluator, make_criterion):
    rubric = [make_criterion("a", max_score=10), make_criterion("b", max_score=0)]

    with pytest.raises(InvalidRubricError):
        evaluator.score(GOOD_CALL_TRANSCRIPT, rubric)


def test_duplicate_ids_rejected(evaluator, make_criterion):
    rubric = [make_criterion("a", max_score=10), make_criterion("a", max_score=5)]

    with pytest.raises(InvalidRubricError):
        evaluator.score(GOOD_CALL_TRANSCRIPT, rubric)


def test_score_utterances_labels_roles_first(evaluator, rubric):
    analysis = evaluator.score_utterances(SAMPLE_UTTERANCES, rubric)

    assert analysis.transcript.startswith("Customer: Hi, I'm calling because my bill looks wrong.")
    assert "Agent: I'm sorry to hear that." in analysis.transcript


def test_score_utterances_requires_input(evaluator):
    with pytest.raises(NoTranscriptError):
        evaluator.score_utterances([])


def test_module_level_score():
    assert call_evaluator.score(GOOD_CALL_TRANSCRIPT).percentage == 100


def test_analysis_to_dict_uses_camel_case(evaluator):
    data = evaluator.score(GOOD_CALL_TRANSCRIPT).to_dict()

    assert data["totalScore"] == 70
    assert data["maxPossibleScore"] == 70
    assert data["grade"] == "A"
    assert data["scores"][0]["criteriaId"] == "greeting_script"


@pytest.mark.parametrize("percentage, grade", [
    (100, "A"), (90, "A"), (89, "B"), (80, "B"), (70, "C"), (60, "D"), (59, "F"), (0, "F"),
])
def test_grade_boundaries(percentage, grade):
    assert grade_for_percentage(percentage) == grade


@pytest.mark.parametrize("max_score", [float("nan"), float("inf")])
def test_non_finite_max_score_rejected(evaluator, make_criterion, max_score):
    rubric = [make_criterion("a", max_score=10), make_criterion("b", max_score=max_score, keywords=["hi"])]

    with pytest.raises(InvalidRubricError):
        evaluator.score(GOOD_CALL_TRANSCRIPT, rubric)


def test_non_finite_weight_rejected(evaluator, make_criterion):
    with pytest.raises(InvalidRubricError):
        evaluator.score(GOOD_CALL_TRANSCRIPT, [make_criterion(max_score=10, weight=float("inf"))])
