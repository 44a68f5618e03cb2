"""
Command-line entry point.
"""

import json

from main import create_bar, main
from sample_transcripts import GOOD_CALL_TRANSCRIPT


def test_demo_runs_all_samples(capsys):
    assert main(["--demo"]) == 0

    out = capsys.readouterr().out
    assert "good_call" in out
    assert "Total calls scored: 4" in out


def test_scores_transcript_file_as_report(tmp_path, capsys):
    path = tmp_path / "call.txt"
    path.write_text(GOOD_CALL_TRANSCRIPT, encoding="utf-8")

    assert main([str(path)]) == 0

    out = capsys.readouterr().out
    assert "OVERALL: 70/70 (100%) - Grade A" in out
    assert "Greeting & Opening" in out


def test_json_output_with_custom_rubric(tmp_path, capsys):
    transcript = tmp_path / "call.txt"
    transcript.write_text(GOOD_CALL_TRANSCRIPT, encoding="utf-8")
    rubric = tmp_path / "rubric.json"
    rubric.write_text(json.dumps([{"name": "Brand Mention", "max_score": 10, "keywords": ["northwind"]}]),
                      encoding="utf-8")

    assert main([str(transcript), "--rubric", str(rubric), "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["scores"][0]["criteriaId"] == "brand_mention"
    assert data["percentage"] == 100


def test_missing_transcript_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_empty_transcript_fails(tmp_path, capsys):
    path = tmp_path / "call.txt"
    path.write_text("  \n", encoding="utf-8")

    assert main([str(path)]) == 1
    assert "No transcript to analyze" in capsys.readouterr().err


def test_create_bar():
    assert create_bar(0.5, width=10) == "[#####-----]"
    assert create_bar(0) == "[" + "-" * 20 + "]"


def test_non_finite_rubric_reports_error(tmp_path, capsys):
    transcript = tmp_path / "call.txt"
    transcript.write_text(GOOD_CALL_TRANSCRIPT, encoding="utf-8")
    rubric = tmp_path / "rubric.json"
    rubric.write_text('[{"id": "x", "maxScore": Infinity}]', encoding="utf-8")

    assert main([str(transcript), "--rubric", str(rubric)]) == 1
    assert capsys.readouterr().err.startswith("Error:")
