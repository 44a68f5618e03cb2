"""
Call Scorer - Command Line
Scores a call transcript, a call recording or the bundled sample calls
against a rubric and prints a per-criterion report.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from call_evaluator import CallEvaluator, default_rubric
from errors import CallScorerError
from models import CallAnalysis, EvaluationCriterion
from rubric_loader import load_rubric
from sample_transcripts import ALL_TRANSCRIPTS
from transcription import get_transcriber, transcribe_audio

logger = logging.getLogger(__name__)


def run_demo(evaluator: CallEvaluator, rubric: List[EvaluationCriterion]) -> None:
    """Score every sample transcript and print a one-line summary per call."""
    print("\n" + "=" * 70)
    print("        CALL SCORER - SAMPLE CALLS")
    print("=" * 70)

    for call_type, transcript in ALL_TRANSCRIPTS.items():
        analysis = evaluator.score(transcript, rubric)
        print(f"  {call_type:20} | {analysis.total_score:>5}/{analysis.max_possible_score:<5} "
              f"| {analysis.percentage:3}% | Grade {analysis.grade}")

    print("-" * 70)
    print(f"  Total calls scored: {len(ALL_TRANSCRIPTS)}")


def generate_report(analysis: CallAnalysis, rubric: List[EvaluationCriterion]) -> str:
    """Generate a human-readable report from a call analysis."""
    names = {criterion.id: criterion for criterion in rubric}
    report = []

    report.append("=" * 60)
    report.append("           CALL EVALUATION REPORT")
    report.append("=" * 60)
    report.append(f"OVERALL: {analysis.total_score}/{analysis.max_possible_score} "
                  f"({analysis.percentage}%) - Grade {analysis.grade}")
    report.append(f"Weighted: {analysis.weighted_percentage}%")
    report.append("-" * 60)

    for result in analysis.scores:
        criterion = names[result.criteria_id]
        bar = create_bar(result.score / criterion.max_score)
        report.append(f"  {criterion.name:30} {bar} {result.score}/{criterion.max_score}")
        report.append(f"      {result.feedback}")

    report.append("=" * 60)
    return "\n".join(report)


def create_bar(ratio: float, width: int = 20) -> str:
    """Create a visual progress bar."""
    filled = int(ratio * width)
    return f"[{'#' * filled}{'-' * (width - filled)}]"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Score a support call against a rubric.")
    parser.add_argument("transcript", nargs="?", help="Transcript text file with Agent:/Customer: lines")
    parser.add_argument("--audio", help="Audio recording to transcribe and score")
    parser.add_argument("--rubric", help="Rubric file (.xlsx or .json); default rubric when omitted")
    parser.add_argument("--json", action="store_true", help="Print the analysis as JSON")
    parser.add_argument("--demo", action="store_true", help="Score the bundled sample calls")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    evaluator = CallEvaluator()

    try:
        rubric = load_rubric(args.rubric) if args.rubric else default_rubric()

        if args.demo or not (args.transcript or args.audio):
            run_demo(evaluator, rubric)
            return 0

        if args.audio:
            print(f"Transcribing: {args.audio}", file=sys.stderr)
            transcript = transcribe_audio(get_transcriber(), Path(args.audio).read_bytes())
        else:
            transcript = Path(args.transcript).read_text(encoding="utf-8")

        analysis = evaluator.score(transcript, rubric)
    except (CallScorerError, OSError) as e:
        logger.debug("Scoring failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(analysis.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(generate_report(analysis, rubric))
    return 0


if __name__ == "__main__":
    sys.exit(main())
