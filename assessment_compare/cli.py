"""Command-line interface for interview assessment parsing and comparison."""

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import AcquisitionSettings
from .exceptions import AssessmentParseError, ScoringError
from .models import CandidateResult, InterviewAssessment
from .parsing import CandidateCounter, acquire_text, parse_assessment_pdf
from .scoring import analyze_candidates, rank_candidates, score_assessment

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Only show warnings and errors unless --verbose is given."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format='%(message)s'
    )


def build_settings(args: argparse.Namespace) -> AcquisitionSettings:
    """Environment settings, with --max-pages taking precedence."""
    settings = AcquisitionSettings.from_env()
    if getattr(args, "max_pages", None):
        settings = settings.model_copy(update={"ocr_max_pages": args.max_pages})
    return settings


def load_assessment(
    path: Path, counter: CandidateCounter, settings: AcquisitionSettings
) -> InterviewAssessment:
    """Load an assessment from a saved JSON file or parse it from a PDF."""
    if path.suffix.lower() == ".json":
        return InterviewAssessment.model_validate(json.loads(path.read_text()))
    return parse_assessment_pdf(path, counter, settings)


def print_assessment(assessment: InterviewAssessment) -> None:
    print(f"\nCandidate: {assessment.candidate_name}")
    print(f"Job Title: {assessment.job_title}")
    if assessment.department:
        print(f"Department: {assessment.department}")
    if assessment.experience_level:
        print(f"Experience Level: {assessment.experience_level}")
    if assessment.required_skills:
        print(f"Required Skills: {', '.join(assessment.required_skills)}")
    print(f"Document average rating: {assessment.average_rating:.1f}/5.0")
    print(f"\nQuestions ({assessment.total_questions}):")

    for q in assessment.questions:
        print(f"\n  {q.id} [{q.category}] [{q.difficulty}] [{q.duration}min] {q.rating:g}/{q.max_rating}")
        print(f"  {q.question[:200]}{'...' if len(q.question) > 200 else ''}")
        if q.comments:
            print(f"  Comments: {q.comments}")

    breakdown = assessment.category_breakdown
    print(
        f"\nBreakdown: technical={breakdown.technical} behavioral={breakdown.behavioral} "
        f"situational={breakdown.situational} experience={breakdown.experience}"
    )


def print_scores(result: CandidateResult) -> None:
    scores = result.scores
    print(f"\n[{result.candidate_id}] {result.candidate_name}")
    print(f"  Overall Match: {scores.overall_match}%")
    print(
        f"  Technical {scores.technical_score} | Behavioral {scores.behavioral_score} | "
        f"Situational {scores.situational_score} | Experience {scores.experience_score} | "
        f"Consistency {scores.consistency_score}"
    )
    print(f"  {scores.summary}")
    for s in scores.strengths:
        print(f"  + {s}")
    for w in scores.weaknesses:
        print(f"  - {w}")


def cmd_text(args: argparse.Namespace) -> int:
    """Print the text acquired from a PDF."""
    settings = build_settings(args)
    try:
        text = acquire_text(args.pdf, settings)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        return 1
    print(text)
    print(f"\n{'='*60}")
    print(f"{len(text.strip())} characters")
    return 0


def cmd_parse(args: argparse.Namespace) -> int:
    """Parse an assessment PDF and save it as JSON."""
    settings = build_settings(args)
    counter = CandidateCounter(start=args.candidate_start)
    pdf_path = Path(args.pdf)

    print("=" * 60)
    print("Parsing Interview Assessment")
    print("=" * 60)
    print(f"Source: {pdf_path}")

    try:
        assessment = parse_assessment_pdf(pdf_path, counter, settings)
    except (AssessmentParseError, FileNotFoundError) as e:
        print(f"\nError: {e}")
        return 1

    print_assessment(assessment)

    output_dir = Path(args.output) if args.output else Path("output")
    output_dir.mkdir(parents=True, exist_ok=True)
    out_path = output_dir / f"{pdf_path.stem}_assessment.json"
    out_path.write_text(assessment.model_dump_json(indent=2))
    print(f"\nSaved assessment to {out_path}")
    return 0


def cmd_score(args: argparse.Namespace) -> int:
    """Score a saved assessment JSON file."""
    assessment_path = Path(args.assessment)
    try:
        assessment = InterviewAssessment.model_validate(json.loads(assessment_path.read_text()))
        scores = score_assessment(assessment)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    result = CandidateResult(
        candidate_id=args.candidate_id or assessment_path.stem,
        candidate_name=assessment.candidate_name,
        scores=scores,
    )

    print(f"{'='*60}")
    print("CANDIDATE SCORES")
    print("=" * 60)
    print_scores(result)

    output_dir = Path(args.output) if args.output else Path("output")
    output_dir.mkdir(parents=True, exist_ok=True)
    out_path = output_dir / f"scores_{result.candidate_id}.json"
    out_path.write_text(result.model_dump_json(indent=2))
    print(f"\nSaved scores to {out_path}")
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    """Parse or load several assessments and rank the candidates."""
    settings = build_settings(args)
    counter = CandidateCounter(start=args.candidate_start)

    candidates: list[tuple[str, InterviewAssessment]] = []
    for source in args.sources:
        path = Path(source)
        try:
            assessment = load_assessment(path, counter, settings)
        except (FileNotFoundError, ValueError) as e:
            print(f"Error: Could not read {path}:\n{e}")
            return 1
        candidates.append((path.stem, assessment))

    try:
        results = analyze_candidates(candidates)
    except (ValueError, ScoringError) as e:
        print(f"Error: {e}")
        return 1

    ranked = rank_candidates(results)

    print(f"{'='*60}")
    print("Candidate Ranking")
    print(f"{'='*60}")
    for position, result in enumerate(ranked, 1):
        marker = " <-- BEST" if position == 1 else ""
        print(f"  {position}. {result.candidate_name} ({result.candidate_id}): "
              f"{result.scores.overall_match}%{marker}")

    for result in ranked:
        print_scores(result)

    output_dir = Path(args.output) if args.output else Path("output")
    output_dir.mkdir(parents=True, exist_ok=True)
    out_path = output_dir / "comparison.json"
    out_path.write_text(json.dumps([r.model_dump(mode="json") for r in ranked], indent=2))
    print(f"\nSaved comparison to {out_path}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Assessment Compare - parse interview assessment PDFs and compare candidates"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show progress logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Text command
    text_parser = subparsers.add_parser("text", help="Print the text acquired from a PDF")
    text_parser.add_argument("pdf", help="Assessment PDF")
    text_parser.add_argument("--max-pages", type=int, help="Cap on pages to OCR")

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Parse an assessment PDF into JSON")
    parse_parser.add_argument("pdf", help="Assessment PDF")
    parse_parser.add_argument("--output", "-o", help="Output directory", default="output")
    parse_parser.add_argument("--max-pages", type=int, help="Cap on pages to OCR")
    parse_parser.add_argument(
        "--candidate-start", type=int, default=0,
        help="Placeholder numbering starts after this value"
    )

    # Score command
    score_parser = subparsers.add_parser("score", help="Score a parsed assessment")
    score_parser.add_argument("assessment", help="Assessment JSON file")
    score_parser.add_argument("--candidate-id", "-c", help="Candidate identifier")
    score_parser.add_argument("--output", "-o", help="Output directory", default="output")

    # Compare command
    compare_parser = subparsers.add_parser("compare", help="Rank several candidates")
    compare_parser.add_argument("sources", nargs="+", help="Assessment PDFs or JSON files")
    compare_parser.add_argument("--output", "-o", help="Output directory", default="output")
    compare_parser.add_argument("--max-pages", type=int, help="Cap on pages to OCR")
    compare_parser.add_argument(
        "--candidate-start", type=int, default=0,
        help="Placeholder numbering starts after this value"
    )

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "text":
        return cmd_text(args)
    elif args.command == "parse":
        return cmd_parse(args)
    elif args.command == "score":
        return cmd_score(args)
    elif args.command == "compare":
        return cmd_compare(args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
