"""Side-by-side comparison of several rated candidates."""

import logging

from ..models import CandidateResult, InterviewAssessment
from .engine import score_assessment

logger = logging.getLogger(__name__)

MIN_CANDIDATES = 2


def analyze_candidates(candidates: list[tuple[str, InterviewAssessment]]) -> list[CandidateResult]:
    """Score each candidate independently, keeping the input order.

    Args:
        candidates: (candidate_id, assessment) pairs

    Raises:
        ValueError: If fewer than two candidates are given
        ScoringError: If any assessment has no questions
    """
    if len(candidates) < MIN_CANDIDATES:
        raise ValueError("At least 2 candidates are required for comparison")

    results = [
        CandidateResult(
            candidate_id=candidate_id,
            candidate_name=assessment.candidate_name,
            scores=score_assessment(assessment),
        )
        for candidate_id, assessment in candidates
    ]
    logger.info("Successfully analyzed %d candidates", len(results))
    return results


def rank_candidates(results: list[CandidateResult]) -> list[CandidateResult]:
    """Order results by overall match, best first; ties keep their input order."""
    return sorted(results, key=lambda r: r.scores.overall_match, reverse=True)
