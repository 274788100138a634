"""Scoring and comparison of parsed assessments."""

from .comparison import analyze_candidates, rank_candidates
from .engine import score_assessment

__all__ = ["analyze_candidates", "rank_candidates", "score_assessment"]
