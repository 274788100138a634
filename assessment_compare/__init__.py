"""Interview assessment PDF extraction and candidate comparison."""

from .models import (
    CandidateResult,
    CandidateScores,
    CategoryBreakdown,
    InterviewAssessment,
    InterviewQuestion,
    QuestionBreakdown,
)
from .parsing import CandidateCounter, acquire_text, extract_assessment, parse_assessment_pdf
from .scoring import analyze_candidates, rank_candidates, score_assessment

__all__ = [
    "CandidateResult",
    "CandidateScores",
    "CategoryBreakdown",
    "InterviewAssessment",
    "InterviewQuestion",
    "QuestionBreakdown",
    "CandidateCounter",
    "acquire_text",
    "extract_assessment",
    "parse_assessment_pdf",
    "analyze_candidates",
    "rank_candidates",
    "score_assessment",
]
