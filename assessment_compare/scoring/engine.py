"""Scoring engine turning rated assessments into comparable percentages."""

import logging
import math

from ..exceptions import ScoringError
from ..models import (
    CATEGORIES,
    MAX_RATING,
    CandidateScores,
    InterviewAssessment,
    InterviewQuestion,
    QuestionBreakdown,
)

logger = logging.getLogger(__name__)

STRENGTH_THRESHOLD = 80
WEAKNESS_THRESHOLD = 60
# A variance of 5 (ratings swinging between 1 and 5) drives consistency to 0.
VARIANCE_PENALTY = 20
HIGH_RATING = 4
LOW_RATING = 2

STRENGTH_PHRASES = {
    "technical": "Strong technical performance",
    "behavioral": "Excellent behavioral responses",
    "situational": "Great situational judgment",
    "experience": "Relevant experience",
    "consistency": "Consistent performance across questions",
}

WEAKNESS_PHRASES = {
    "technical": "Technical skills need improvement",
    "behavioral": "Behavioral responses could be stronger",
    "situational": "Situational judgment needs work",
    "experience": "Limited relevant experience demonstrated",
    "consistency": "Inconsistent performance across questions",
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return math.floor(value + 0.5)


def finite(value: float) -> float:
    return 0 if math.isnan(value) else value


def category_score(questions: list[InterviewQuestion]) -> int:
    """Mean rating of a bucket as a rounded percentage; 0 for an empty bucket."""
    if not questions:
        return 0
    mean = sum(q.rating for q in questions) / len(questions)
    return round_half_up(mean / MAX_RATING * 100)


def population_variance(values: list[float]) -> float:
    mean = sum(values) / len(values)
    return sum((v - mean) ** 2 for v in values) / len(values)


def consistency_score(ratings: list[float]) -> int:
    return round_half_up(max(0.0, 100 - population_variance(ratings) * VARIANCE_PENALTY))


def build_summary(average: float, count: int, high: int, low: int) -> str:
    parts = [f"Candidate achieved an average rating of {average:.1f}/5.0 across {count} questions."]
    if high:
        parts.append(f"Performed well on {high} questions.")
    if low:
        parts.append(f"Needs improvement on {low} questions.")
    return " ".join(parts)


def score_assessment(assessment: InterviewAssessment) -> CandidateScores:
    """Compute category, consistency and overall scores for one assessment.

    Each stage rounds on its own: category scores and consistency are rounded
    before they are averaged into the overall match. Empty categories score 0
    and are left out of the overall average; consistency is always included.

    Raises:
        ScoringError: If the assessment has no questions
    """
    questions = assessment.questions
    if not questions:
        raise ScoringError("No questions found in assessment")

    buckets = {category: [q for q in questions if q.category == category] for category in CATEGORIES}
    scores = {category: finite(category_score(bucket)) for category, bucket in buckets.items()}

    ratings = [q.rating for q in questions]
    average = finite(sum(ratings) / len(ratings))
    consistency = finite(consistency_score(ratings))

    counted = [scores[category] for category, bucket in buckets.items() if bucket]
    counted.append(consistency)
    overall = finite(round_half_up(sum(counted) / len(counted)))

    strengths, weaknesses = [], []
    # Empty categories score 0 and therefore land in weaknesses.
    for key, value in [*scores.items(), ("consistency", consistency)]:
        if value >= STRENGTH_THRESHOLD:
            strengths.append(STRENGTH_PHRASES[key])
        elif value < WEAKNESS_THRESHOLD:
            weaknesses.append(WEAKNESS_PHRASES[key])

    high = [q for q in questions if q.rating >= HIGH_RATING]
    low = [q for q in questions if q.rating <= LOW_RATING]

    logger.debug(
        "Score calculation: buckets=%s scores=%s consistency=%s overall=%s",
        {category: len(bucket) for category, bucket in buckets.items()},
        scores,
        consistency,
        overall,
    )

    return CandidateScores(
        average_rating=round_half_up(average * 20),
        technical_score=scores["technical"],
        behavioral_score=scores["behavioral"],
        situational_score=scores["situational"],
        experience_score=scores["experience"],
        consistency_score=consistency,
        overall_match=overall,
        strengths=strengths,
        weaknesses=weaknesses,
        summary=build_summary(average, len(questions), len(high), len(low)),
        question_breakdown=QuestionBreakdown(high_performance=high, low_performance=low),
    )
