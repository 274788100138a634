"""Shared fixtures: assessment text in the exported layout."""

import pytest

from assessment_compare.models import InterviewAssessment, InterviewQuestion

EXPORT_TEXT = """Interview Questions
Generated on October 19, 2025
Mobile Developer
Department: Engineering
Experience Level: Senior
Required Skills: Swift, Kotlin, GraphQL
Resume: jane_doe_resume.pdf
Interview Assessment Summary
3 of 3 questions rated
Total Questions: 3
Total Duration: 25 minutes
Technical Questions: 2
Behavioral Questions: 1
Average Rating: 4.2/5.0
Q1
4/5.0
TECHNICAL
HARD
10 MIN
How would you structure offline sync for a mobile app with intermittent connectivity?
EVALUATION CRITERIA
Conflict resolution strategy and local persistence choices.
Interview Assessment
Rating: 4
No additional comments provided
Q2
2/5.0
BEHAVIORAL
MEDIUM
5 MIN
Tell me about a time when you disagreed with a product decision.
EVALUATION CRITERIA
Looks for ownership and constructive disagreement.
Interview Assessment
Rating: 2
Comments: Answer lacked a concrete outcome
Q3
3/5.0
TECHNICAL
EASY
10 MIN
Explain the difference between a struct and a class in Swift.
EVALUATION CRITERIA
Value vs reference semantics.
Interview Assessment
Rating: 3
No additional comments provided
"""


@pytest.fixture
def export_text() -> str:
    return EXPORT_TEXT


def _make_assessment(name: str, ratings: list[tuple[str, float]]) -> InterviewAssessment:
    """Build an assessment from (category, rating) pairs."""
    questions = [
        InterviewQuestion(
            id=f"Q{i}",
            question=f"Sample interview question number {i}?",
            category=category,
            rating=rating,
        )
        for i, (category, rating) in enumerate(ratings, 1)
    ]
    assessment = InterviewAssessment(candidate_name=name, questions=questions)
    for q in questions:
        assessment.category_breakdown.increment(q.category)
    assessment.total_questions = len(questions)
    return assessment


@pytest.fixture
def make_assessment():
    return _make_assessment
