"""Data models for interview assessments and candidate scores."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

Category = Literal["technical", "behavioral", "situational", "experience"]
Difficulty = Literal["easy", "medium", "hard"]

CATEGORIES: tuple[str, ...] = ("technical", "behavioral", "situational", "experience")
DIFFICULTIES: tuple[str, ...] = ("easy", "medium", "hard")

DEFAULT_CRITERIA = "Standard evaluation criteria"
MAX_RATING = 5


class InterviewQuestion(BaseModel):
    """A single rated question recovered from an assessment document."""

    id: str = Field(description="Sequence identifier, e.g. 'Q1'")
    question: str = Field(description="The question text as it appeared in the document")
    category: Category = Field(default="technical", description="Question category")
    difficulty: Difficulty = Field(default="medium", description="Difficulty level")
    duration: int = Field(default=5, description="Suggested time in minutes")
    rating: float = Field(default=0.0, ge=0, le=MAX_RATING, description="Interviewer rating (0-5)")
    max_rating: int = Field(default=MAX_RATING, description="Upper bound of the rating scale")
    comments: Optional[str] = Field(default=None, description="Reviewer comments, if any")
    evaluation_criteria: str = Field(
        default=DEFAULT_CRITERIA,
        description="What the interviewer was told to look for",
    )


class CategoryBreakdown(BaseModel):
    """Number of kept questions per category."""

    technical: int = 0
    behavioral: int = 0
    situational: int = 0
    experience: int = 0

    def increment(self, category: str) -> None:
        """Count one more question in the given category."""
        setattr(self, category, getattr(self, category) + 1)

    @property
    def total(self) -> int:
        """Total questions across all categories."""
        return self.technical + self.behavioral + self.situational + self.experience


class InterviewAssessment(BaseModel):
    """Structured view of one candidate's interview assessment PDF."""

    candidate_name: str = Field(description="Generated placeholder name, e.g. 'Candidate 3'")
    job_title: str = ""
    department: str = ""
    experience_level: str = ""
    required_skills: list[str] = Field(default_factory=list)
    resume_file_name: str = ""
    generated_date: datetime = Field(default_factory=datetime.now)

    total_questions: int = Field(default=0, description="Number of questions actually kept")
    reported_total_questions: int = Field(
        default=0, description="Question count as stated by the document header"
    )
    total_duration: int = Field(default=0, description="Total minutes as stated by the document")
    questions_rated: int = Field(default=0, description="'N of M rated' figure from the document")
    average_rating: float = Field(
        default=0.0,
        description="Average rating as stated by the document; not recomputed from questions",
    )

    questions: list[InterviewQuestion] = Field(default_factory=list)
    category_breakdown: CategoryBreakdown = Field(default_factory=CategoryBreakdown)


class QuestionBreakdown(BaseModel):
    """Questions grouped by how well the candidate did on them."""

    high_performance: list[InterviewQuestion] = Field(
        default_factory=list, description="Questions rated 4 or higher"
    )
    low_performance: list[InterviewQuestion] = Field(
        default_factory=list, description="Questions rated 2 or lower"
    )


class CandidateScores(BaseModel):
    """Comparable percentage scores derived from an assessment."""

    average_rating: int = Field(default=0, description="Mean rating mapped onto 0-100")
    technical_score: int = Field(default=0, ge=0, le=100)
    behavioral_score: int = Field(default=0, ge=0, le=100)
    situational_score: int = Field(default=0, ge=0, le=100)
    experience_score: int = Field(default=0, ge=0, le=100)
    consistency_score: int = Field(
        default=0, ge=0, le=100, description="How uniform the ratings are across questions"
    )
    overall_match: int = Field(default=0, ge=0, le=100)
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    summary: str = ""
    question_breakdown: QuestionBreakdown = Field(default_factory=QuestionBreakdown)


class CandidateResult(BaseModel):
    """Scores for one candidate in a comparison."""

    candidate_id: str
    candidate_name: str = ""
    scores: CandidateScores
