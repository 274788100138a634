"""Heuristic extraction of interview assessments from exported PDF text.

The exported assessment layout places a standalone ``<rating>/5.0`` line directly
before each question block. The extractor is a single forward scan over the
trimmed, non-empty lines with two states: idle (no open question) and
accumulating (a question draft is open). A rating line finalizes the open draft
and opens the next one. Everything else is recognised with short, bounded
lookahead so that both "LABEL / value on next line" and "Label: value" layouts
are accepted.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..exceptions import (
    MINIMAL_TEXT_MESSAGE,
    NO_QUESTIONS_MESSAGE,
    NO_TEXT_MESSAGE,
    AssessmentExtractionError,
    TextAcquisitionError,
)
from ..models import (
    DEFAULT_CRITERIA,
    MAX_RATING,
    CategoryBreakdown,
    InterviewAssessment,
    InterviewQuestion,
)
from . import patterns as p

logger = logging.getLogger(__name__)

MIN_TEXT_LENGTH = 50
MIN_QUESTION_LENGTH = 10
LOOKAHEAD_LINES = 4
MAX_NAME_LENGTH = 50
DEFAULT_JOB_TITLE = "Interview Position"


class CandidateCounter:
    """Numbers placeholder candidate names, one number per successful parse.

    Owned by whatever processes a batch of uploads, so numbering is explicit
    and can be pinned in tests.
    """

    def __init__(self, start: int = 0):
        self._value = start

    @property
    def current(self) -> int:
        """The last number handed out."""
        return self._value

    @property
    def next_number(self) -> int:
        """The number the next successful parse will receive."""
        return self._value + 1

    def advance(self) -> int:
        """Commit the next number and return it."""
        self._value += 1
        return self._value


@dataclass
class QuestionDraft:
    """A question block that is still being read."""

    id: str
    rating: float
    question: str = ""
    category: str = "technical"
    difficulty: Optional[str] = None
    duration: int = 5
    comments: Optional[str] = None
    evaluation_criteria: Optional[str] = None

    def finalize(self) -> Optional[InterviewQuestion]:
        """Fill defaults and build the question, or None if the text is too short."""
        text = self.question.strip()
        if len(text) <= MIN_QUESTION_LENGTH:
            return None

        category = self.category
        if category == "technical":
            category = sniff_category(text)

        return InterviewQuestion(
            id=self.id,
            question=text,
            category=category,
            difficulty=self.difficulty or "medium",
            duration=self.duration,
            rating=self.rating,
            max_rating=MAX_RATING,
            comments=self.comments,
            evaluation_criteria=self.evaluation_criteria or DEFAULT_CRITERIA,
        )


def sniff_category(text: str) -> str:
    """Guess a category from wording; behavioral hints win over situational ones."""
    lowered = text.lower()
    if any(hint in lowered for hint in p.BEHAVIORAL_HINTS):
        return "behavioral"
    if any(hint in lowered for hint in p.SITUATIONAL_HINTS):
        return "situational"
    return "technical"


def clamp_rating(value: float) -> float:
    return min(max(value, 0.0), float(MAX_RATING))


def parse_date(value: str) -> Optional[datetime]:
    value = value.strip()
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        pass
    for fmt in p.DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def lookahead(lines: list[str], index: int, count: int = LOOKAHEAD_LINES) -> list[str]:
    """Up to ``count`` lines after ``index``, without consuming them."""
    return lines[index + 1:index + 1 + count]


def window(lines: list[str], index: int, count: int = LOOKAHEAD_LINES) -> list[str]:
    """The line at ``index`` plus up to ``count`` following lines."""
    return lines[index:index + 1 + count]


def split_skills(value: str) -> list[str]:
    skills = [skill.strip() for skill in value.split(",") if skill.strip()]
    return skills or [value.strip()]


def clean_candidate_name(name: str, fallback: str) -> str:
    """Replace names that are clearly OCR debris with the generated placeholder."""
    lowered = name.lower()
    if not name or "assessment" in lowered or "unknown" in lowered or len(name) > MAX_NAME_LENGTH:
        return fallback
    return name


class AssessmentExtractor:
    """Scan state for turning one document's text into an InterviewAssessment."""

    def __init__(self, text: str, sequence_number: int):
        self.lines = [line.strip() for line in text.split("\n") if line.strip()]
        self.placeholder_name = f"Candidate {sequence_number}"
        self.assessment = InterviewAssessment(candidate_name=self.placeholder_name)
        self.current: Optional[QuestionDraft] = None
        self.question_index = 0

    def extract(self) -> InterviewAssessment:
        """Run the scan and return the validated assessment."""
        logger.info("Parsing assessment text with %d lines", len(self.lines))

        for index, line in enumerate(self.lines):
            next_line = self.lines[index + 1] if index + 1 < len(self.lines) else ""

            self._read_header(line, next_line)
            self._infer_job_title(line)
            self._read_summary(line)
            if p.is_trigger(line):
                self._start_question(index, line)
            self._capture_question_text(line, require_question_mark=True)
            self._apply_overrides(line)
            self._apply_duration(line)
            self._capture_question_text(line, require_question_mark=False)
            self._capture_criteria(index, line)
            self._refine_rating_and_comments(index, line)

        self._finalize_current()
        return self._validated()

    # -- header -----------------------------------------------------------

    def _labelled_value(self, line, next_line, labels, inline) -> Optional[str]:
        if line in labels:
            return next_line or None
        match = inline.match(line)
        if match:
            return match.group(1).strip() or next_line or None
        return None

    def _read_header(self, line: str, next_line: str) -> None:
        assessment = self.assessment

        date_match = p.DATE_INLINE.search(line)
        if date_match:
            parsed = parse_date(date_match.group(1))
            if parsed is not None:
                assessment.generated_date = parsed
            else:
                logger.info("Could not parse date: %s", date_match.group(1))

        title = self._labelled_value(line, next_line, p.JOB_TITLE_LABELS, p.JOB_TITLE_INLINE)
        if title:
            assessment.job_title = title

        department = self._labelled_value(line, next_line, (p.DEPARTMENT_LABEL,), p.DEPARTMENT_INLINE)
        if department:
            assessment.department = department
            return
        experience = self._labelled_value(line, next_line, (p.EXPERIENCE_LABEL,), p.EXPERIENCE_INLINE)
        if experience:
            assessment.experience_level = experience
            return
        skills = self._labelled_value(line, next_line, (p.SKILLS_LABEL,), p.SKILLS_INLINE)
        if skills:
            assessment.required_skills = split_skills(skills)
            return
        resume = self._labelled_value(line, next_line, (p.RESUME_LABEL,), p.RESUME_INLINE)
        if resume:
            assessment.resume_file_name = resume

    def _infer_job_title(self, line: str) -> None:
        if self.assessment.job_title or not p.ROLE_NOUN.match(line):
            return
        title = line
        # OCR drops the space between title-cased words in this one observed case.
        if title == "MobileDeveloper":
            title = "Mobile Developer"
        self.assessment.job_title = title
        logger.info("Found job title: %s", title)

    def _read_summary(self, line: str) -> None:
        assessment = self.assessment

        match = p.TOTAL_QUESTIONS.search(line)
        if match:
            assessment.reported_total_questions = int(p.first_group(match))
        # Per-question "10 MIN" lines would overwrite the document total.
        match = p.TOTAL_DURATION.search(line) if self.current is None else None
        if match:
            assessment.total_duration = int(p.first_group(match))
        match = p.AVERAGE_RATING.search(line)
        if match:
            assessment.average_rating = float(p.first_group(match))
        match = p.QUESTIONS_RATED.search(line)
        if match:
            assessment.questions_rated = int(match.group(1))

    # -- question blocks --------------------------------------------------

    def _start_question(self, index: int, line: str) -> None:
        self._finalize_current()

        self.question_index += 1
        rating = clamp_rating(float(p.RATING_TRIGGER.match(line).group(1)))
        self.current = QuestionDraft(id=f"Q{self.question_index}", rating=rating)
        logger.debug("Found question %s with rating %s", self.current.id, rating)

        for candidate in lookahead(self.lines, index):
            if p.looks_like_question(candidate):
                self.current.question = candidate
                break

    def _capture_question_text(self, line: str, require_question_mark: bool) -> None:
        if self.current is None or self.current.question:
            return
        if p.could_be_question(line, require_question_mark):
            self.current.question = line
            logger.debug("Set question text for %s: %.50s", self.current.id, line)

    def _apply_overrides(self, line: str) -> None:
        if self.current is None:
            return
        match = p.CATEGORY_LINE.match(line) or p.CATEGORY_INLINE.search(line)
        if match:
            self.current.category = match.group(1).lower()
        match = p.DIFFICULTY_LINE.match(line) or p.DIFFICULTY_INLINE.search(line)
        if match:
            self.current.difficulty = match.group(1).lower()

    def _apply_duration(self, line: str) -> None:
        if self.current is None:
            return
        match = p.DURATION.search(line)
        if match:
            self.current.duration = int(match.group(1))

    def _capture_criteria(self, index: int, line: str) -> None:
        if self.current is None:
            return
        if line == p.CRITERIA_LABEL:
            for candidate in lookahead(self.lines, index):
                if p.looks_like_criteria(candidate):
                    self.current.evaluation_criteria = candidate
                    break
            return
        match = p.CRITERIA_INLINE.search(line)
        if match:
            self.current.evaluation_criteria = match.group(1).strip()

    def _refine_rating_and_comments(self, index: int, line: str) -> None:
        if self.current is None:
            return
        if p.ASSESSMENT_MARKER not in line and "Comments:" not in line and "Feedback:" not in line:
            return

        for candidate in window(self.lines, index):
            if "Rating:" in candidate or "Score:" in candidate:
                match = p.RATING_REFINE.search(candidate)
                if match:
                    self.current.rating = clamp_rating(float(match.group(1)))
            if "Comments:" in candidate or "Feedback:" in candidate:
                match = p.COMMENT_REFINE.search(candidate)
                if match and p.COMMENT_PLACEHOLDER not in match.group(1):
                    self.current.comments = match.group(1).strip()

    def _finalize_current(self) -> None:
        draft, self.current = self.current, None
        if draft is None or not draft.question:
            return
        question = draft.finalize()
        if question is None:
            logger.debug("Dropping %s: question text too short", draft.id)
            return
        self.assessment.questions.append(question)
        self.assessment.category_breakdown.increment(question.category)

    # -- post-processing --------------------------------------------------

    def _validated(self) -> InterviewAssessment:
        assessment = self.assessment

        if not assessment.job_title:
            assessment.job_title = DEFAULT_JOB_TITLE

        valid = [q for q in assessment.questions if len(q.question) > MIN_QUESTION_LENGTH and q.category]
        if len(valid) != len(assessment.questions):
            assessment.questions = valid
            assessment.category_breakdown = CategoryBreakdown()
            for question in valid:
                assessment.category_breakdown.increment(question.category)
        assessment.total_questions = len(valid)

        assessment.candidate_name = clean_candidate_name(
            assessment.candidate_name, self.placeholder_name
        )

        logger.info("Parsed %d valid questions", len(valid))
        if not valid:
            raise AssessmentExtractionError(NO_QUESTIONS_MESSAGE)
        return assessment


def extract_assessment(raw_text: str, sequence_number: int) -> InterviewAssessment:
    """Build an InterviewAssessment from raw document text.

    Args:
        raw_text: Text obtained from the PDF (text layer, OCR or CLI tool)
        sequence_number: Number used for the placeholder candidate name

    Raises:
        TextAcquisitionError: If the text is empty or too short to be a document
        AssessmentExtractionError: If no valid question survives the scan
    """
    stripped = raw_text.strip() if raw_text else ""
    logger.info("Raw text length: %d, trimmed: %d", len(raw_text or ""), len(stripped))
    if not stripped:
        raise TextAcquisitionError(NO_TEXT_MESSAGE)
    if len(stripped) < MIN_TEXT_LENGTH:
        raise TextAcquisitionError(MINIMAL_TEXT_MESSAGE.format(length=len(stripped)))

    return AssessmentExtractor(raw_text, sequence_number).extract()
